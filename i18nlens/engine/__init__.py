"""Workspace engine answering editor queries about translation keys."""

from i18nlens.engine.documents import Document, DocumentStore
from i18nlens.engine.engine import I18nEngine
from i18nlens.engine.protocols import (
    DiagnosticsPublisher,
    DocumentIntelligence,
    DocumentSource,
    MessageLevel,
    MessageLogger,
)
from i18nlens.engine.results import (
    INLAY_HINT_MAX_CHARS,
    MAX_COMPLETION_ITEMS,
    CompletionItem,
    InlayHint,
    truncate_text,
)
from i18nlens.engine.state import WorkspaceState, build_workspace_state, rescan_translations

__all__ = [
    "INLAY_HINT_MAX_CHARS",
    "MAX_COMPLETION_ITEMS",
    "CompletionItem",
    "DiagnosticsPublisher",
    "Document",
    "DocumentIntelligence",
    "DocumentSource",
    "DocumentStore",
    "I18nEngine",
    "InlayHint",
    "MessageLevel",
    "MessageLogger",
    "WorkspaceState",
    "build_workspace_state",
    "rescan_translations",
    "truncate_text",
]
