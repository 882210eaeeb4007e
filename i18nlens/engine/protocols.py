"""Contracts between the engine and the host that embeds it."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Literal, Protocol, TypeAlias

if TYPE_CHECKING:
    from i18nlens.diagnostics import Diagnostic
    from i18nlens.engine.documents import Document
    from i18nlens.engine.results import CompletionItem, InlayHint
    from i18nlens.localisation import TranslationLocation
    from i18nlens.text import LinePosition

MessageLevel: TypeAlias = Literal["error", "warning", "info", "log"]


class DocumentSource(Protocol):
    """Open editor documents, keyed by URI."""

    def open(self, uri: str, text: str, version: int) -> Document: ...

    def update(self, uri: str, text: str, version: int) -> Document: ...

    def close(self, uri: str) -> None: ...

    def get(self, uri: str) -> Document | None: ...

    def uris(self) -> tuple[str, ...]: ...


class DiagnosticsPublisher(Protocol):
    def publish_diagnostics(self, uri: str, diagnostics: Sequence[Diagnostic], version: int | None) -> None: ...


class MessageLogger(Protocol):
    """User-visible messages, as opposed to the structured process log."""

    def log_message(self, level: MessageLevel, message: str) -> None: ...


class DocumentIntelligence(Protocol):
    """Editor features answered for documents in a workspace."""

    def compute_diagnostics(self, text: str) -> list[Diagnostic]: ...

    def hover(self, uri: str, line: int, character: int) -> str | None: ...

    def completion(self, uri: str, line: int, character: int) -> list[CompletionItem]: ...

    def definition(self, uri: str, line: int, character: int) -> TranslationLocation | None: ...

    def inlay_hints(
        self,
        uri: str,
        line_range: tuple[LinePosition, LinePosition] | None = None,
    ) -> list[InlayHint]: ...
