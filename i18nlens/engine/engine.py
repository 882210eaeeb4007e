"""Translation-aware document intelligence for one workspace."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from dataclasses import replace
from pathlib import Path
from urllib.parse import unquote, urlparse

import structlog

from i18nlens.config import is_config_path, load_config_from_workspace
from i18nlens.diagnostics import Diagnostic
from i18nlens.engine.documents import DocumentStore
from i18nlens.engine.protocols import DiagnosticsPublisher, DocumentSource, MessageLevel, MessageLogger
from i18nlens.engine.results import (
    MAX_COMPLETION_ITEMS,
    CompletionItem,
    InlayHint,
    truncate_text,
)
from i18nlens.engine.state import WorkspaceState, build_workspace_state, rescan_translations
from i18nlens.lint import compute_diagnostics as classify_text
from i18nlens.localisation import TranslationLocation
from i18nlens.resources import is_resource_path
from i18nlens.text import LinePosition
from i18nlens.usage import FoundKey, extract_completion_prefix, line_at

logger = structlog.get_logger()

CLOSING_QUOTES = frozenset("'\"")


class I18nEngine:
    """Answers hover, completion, definition, inlay hint and diagnostic queries.

    Every query reads the current `WorkspaceState` once and works on that
    snapshot. Initialisation and reloads build a replacement without holding
    any lock, then take the swap lock only to check their base and assign.
    """

    def __init__(
        self,
        documents: DocumentSource | None = None,
        publisher: DiagnosticsPublisher | None = None,
        message_logger: MessageLogger | None = None,
    ) -> None:
        self._documents = documents if documents is not None else DocumentStore()
        self._publisher = publisher
        self._message_logger = message_logger
        self._state: WorkspaceState | None = None
        self._swap_lock = threading.Lock()

    @property
    def documents(self) -> DocumentSource:
        return self._documents

    @property
    def state(self) -> WorkspaceState | None:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    @property
    def generation(self) -> int:
        state = self._state
        return state.generation if state is not None else 0

    # Lifecycle

    def initialize(self, root: str | Path | None) -> WorkspaceState | None:
        if root is None:
            logger.warning("workspace_root_missing")
            self._log_message("warning", "No workspace root; translation features are disabled.")
            return None

        workspace_root = Path(root)
        def build(_: WorkspaceState | None) -> WorkspaceState:
            return build_workspace_state(workspace_root, load_config_from_workspace(workspace_root))

        state = self._publish(build)
        if state is not None:
            self._report_loaded("initialized", state)
        return state

    def reload_translations(self) -> WorkspaceState | None:
        """Rescan resources with the current configuration."""
        state = self._publish(_rescan)
        if state is not None:
            self._report_loaded("translations_reloaded", state)
        return state

    def reload_configuration(self) -> WorkspaceState | None:
        """Re-read configuration, then rebuild the key finder and the index."""
        state = self._publish(_reconfigure)
        if state is not None:
            self._report_loaded("configuration_reloaded", state)
        return state

    def did_change_watched_files(self, uris: Iterable[str]) -> bool:
        """React to file-system changes; returns whether anything was reloaded.

        A configuration change reloads everything. Otherwise a change to any
        resource file reloads translations only.
        """
        if self._state is None:
            return False

        paths = [_uri_to_path(uri) for uri in uris]
        if any(is_config_path(path) for path in paths):
            logger.info("config_changed", files=[str(path) for path in paths])
            self.reload_configuration()
        elif any(is_resource_path(path) for path in paths):
            logger.info("translations_changed", files=[str(path) for path in paths])
            self.reload_translations()
        else:
            return False

        self._republish_open_documents()
        return True

    def _publish(self, build: Callable[[WorkspaceState | None], WorkspaceState | None]) -> WorkspaceState | None:
        """Build a replacement off-lock, then swap it in if the state it was built from is still current.

        When another writer published first, the build is redone on top of that
        newer state so neither change is lost.
        """
        while True:
            base = self._state
            built = build(base)
            if built is None:
                return None
            with self._swap_lock:
                if self._state is base:
                    state = replace(built, generation=(base.generation if base is not None else 0) + 1)
                    self._state = state
                    return state
            logger.info("workspace_state_superseded", generation=self.generation)

    # Documents

    def did_open(self, uri: str, text: str, version: int) -> list[Diagnostic]:
        self._documents.open(uri, text, version)
        return self.diagnose_document(uri)

    def did_change(self, uri: str, text: str, version: int) -> list[Diagnostic]:
        self._documents.update(uri, text, version)
        return self.diagnose_document(uri)

    def did_close(self, uri: str) -> None:
        self._documents.close(uri)
        if self._publisher is not None:
            self._publisher.publish_diagnostics(uri, [], None)

    def diagnose_document(self, uri: str) -> list[Diagnostic]:
        """Compute and publish diagnostics for an open document."""
        document = self._documents.get(uri)
        if document is None:
            return []
        diagnostics = self.compute_diagnostics(document.text)
        if self._publisher is not None:
            self._publisher.publish_diagnostics(uri, diagnostics, document.version)
        return diagnostics

    # Queries

    def compute_diagnostics(self, text: str) -> list[Diagnostic]:
        state = self._state
        if state is None:
            return []
        return classify_text(text, state.key_finder, state.index)

    def hover(self, uri: str, line: int, character: int) -> str | None:
        """Markdown listing every translation of the key under the cursor."""
        state = self._state
        found_key = self._key_at(state, uri, line, character)
        if state is None or found_key is None:
            return None

        translations = state.index.get_all_translations(found_key.key)
        if not translations:
            return None

        source_locale = state.source_locale
        parts = [f"### \U0001f310 `{found_key.key}`\n\n"]
        source_entry = translations.get(source_locale)
        if source_entry is not None:
            parts.append(f"**{source_locale}**: {source_entry.value}\n\n")
        parts.append("---\n\n")
        for locale, entry in translations.items():
            if locale != source_locale:
                parts.append(f"**{locale}**: {entry.value}\n\n")
        return "".join(parts)

    def completion(self, uri: str, line: int, character: int) -> list[CompletionItem]:
        state = self._state
        document = self._documents.get(uri)
        if state is None or document is None:
            return []

        prefix = extract_completion_prefix(line_at(document.text, line), character)
        if prefix is None:
            return []

        index = state.index
        source_locale = state.source_locale
        items: list[CompletionItem] = []
        for key in index.get_all_keys():
            if not key.startswith(prefix):
                continue
            translation = index.get_translation(key, source_locale)
            items.append(
                CompletionItem(
                    label=key,
                    insert_text=key,
                    detail=translation,
                    documentation=f"**{source_locale}**: {translation}" if translation is not None else None,
                )
            )
            if len(items) >= MAX_COMPLETION_ITEMS:
                break
        return items

    def definition(self, uri: str, line: int, character: int) -> TranslationLocation | None:
        state = self._state
        found_key = self._key_at(state, uri, line, character)
        if state is None or found_key is None:
            return None
        return state.index.get_translation_location(found_key.key, state.source_locale)

    def inlay_hints(
        self,
        uri: str,
        line_range: tuple[LinePosition, LinePosition] | None = None,
    ) -> list[InlayHint]:
        """`= value` hints after each key with a source-locale translation.

        With a non-empty `line_range`, only keys overlapping it are hinted.
        """
        state = self._state
        if state is None:
            return []
        document = self._documents.get(uri)
        if document is None:
            logger.debug("inlay_hints_document_missing", uri=uri)
            return []

        index = state.index
        source_locale = state.source_locale
        window = line_range if line_range is not None and line_range[0] != line_range[1] else None

        hints: list[InlayHint] = []
        for found_key in state.key_finder.find_keys(document.text):
            span = found_key.span
            if window is not None and not (window[0] <= span.end and span.start <= window[1]):
                continue
            translation = index.get_translation(found_key.key, source_locale)
            if translation is None:
                continue
            hints.append(
                InlayHint(
                    position=LinePosition(found_key.line, _hint_character(document.text, found_key)),
                    label=f"= {truncate_text(translation)}",
                )
            )
        return hints

    def _key_at(self, state: WorkspaceState | None, uri: str, line: int, character: int) -> FoundKey | None:
        if state is None:
            return None
        document = self._documents.get(uri)
        if document is None:
            return None
        return state.key_finder.find_key_at_position(document.text, line, character)

    def _republish_open_documents(self) -> None:
        if self._publisher is None:
            return
        for uri in self._documents.uris():
            self.diagnose_document(uri)

    def _report_loaded(self, event: str, state: WorkspaceState) -> None:
        index = state.index
        locales = index.get_locales()
        logger.info(
            event,
            root=str(state.root),
            generation=state.generation,
            locales=list(locales),
            keys=index.key_count,
        )
        self._log_message("info", f"Loaded translations: {len(locales)} locales, {index.key_count} keys")

    def _log_message(self, level: MessageLevel, message: str) -> None:
        if self._message_logger is not None:
            self._message_logger.log_message(level, message)


def _rescan(current: WorkspaceState | None) -> WorkspaceState | None:
    return rescan_translations(current) if current is not None else None


def _reconfigure(current: WorkspaceState | None) -> WorkspaceState | None:
    if current is None:
        return None
    return build_workspace_state(current.root, load_config_from_workspace(current.root))


def _hint_character(text: str, found_key: FoundKey) -> int:
    line = line_at(text, found_key.line)
    if found_key.end_char < len(line) and line[found_key.end_char] in CLOSING_QUOTES:
        return found_key.end_char + 1
    return found_key.end_char


def _uri_to_path(uri: str) -> Path:
    parsed = urlparse(uri)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    return Path(uri)
