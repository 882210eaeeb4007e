"""Immutable workspace snapshot shared by every request."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from i18nlens.config import I18nConfig
from i18nlens.localisation import TranslationIndex, TranslationStore
from i18nlens.usage import KeyFinder


@dataclass(frozen=True, slots=True)
class WorkspaceState:
    """Configuration, key finder and translation store of one initialised workspace.

    Replaced wholesale whenever any part changes, the store included;
    `generation` increases by one with every replacement.
    """

    root: Path
    config: I18nConfig
    key_finder: KeyFinder
    store: TranslationStore
    generation: int = 1

    @property
    def source_locale(self) -> str:
        return self.config.source_locale

    @property
    def index(self) -> TranslationIndex:
        return self.store.index


def build_workspace_state(root: Path, config: I18nConfig, generation: int = 1) -> WorkspaceState:
    """Scan translations for `config` and bundle everything into a new state."""
    store = TranslationStore(root)
    store.scan_and_load(config.locale_paths)
    return WorkspaceState(
        root=root,
        config=config,
        key_finder=KeyFinder(config.function_patterns),
        store=store,
        generation=generation,
    )


def rescan_translations(state: WorkspaceState) -> WorkspaceState:
    """A copy of `state` with a freshly scanned store; `state` itself is untouched."""
    store = TranslationStore(state.root, index=state.index)
    store.reload(state.config.locale_paths)
    return replace(state, store=store)
