from pathlib import Path
import threading

import pytest

import i18nlens.engine.engine as engine_module
from i18nlens.engine import I18nEngine, WorkspaceState, rescan_translations
from i18nlens.localisation import TranslationStore
from tests._shared_cases import make_basic_workspace, write_json

TEXT = 'a = t("common.hello")\nb = t("home.title")\n'
READER_THREADS = 4
RELOADS = 25


def test_readers_never_see_false_missing_keys_during_reloads(tmp_path: Path) -> None:
    engine = I18nEngine()
    engine.initialize(make_basic_workspace(tmp_path))
    engine.did_open("file:///work/app.ts", TEXT, 1)

    stop = threading.Event()
    failures: list[str] = []

    def read() -> None:
        while not stop.is_set():
            diagnostics = engine.compute_diagnostics(TEXT)
            if diagnostics:
                failures.append(diagnostics[0].message)
                return
            if engine.hover("file:///work/app.ts", 0, 8) is None:
                failures.append("hover lost common.hello")
                return

    readers = [threading.Thread(target=read) for _ in range(READER_THREADS)]
    for reader in readers:
        reader.start()
    try:
        for index in range(RELOADS):
            if index % 5 == 0:
                engine.reload_configuration()
            else:
                engine.reload_translations()
    finally:
        stop.set()
        for reader in readers:
            reader.join()

    assert failures == []
    assert engine.generation == RELOADS + 1


def test_store_readers_keep_their_snapshot(tmp_path: Path) -> None:
    make_basic_workspace(tmp_path)
    store = TranslationStore(tmp_path)
    store.scan_and_load(("locales",))
    snapshot = store.index

    write_json(tmp_path / "locales" / "en.json", {"renamed": "New"})
    store.reload(("locales",))

    assert snapshot.key_exists("common.hello")
    assert snapshot.get_translation("common.hello", "en") == "Hello"
    assert not store.key_exists("home.subtitle")
    assert store.key_exists("renamed")


def test_every_concurrent_reload_is_published_once(tmp_path: Path) -> None:
    engine = I18nEngine()
    engine.initialize(make_basic_workspace(tmp_path))

    writers = [threading.Thread(target=engine.reload_translations) for _ in range(8)]
    for writer in writers:
        writer.start()
    for writer in writers:
        writer.join()

    assert engine.generation == 9
    state = engine.state
    assert state is not None
    assert state.index.get_translation("common.hello", "fr") == "Bonjour"


def test_reload_leaves_previous_state_untouched(tmp_path: Path) -> None:
    engine = I18nEngine()
    before = engine.initialize(make_basic_workspace(tmp_path))
    assert before is not None
    write_json(tmp_path / "locales" / "fr.json", {"common": {"hello": "Salut"}})

    after = engine.reload_translations()

    assert after is not None
    assert after.store is not before.store
    assert before.index.get_translation("common.hello", "fr") == "Bonjour"
    assert after.index.get_translation("common.hello", "fr") == "Salut"


def test_build_superseded_by_another_writer_is_redone(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    engine = I18nEngine()
    engine.initialize(make_basic_workspace(tmp_path))
    write_json(tmp_path / ".i18n-ally.json", {"sourceLocale": "fr"})
    calls: list[str] = []

    def rescan_while_reconfiguring(state: WorkspaceState) -> WorkspaceState:
        calls.append(state.source_locale)
        if len(calls) == 1:
            engine.reload_configuration()
        return rescan_translations(state)

    monkeypatch.setattr(engine_module, "rescan_translations", rescan_while_reconfiguring)

    state = engine.reload_translations()

    assert calls == ["en", "fr"]
    assert state is not None
    assert state.generation == 3
    assert state.source_locale == "fr"
