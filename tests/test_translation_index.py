from pathlib import Path

from i18nlens.localisation import (
    LoadedResource,
    TranslationIndex,
    TranslationStore,
    build_translation_index,
    find_key_line,
)
from tests._shared_cases import make_basic_workspace, write_json, write_tree


def _index() -> TranslationIndex:
    return build_translation_index(
        (
            LoadedResource(Path("locales/fr.json"), "fr", {"greeting": "Bonjour"}),
            LoadedResource(Path("locales/en.json"), "en", {"greeting": "Hello", "farewell": "Bye"}),
            LoadedResource(Path("locales/de.json"), "de", {"greeting": "Hallo", "farewell": "Tschüss"}),
        )
    )


def test_locales_and_keys_are_sorted() -> None:
    index = _index()

    assert index.get_locales() == ("de", "en", "fr")
    assert index.get_all_keys() == ("farewell", "greeting")
    assert index.key_count == 2
    assert not index.is_empty


def test_lookup_by_key_and_locale() -> None:
    index = _index()

    assert index.get_translation("greeting", "fr") == "Bonjour"
    assert index.get_translation("farewell", "fr") is None
    assert index.get_translation("greeting", "it") is None
    entry = index.get_entry("farewell", "de")
    assert entry is not None
    assert entry.value == "Tschüss"
    assert entry.locale == "de"
    assert entry.file_path == Path("locales/de.json")


def test_key_exists_and_missing_locales_agree() -> None:
    index = _index()

    assert index.key_exists("greeting")
    assert index.missing_locales("greeting") == ()
    assert index.key_exists("farewell")
    assert index.missing_locales("farewell") == ("fr",)
    assert not index.key_exists("unknown")
    assert index.missing_locales("unknown") == index.get_locales()

    for key in ("greeting", "farewell", "unknown"):
        assert index.key_exists(key) == (len(index.missing_locales(key)) < len(index.get_locales()))


def test_all_translations_in_locale_order() -> None:
    translations = _index().get_all_translations("farewell")

    assert list(translations) == ["de", "en"]
    assert translations["en"].value == "Bye"
    assert _index().get_all_translations("unknown") == {}


def test_empty_index() -> None:
    index = TranslationIndex()

    assert index.is_empty
    assert index.get_locales() == ()
    assert not index.key_exists("anything")
    assert index.missing_locales("anything") == ()


def test_find_key_line_matches_last_segment(tmp_path: Path) -> None:
    path = write_json(tmp_path / "en.json", {"home": {"title": "Hi", "body": "Text"}})

    assert find_key_line(path, "home.body") == 3
    assert find_key_line(path, "home") == 1
    assert find_key_line(path, "home.missing") is None


def test_find_key_line_in_yaml_and_php(tmp_path: Path) -> None:
    write_tree(
        tmp_path,
        {
            "en.yaml": "home:\n  title: Hi\n",
            "en.php": "<?php\nreturn [\n    'title' => 'Hi',\n];\n",
        },
    )

    assert find_key_line(tmp_path / "en.yaml", "home.title") == 1
    assert find_key_line(tmp_path / "en.php", "title") == 2


def test_find_key_line_first_occurrence_wins(tmp_path: Path) -> None:
    path = write_json(tmp_path / "en.json", {"a": {"title": "A"}, "b": {"title": "B"}})

    assert find_key_line(path, "b.title") == 2


def test_find_key_line_of_unreadable_file_is_none(tmp_path: Path) -> None:
    assert find_key_line(tmp_path / "gone.json", "a") is None


def test_translation_location_of_loaded_entry(tmp_path: Path) -> None:
    make_basic_workspace(tmp_path)
    store = TranslationStore(tmp_path)
    store.scan_and_load(("locales",))

    location = store.get_translation_location("home.title", "fr")

    assert location is not None
    assert location.file_path == tmp_path / "locales" / "fr.json"
    assert location.locale == "fr"
    assert location.line == 5
    assert store.get_translation_location("home.subtitle", "fr") is None


def test_store_reload_swaps_index(tmp_path: Path) -> None:
    make_basic_workspace(tmp_path)
    store = TranslationStore(tmp_path)
    assert store.index.is_empty
    assert store.last_scan is None

    store.scan_and_load(("locales",))
    before = store.index
    assert store.key_exists("common.goodbye")
    assert store.missing_locales("common.goodbye") == ("fr",)

    write_json(tmp_path / "locales" / "fr.json", {"common": {"hello": "Salut", "goodbye": "Au revoir"}})
    scan = store.reload(("locales",))

    assert store.index is scan.index
    assert store.index is not before
    assert store.get_translation("common.hello", "fr") == "Salut"
    assert store.missing_locales("common.goodbye") == ()
    assert before.get_translation("common.hello", "fr") == "Bonjour"
    assert store.last_scan is scan
    assert store.get_locales() == ("en", "fr")
    assert "home.title" in store.get_all_keys()
    assert set(store.get_all_translations("common.hello")) == {"en", "fr"}
