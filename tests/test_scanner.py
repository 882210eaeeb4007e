from pathlib import Path

from i18nlens.diagnostics import RESOURCE_READ_FAILED
from i18nlens.localisation import (
    MAX_SCAN_DEPTH,
    collect_resource_files,
    scan_locale_directories,
)
from tests._shared_cases import NESTED_PHP, make_basic_workspace, write_tree


def test_scan_loads_locales_from_configured_directories(tmp_path: Path) -> None:
    make_basic_workspace(tmp_path)

    scan = scan_locale_directories(tmp_path, ("locales", "does/not/exist"))

    assert scan.index.get_locales() == ("en", "fr")
    assert scan.index.get_translation("common.hello", "fr") == "Bonjour"
    assert scan.loaded_files == (tmp_path / "locales" / "en.json", tmp_path / "locales" / "fr.json")
    assert scan.failures == ()
    assert scan.skipped_files == ()


def test_scan_mixes_formats_and_directory_locales(tmp_path: Path) -> None:
    write_tree(
        tmp_path,
        {
            "lang/en/auth.php": NESTED_PHP,
            "lang/de/auth.yaml": "auth:\n  failed: Falsch\n",
            "lang/fr/messages.json": '{"auth": {"failed": "Non"}}',
        },
    )

    scan = scan_locale_directories(tmp_path, ("lang",))

    assert scan.index.get_locales() == ("de", "en", "fr")
    assert scan.index.get_translation("auth.failed", "de") == "Falsch"
    assert scan.index.get_translation("auth.retries", "en") == "3"
    assert scan.index.missing_locales("auth.retries") == ("de", "fr")


def test_files_without_locale_are_skipped(tmp_path: Path) -> None:
    write_tree(
        tmp_path,
        {
            "locales/en.json": '{"a": "A"}',
            "locales/settings.json": '{"b": "B"}',
            "locales/notes.txt": "not a resource",
        },
    )

    scan = scan_locale_directories(tmp_path, ("locales",))

    assert scan.index.get_all_keys() == ("a",)
    assert scan.skipped_files == (tmp_path / "locales" / "settings.json",)


def test_malformed_files_are_reported_and_do_not_abort(tmp_path: Path) -> None:
    write_tree(
        tmp_path,
        {
            "locales/de.json": '{"broken": ',
            "locales/en.json": '{"ok": "fine"}',
            "locales/fr.php": "<?php echo 'no array';",
        },
    )
    (tmp_path / "locales" / "es.json").write_bytes(b'{"a": "\xff"}')

    scan = scan_locale_directories(tmp_path, ("locales",))

    assert scan.index.get_locales() == ("en",)
    assert scan.index.get_translation("ok", "en") == "fine"
    failures = {failure.locale: failure for failure in scan.failures}
    assert set(failures) == {"de", "es", "fr"}
    assert failures["de"].code == "RESOURCE_INVALID_JSON"
    assert failures["es"].code == RESOURCE_READ_FAILED.code == "RESOURCE_READ_FAILED"
    assert failures["fr"].code == "RESOURCE_ARRAY_NOT_FOUND"


def test_deeply_nested_and_cyclic_files_do_not_abort(tmp_path: Path) -> None:
    write_tree(
        tmp_path,
        {
            "locales/de.php": "<?php return " + "[" * 2000 + "'x'" + "]" * 2000 + ";",
            "locales/en.json": '{"ok": "fine"}',
            "locales/fr.yaml": "a: &x [*x]\n",
        },
    )

    scan = scan_locale_directories(tmp_path, ("locales",))

    assert scan.index.get_locales() == ("en",)
    failures = {failure.locale: failure.code for failure in scan.failures}
    assert failures == {"de": "RESOURCE_TOO_DEEP", "fr": "RESOURCE_CYCLIC_VALUE"}


def test_scan_depth_is_limited(tmp_path: Path) -> None:
    assert MAX_SCAN_DEPTH == 3
    write_tree(
        tmp_path,
        {
            "locales/en.json": '{"level0": "x"}',
            "locales/a/en.json": '{"level1": "x"}',
            "locales/a/b/en.json": '{"level2": "x"}',
            "locales/a/b/c/en.json": '{"level3": "x"}',
        },
    )

    files = collect_resource_files(tmp_path, ("locales",))

    assert tmp_path / "locales" / "a" / "b" / "en.json" in files
    assert tmp_path / "locales" / "a" / "b" / "c" / "en.json" not in files
    scan = scan_locale_directories(tmp_path, ("locales",))
    assert scan.index.get_all_keys() == ("level0", "level1", "level2")


def test_later_path_wins_for_duplicate_keys(tmp_path: Path) -> None:
    write_tree(
        tmp_path,
        {
            "locales/en/a.json": '{"shared": "from a", "only_a": "A"}',
            "locales/en/b.json": '{"shared": "from b"}',
        },
    )

    scan = scan_locale_directories(tmp_path, ("locales",))

    assert scan.index.get_translation("shared", "en") == "from b"
    assert scan.index.get_translation("only_a", "en") == "A"
    entry = scan.index.get_entry("shared", "en")
    assert entry is not None
    assert entry.file_path == tmp_path / "locales" / "en" / "b.json"
    assert scan.index.locale_files["en"] == (
        tmp_path / "locales" / "en" / "a.json",
        tmp_path / "locales" / "en" / "b.json",
    )


def test_overlapping_locale_paths_load_each_file_once(tmp_path: Path) -> None:
    make_basic_workspace(tmp_path)

    files = collect_resource_files(tmp_path, ("locales", "locales", "./locales"))

    assert files == [tmp_path / "locales" / "en.json", tmp_path / "locales" / "fr.json"]


def test_scan_of_empty_workspace_is_empty(tmp_path: Path) -> None:
    scan = scan_locale_directories(tmp_path, ("locales",))

    assert scan.index.is_empty
    assert scan.index.get_locales() == ()
    assert scan.index.key_count == 0
