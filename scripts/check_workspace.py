#!/usr/bin/env python3
"""Report missing and incomplete translation keys across a workspace."""

from __future__ import annotations

import argparse
from pathlib import Path

from i18nlens.diagnostics import count_by_severity
from i18nlens.engine import I18nEngine
from i18nlens.logs import configure_logging

SOURCE_SUFFIXES = {".js", ".jsx", ".ts", ".tsx", ".vue", ".svelte", ".html", ".php", ".dart"}
SKIPPED_DIRS = {".git", "node_modules", "vendor", "build", "dist", ".dart_tool"}


def _collect_source_files(root: Path) -> list[Path]:
    files: list[Path] = []
    for path in sorted(root.rglob("*")):
        if any(part in SKIPPED_DIRS for part in path.relative_to(root).parts):
            continue
        if path.suffix in SOURCE_SUFFIXES and path.is_file():
            files.append(path)
    return files


def main() -> int:
    parser = argparse.ArgumentParser(description="Check translation key usage in a workspace")
    parser.add_argument("root", type=Path, help="Workspace root")
    parser.add_argument("--log-level", default="WARNING", help="Log level for stderr output")
    parser.add_argument(
        "--hints",
        action="store_true",
        help="Also print incomplete-translation hints",
    )
    args = parser.parse_args()

    configure_logging(args.log_level)

    root: Path = args.root.resolve()
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    engine = I18nEngine()
    state = engine.initialize(root)
    if state is None:
        return 1

    all_diagnostics = []
    for path in _collect_source_files(root):
        text = path.read_text(encoding="utf-8", errors="replace")
        for diagnostic in engine.compute_diagnostics(text):
            if diagnostic.severity == "hint" and not args.hints:
                continue
            all_diagnostics.append(diagnostic)
            span = diagnostic.span
            line, column = (span.line + 1, span.start_char + 1) if span is not None else (0, 0)
            print(f"{path.relative_to(root)}:{line}:{column}: {diagnostic.severity}: {diagnostic.message}")

    counts = count_by_severity(all_diagnostics)
    print(
        f"Locales: {', '.join(state.index.get_locales()) or '-'} | "
        f"keys: {state.index.key_count} | "
        f"warnings: {counts.get('warning', 0)} | hints: {counts.get('hint', 0)}"
    )
    return 1 if counts.get("warning", 0) else 0


if __name__ == "__main__":
    raise SystemExit(main())
