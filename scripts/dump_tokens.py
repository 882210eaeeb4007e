#!/usr/bin/env python
"""Dump array-literal tokens of a PHP translation file."""

from __future__ import annotations

import argparse
from pathlib import Path

from i18nlens.lexer import Lexer, Token, TokenFlags, token_text
from i18nlens.resources import read_resource_text


def format_token(idx: int, token: Token, source: str) -> str:
    base = (
        f"[{idx}] kind={token.kind.name} "
        f"text={token_text(source, token)!r} "
        f"span=({token.range.start.value},{token.range.end.value})"
    )
    if token.kind.is_literal:
        base += f" value={token.value!r}"
    if token.flags & TokenFlags.HAS_ESCAPE:
        base += " escaped"
    if token.flags & TokenFlags.UNTERMINATED:
        base += " unterminated"
    return base


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump array-literal tokens of a resource file")
    parser.add_argument("input", type=Path, help="PHP translation file")
    parser.add_argument("--output", type=Path, default=None, help="Write to this file instead of stdout")
    args = parser.parse_args()

    text = read_resource_text(args.input)
    tokens = Lexer(text).lex()
    lines = [format_token(idx, token, text) for idx, token in enumerate(tokens)]

    if args.output is None:
        print("\n".join(lines))
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    print(f"Wrote {len(tokens)} tokens to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
