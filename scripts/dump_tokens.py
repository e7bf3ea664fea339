#!/usr/bin/env python
"""Print the token listing of one markup file."""

from __future__ import annotations

import argparse
from pathlib import Path

from dungeonmark.lexer import Lexer, dump_tokens


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump the tokens of a markup file")
    parser.add_argument("path", type=Path, help="Markup file to lex")
    args = parser.parse_args()

    path: Path = args.path
    if not path.is_file():
        raise SystemExit(f"Not a file: {path}")

    text = path.read_text(encoding="utf-8")
    lexer = Lexer(text)
    tokens = lexer.lex()
    dump_tokens(tokens, text, lexer.diagnostics)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
