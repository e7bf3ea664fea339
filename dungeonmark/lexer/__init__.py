"""Lexer."""

from dungeonmark.lexer.lexer import (
    INT_MAX,
    Lexer,
    dump_tokens,
    glue_strings,
    token_text,
    tokenize,
)
from dungeonmark.lexer.tokens import (
    EOF_TOKEN,
    KEYWORDS,
    Token,
    TokenKind,
    lookup_keyword,
)

__all__ = [
    "EOF_TOKEN",
    "INT_MAX",
    "KEYWORDS",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "glue_strings",
    "lookup_keyword",
    "token_text",
    "tokenize",
]
