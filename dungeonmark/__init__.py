"""Lexer, parser and entity model for the `@field: value` game data markup."""

from dungeonmark.entities import Item, ItemCatalog, Monster, Player
from dungeonmark.lexer import Lexer, Token, TokenKind, tokenize
from dungeonmark.parser import (
    ParseMode,
    Parser,
    ParserOptions,
    parse_item_text,
    parse_monster_text,
    parse_player_text,
)

__all__ = [
    "Item",
    "ItemCatalog",
    "Lexer",
    "Monster",
    "ParseMode",
    "Parser",
    "ParserOptions",
    "Player",
    "Token",
    "TokenKind",
    "parse_item_text",
    "parse_monster_text",
    "parse_player_text",
    "tokenize",
]
