"""Parser infrastructure (token cursor + record grammars)."""

from dungeonmark.parser.grammar import parse_item, parse_monster, parse_player
from dungeonmark.parser.markup import (
    parse_item_text,
    parse_monster_text,
    parse_player_text,
)
from dungeonmark.parser.options import ParseMode, ParserOptions
from dungeonmark.parser.parser import Parser

__all__ = [
    "ParseMode",
    "Parser",
    "ParserOptions",
    "parse_item",
    "parse_item_text",
    "parse_monster",
    "parse_monster_text",
    "parse_player",
    "parse_player_text",
]
