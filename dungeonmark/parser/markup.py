"""High-level parse entrypoints for markup source text."""

from __future__ import annotations

from collections.abc import Iterable

from dungeonmark.entities import Item, ItemCatalog, Monster, Player
from dungeonmark.lexer import tokenize
from dungeonmark.parser.grammar import parse_item, parse_monster, parse_player
from dungeonmark.parser.options import ParseMode, ParserOptions
from dungeonmark.parser.parser import Parser


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def _as_catalog(catalog: ItemCatalog | Iterable[Item]) -> ItemCatalog:
    if isinstance(catalog, ItemCatalog):
        return catalog
    return ItemCatalog.of(catalog)


def _parser_for(text: str, options: ParserOptions | None, mode: ParseMode | None) -> Parser:
    return Parser(tokenize(text), options=_resolve_options(options=options, mode=mode))


def parse_item_text(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Item | None:
    return parse_item(_parser_for(text, options, mode))


def parse_monster_text(
    text: str,
    catalog: ItemCatalog | Iterable[Item],
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Monster | None:
    """Parse a monster record, resolving weapon and drop names against `catalog`.

    Every item the monster refers to must already be in the catalog.
    """
    return parse_monster(_parser_for(text, options, mode), _as_catalog(catalog))


def parse_player_text(
    text: str,
    catalog: ItemCatalog | Iterable[Item],
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Player | None:
    return parse_player(_parser_for(text, options, mode), _as_catalog(catalog))
