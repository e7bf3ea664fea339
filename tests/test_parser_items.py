import pytest

from dungeonmark.entities import Effect, Heal, Item, Teleport
from dungeonmark.lexer import Token, TokenKind, tokenize
from dungeonmark.parser import Parser, parse_item, parse_item_text
from tests._shared_cases import ITEM_CASES, REJECTED_ITEM_SOURCES, ItemCase


@pytest.mark.parametrize("case", ITEM_CASES, ids=lambda case: case.name)
def test_parses_item(case: ItemCase):
    assert parse_item_text(case.source) == case.expected


@pytest.mark.parametrize("source", REJECTED_ITEM_SOURCES)
def test_rejects_non_item(source: str):
    assert parse_item_text(source) is None


@pytest.mark.parametrize("case", ITEM_CASES, ids=lambda case: case.name)
def test_parsing_same_tokens_twice_gives_equal_items(case: ItemCase):
    tokens = tokenize(case.source)

    assert parse_item(Parser(tokens)) == parse_item(Parser(tokens))


def test_gold_name_and_description_are_fixed():
    gold = parse_item_text("@item @gold @value: 100")

    assert gold is not None
    assert gold.name == "Gold"
    assert gold.description == "A pile of gold"
    assert gold.value == 100
    assert gold.is_gold


def test_gold_ignores_tokens_after_value():
    assert parse_item_text("@item @gold @value: 7 @name: Treasure") == Item.gold(7)


def test_absent_fields_keep_defaults():
    assert parse_item_text("@item @weapon @atk: 3") == Item.weapon("", "", 0, 3)
    assert parse_item_text("@item @armor") == Item.armor("", "", 0, 0)
    assert parse_item_text("@item @exp @value: 25") == Item.exp("", "", 25)


def test_repeated_field_last_write_wins():
    item = parse_item_text("@item @exp @value: 5 @name: Small @value: 7")

    assert item == Item.exp("Small", "", 7)


def test_type_mismatch_stops_scan_with_partial_item():
    item = parse_item_text("@item @weapon @name: Sword @atk: sharp @value: 3")

    assert item == Item.weapon("Sword", "", 0, 0)


def test_unknown_field_stops_scan_with_partial_item():
    item = parse_item_text("@item @armor @def: 4 @life: 10 @name: Shield")

    assert item == Item.armor("", "", 0, 4)


def test_field_belonging_to_another_kind_stops_scan():
    item = parse_item_text("@item @armor @name: Shield @atk: 4 @def: 2")

    assert item == Item.armor("Shield", "", 0, 0)


def test_exp_rejects_effect_field():
    item = parse_item_text("@item @exp @name: Tome @effect: @heal: 3 @value: 9")

    assert item == Item.exp("Tome", "", 0)


def test_truncated_field_does_not_read_past_end():
    assert parse_item_text("@item @weapon @name") == Item.weapon("", "", 0, 0)
    assert parse_item_text("@item @weapon @name:") == Item.weapon("", "", 0, 0)
    assert parse_item_text("@item @effect @effect: @teleport:") == Item.effect("", "", 0, None)


def test_separator_slot_is_not_checked():
    # Any token between key and value is accepted as the separator.
    assert parse_item_text("@item @weapon @atk 7 3") == Item.weapon("", "", 0, 3)


def test_unknown_effect_stops_scan():
    item = parse_item_text("@item @effect @name: Warp @effect: @teleport: @heal @value: 5")

    assert item == Item.effect("Warp", "", 0, None)


def test_effect_amount_must_be_int():
    item = parse_item_text("@item @effect @effect: @heal: lots @name: Potion")

    assert item == Item.effect("", "", 0, None)


def test_effect_keyword_other_than_sub_keyword_stops_scan():
    item = parse_item_text("@item @effect @value: 2 @effect: @start @name: Odd")

    assert item == Item.effect("", "", 2, None)


def test_later_effect_replaces_earlier():
    item = parse_item_text("@item @effect @effect: @heal: 3 @effect: @teleport: @start")

    assert item is not None
    assert item.payload == Effect(Teleport())
    assert item.use() == Teleport()


def test_effect_item_use():
    item = parse_item_text("@item @effect @name: Potion @effect: @heal: 5")

    assert item is not None
    assert item.use() == Heal(5)


def test_parser_accepts_sequence_without_eof():
    tokens = [Token(TokenKind.ITEM), Token(TokenKind.GOLD), Token(TokenKind.VALUE), Token(TokenKind.COLON), Token(TokenKind.INT, 4)]

    assert parse_item(Parser(tokens)) == Item.gold(4)


def test_parser_cursor_stops_at_eof():
    parser = Parser(tokenize("@item"))

    assert parser.advance() == Token(TokenKind.ITEM)
    assert parser.advance() == Token(TokenKind.EOF)
    assert parser.advance() == Token(TokenKind.EOF)
    assert parser.position == 1
    assert parser.at_eof
