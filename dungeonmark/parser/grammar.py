"""Record grammars: one permissive field-scan loop per record kind.

Every loop has the same shape. A field key is consumed, then its separator,
then its value. An unknown key or a value of the wrong kind stops the loop
and whatever was collected so far is built into the record. Only a wrong
leading keyword (and the strict gold form) yields no record at all.
"""

from dataclasses import dataclass
from typing import cast

from dungeonmark.entities import (
    ORIGIN,
    Damage,
    EffectKind,
    Heal,
    Item,
    ItemCatalog,
    Monster,
    Player,
    RandomTeleport,
    Teleport,
)
from dungeonmark.lexer import TokenKind
from dungeonmark.parser.parser import Parser


@dataclass(slots=True)
class _ItemFields:
    name: str = ""
    description: str = ""
    value: int = 0


def parse_item(parser: Parser) -> Item | None:
    if parser.advance().kind != TokenKind.ITEM:
        return None

    match parser.advance().kind:
        case TokenKind.WEAPON:
            return _parse_weapon(parser)
        case TokenKind.ARMOR:
            return _parse_armor(parser)
        case TokenKind.EFFECT:
            return _parse_effect_item(parser)
        case TokenKind.GOLD:
            return _parse_gold(parser)
        case TokenKind.EXP:
            return _parse_exp(parser)
        case _:
            return None


def parse_monster(parser: Parser, catalog: ItemCatalog) -> Monster | None:
    if parser.advance().kind != TokenKind.MONSTER:
        return None

    monster = Monster()
    while not parser.at_eof:
        match parser.advance().kind:
            case TokenKind.NAME:
                name = _expect_str(parser)
                if name is None:
                    break
                monster.name = name
            case TokenKind.LIFE:
                life = _expect_int(parser)
                if life is None:
                    break
                monster.life = life
            case TokenKind.WEAPON:
                reference = _expect_str(parser)
                if reference is None:
                    break
                weapon = catalog.resolve(reference)
                if weapon is not None:
                    monster.weapon = weapon
            case TokenKind.DROP:
                reference = _expect_str(parser)
                if reference is None:
                    break
                dropped = catalog.resolve(reference)
                if dropped is None:
                    # The unread quantity becomes the next key.
                    continue
                quantity = _expect_bare_int(parser)
                if quantity is None:
                    break
                monster.drop = (dropped, quantity)
            case TokenKind.RARENESS:
                rareness = _expect_int(parser)
                if rareness is None:
                    break
                monster.rareness = rareness
            case _:
                break

    return monster


def parse_player(parser: Parser, catalog: ItemCatalog) -> Player | None:
    # The leading record keyword is not checked, only required to exist.
    if parser.advance().is_eof:
        return None

    player = Player()
    while not parser.at_eof:
        match parser.advance().kind:
            case TokenKind.NAME:
                name = _expect_str(parser)
                if name is None:
                    break
                player.name = name
            case TokenKind.LIFE:
                life = _expect_int(parser)
                if life is None:
                    break
                player.life = life
            case TokenKind.MAX_LIFE:
                max_life = _expect_int(parser)
                if max_life is None:
                    break
                player.max_life = max_life
            case TokenKind.WEAPON:
                reference = _expect_str(parser)
                if reference is None:
                    break
                weapon = catalog.resolve(reference)
                if weapon is not None:
                    player.weapon = weapon
            case TokenKind.ARMOR:
                reference = _expect_str(parser)
                if reference is None:
                    break
                armor = catalog.resolve(reference)
                if armor is not None:
                    player.armor = armor
            case TokenKind.EXP:
                experience = _expect_int(parser)
                if experience is None:
                    break
                player.experience = experience
            case TokenKind.LEVEL:
                level = _expect_int(parser)
                if level is None:
                    break
                player.level = level
            case TokenKind.EXP_TO_LEVEL_UP:
                next_level = _expect_int(parser)
                if next_level is None:
                    break
                player.next_level = next_level
            case TokenKind.INVENTORY:
                if not _eat_separator(parser):
                    break
                inventory, complete = _parse_inventory(parser, catalog)
                player.inventory = inventory
                if not complete:
                    break
            case _:
                break

    return player


def _parse_inventory(parser: Parser, catalog: ItemCatalog) -> tuple[list[Item], bool]:
    """Read `<item name> <quantity>` pairs until a non-string token.

    The token that ends the inventory is consumed. A name missing from the
    catalog also ends it, leaving its quantity as the next token. Returns
    the expanded inventory and whether it ended cleanly; a known name that
    is not followed by an integer quantity ends it uncleanly.
    """
    inventory: list[Item] = []
    while not parser.at_eof:
        token = parser.advance()
        if token.kind != TokenKind.STRING:
            break
        item = catalog.find(cast(str, token.value))
        if item is None:
            break
        quantity = _expect_bare_int(parser)
        if quantity is None:
            return inventory, False
        inventory.extend(item.copy() for _ in range(quantity))
    return inventory, True


def _parse_weapon(parser: Parser) -> Item:
    fields = _ItemFields()
    attack = 0
    while not parser.at_eof:
        key = parser.advance().kind
        if key == TokenKind.ATK:
            amount = _expect_int(parser)
            if amount is None:
                break
            attack = amount
            continue
        if not _scan_item_field(parser, key, fields):
            break
    return Item.weapon(fields.name, fields.description, fields.value, attack)


def _parse_armor(parser: Parser) -> Item:
    fields = _ItemFields()
    defense = 0
    while not parser.at_eof:
        key = parser.advance().kind
        if key == TokenKind.DEF:
            amount = _expect_int(parser)
            if amount is None:
                break
            defense = amount
            continue
        if not _scan_item_field(parser, key, fields):
            break
    return Item.armor(fields.name, fields.description, fields.value, defense)


def _parse_effect_item(parser: Parser) -> Item:
    fields = _ItemFields()
    effect: EffectKind | None = None
    while not parser.at_eof:
        key = parser.advance().kind
        if key == TokenKind.EFFECT:
            kind = _parse_effect_kind(parser)
            if kind is None:
                break
            effect = kind
            continue
        if not _scan_item_field(parser, key, fields):
            break
    return Item.effect(fields.name, fields.description, fields.value, effect)


def _parse_exp(parser: Parser) -> Item:
    fields = _ItemFields()
    while not parser.at_eof:
        key = parser.advance().kind
        if not _scan_item_field(parser, key, fields):
            break
    return Item.exp(fields.name, fields.description, fields.value)


def _parse_gold(parser: Parser) -> Item | None:
    if parser.options.scan_gold_fields:
        return _scan_gold(parser)

    # Strict prefix: exactly `@value: <int>`, no partial gold.
    if parser.advance().kind != TokenKind.VALUE:
        return None
    amount = _expect_int(parser)
    if amount is None:
        return None
    return Item.gold(amount)


def _scan_gold(parser: Parser) -> Item | None:
    amount: int | None = None
    while not parser.at_eof:
        if parser.advance().kind != TokenKind.VALUE:
            break
        value = _expect_int(parser)
        if value is None:
            break
        amount = value
    if amount is None:
        return None
    return Item.gold(amount)


def _parse_effect_kind(parser: Parser) -> EffectKind | None:
    """Nested `@effect: @heal: <int>` / `@damage: <int>` / `@teleport: @start|@random`."""
    if not _eat_separator(parser):
        return None

    match parser.advance().kind:
        case TokenKind.HEAL:
            amount = _expect_int(parser)
            return Heal(amount) if amount is not None else None
        case TokenKind.DAMAGE:
            amount = _expect_int(parser)
            return Damage(amount) if amount is not None else None
        case TokenKind.TELEPORT:
            if not _eat_separator(parser):
                return None
            match parser.advance().kind:
                case TokenKind.START:
                    return Teleport(ORIGIN)
                case TokenKind.RANDOM:
                    return RandomTeleport()
                case _:
                    return None
        case _:
            return None


def _scan_item_field(parser: Parser, key: TokenKind, fields: _ItemFields) -> bool:
    """Handle the name/description/value fields every item kind accepts.

    Returns False for an unknown key or a wrong-typed value.
    """
    match key:
        case TokenKind.NAME:
            name = _expect_str(parser)
            if name is None:
                return False
            fields.name = name
        case TokenKind.DESCRIPTION:
            description = _expect_str(parser)
            if description is None:
                return False
            fields.description = description
        case TokenKind.VALUE:
            value = _expect_int(parser)
            if value is None:
                return False
            fields.value = value
        case _:
            return False
    return True


def _eat_separator(parser: Parser) -> bool:
    if parser.options.require_separator:
        return parser.eat(TokenKind.COLON)
    # Compatible mode consumes whatever sits in the separator slot.
    parser.advance()
    return True


def _expect_str(parser: Parser) -> str | None:
    if not _eat_separator(parser):
        return None
    token = parser.advance()
    if token.kind != TokenKind.STRING:
        return None
    return cast(str, token.value)


def _expect_int(parser: Parser) -> int | None:
    if not _eat_separator(parser):
        return None
    return _expect_bare_int(parser)


def _expect_bare_int(parser: Parser) -> int | None:
    token = parser.advance()
    if token.kind != TokenKind.INT:
        return None
    return cast(int, token.value)
