"""Centralized markup source cases used across lexer/parser tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap

from dungeonmark.entities import (
    Damage,
    Heal,
    Item,
    ItemCatalog,
    Position,
    RandomTeleport,
    Teleport,
)


@dataclass(frozen=True, slots=True)
class ItemCase:
    name: str
    source: str
    expected: Item | None


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


ITEM_CASES: tuple[ItemCase, ...] = (
    ItemCase(
        name="weapon",
        source="@item @weapon @name: Sword @atk: 10 @description: A sword @value: 100",
        expected=Item.weapon("Sword", "A sword", 100, 10),
    ),
    ItemCase(
        name="weapon_fields_in_any_order",
        source="@item @weapon @value: 100 @description: A sword @atk: 10 @name: Sword",
        expected=Item.weapon("Sword", "A sword", 100, 10),
    ),
    ItemCase(
        name="weapon_across_lines",
        source=_dedent(
            """
            @item @weapon
            @name: Big Sword
            @atk: 12
            @description: A very
              heavy blade
            """
        ),
        expected=Item.weapon("Big Sword", "A very heavy blade", 0, 12),
    ),
    ItemCase(
        name="armor",
        source="@item @armor @name: Shield @def: 10 @description: A shield @value: 100",
        expected=Item.armor("Shield", "A shield", 100, 10),
    ),
    ItemCase(
        name="gold",
        source="@item @gold @value: 100",
        expected=Item.gold(100),
    ),
    ItemCase(
        name="exp",
        source="@item @exp @name: Exp @value: 100 @description: An experience point",
        expected=Item.exp("Exp", "An experience point", 100),
    ),
    ItemCase(
        name="effect_heal",
        source="@item @effect @name: Heal @value: 10 @description: Heal ten HP @effect: @heal: 10",
        expected=Item.effect("Heal", "Heal ten HP", 10, Heal(10)),
    ),
    ItemCase(
        name="effect_damage",
        source="@item @effect @name: Bomb @effect: @damage: 25 @value: 3",
        expected=Item.effect("Bomb", "", 3, Damage(25)),
    ),
    ItemCase(
        name="effect_teleport_start",
        source="@item @effect @name: Home Scroll @effect: @teleport: @start",
        expected=Item.effect("Home Scroll", "", 0, Teleport(Position(0, 0))),
    ),
    ItemCase(
        name="effect_teleport_random",
        source="@item @effect @name: Chaos Scroll @effect: @teleport: @random",
        expected=Item.effect("Chaos Scroll", "", 0, RandomTeleport()),
    ),
    ItemCase(
        name="effect_without_effect_field",
        source="@item @effect @name: Dud",
        expected=Item.effect("Dud", "", 0, None),
    ),
)

# Inputs that describe no item at all.
REJECTED_ITEM_SOURCES: tuple[str, ...] = (
    "",
    "   \n\t ",
    "@item",
    "@monster @name: Goblin",
    "@weapon @name: Sword",
    "@item @treasure @value: 10",
    "@item @name: Sword",
    "@item @gold @atk: 1",
    "@item @gold @value: many",
    "@item @gold @name: Gold @value: 3",
    "@item @gold",
)


def sample_catalog() -> ItemCatalog:
    return ItemCatalog.of(
        [
            Item.gold(10),
            Item.weapon("Sword", "A sword", 100, 10),
            Item.armor("Shield", "A shield", 50, 4),
            Item.effect("Potion", "Heals a little", 5, Heal(5)),
        ]
    )
