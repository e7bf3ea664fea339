"""Item records and their payload variants."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final

from dungeonmark.entities.position import ORIGIN, Position

GOLD_NAME: Final[str] = "Gold"
GOLD_DESCRIPTION: Final[str] = "A pile of gold"


@dataclass(frozen=True, slots=True)
class Heal:
    amount: int


@dataclass(frozen=True, slots=True)
class Damage:
    amount: int


@dataclass(frozen=True, slots=True)
class Teleport:
    """Teleport to a fixed position. `@start` always means the origin."""

    position: Position = ORIGIN


@dataclass(frozen=True, slots=True)
class RandomTeleport:
    """Teleport to a destination chosen later by the map engine."""


EffectKind = Heal | Damage | Teleport | RandomTeleport


@dataclass(frozen=True, slots=True)
class Weapon:
    attack: int


@dataclass(frozen=True, slots=True)
class Armor:
    defense: int


@dataclass(frozen=True, slots=True)
class Gold:
    amount: int


@dataclass(frozen=True, slots=True)
class Effect:
    """Effect payload. `kind` is None when the record had no `@effect` field."""

    kind: EffectKind | None


@dataclass(frozen=True, slots=True)
class Exp:
    amount: int


ItemPayload = Weapon | Armor | Gold | Effect | Exp


@dataclass(slots=True)
class Item:
    """Named item with exactly one payload variant.

    Equality is structural. The only mutation is `add_value`, used when gold
    piles are stacked in an inventory.
    """

    name: str
    description: str
    value: int
    payload: ItemPayload

    @staticmethod
    def weapon(name: str, description: str, value: int, attack: int) -> Item:
        return Item(name, description, value, Weapon(attack))

    @staticmethod
    def armor(name: str, description: str, value: int, defense: int) -> Item:
        return Item(name, description, value, Armor(defense))

    @staticmethod
    def gold(value: int) -> Item:
        return Item(GOLD_NAME, GOLD_DESCRIPTION, value, Gold(value))

    @staticmethod
    def effect(name: str, description: str, value: int, kind: EffectKind | None) -> Item:
        return Item(name, description, value, Effect(kind))

    @staticmethod
    def exp(name: str, description: str, value: int) -> Item:
        return Item(name, description, value, Exp(value))

    @property
    def is_gold(self) -> bool:
        return isinstance(self.payload, Gold)

    def use(self) -> EffectKind | None:
        """Return the effect this item triggers when used, if any."""
        match self.payload:
            case Effect(kind=kind):
                return kind
            case _:
                return None

    def add_value(self, amount: int) -> None:
        self.value += amount

    def copy(self) -> Item:
        """Independent copy; payloads are immutable so a shallow replace suffices."""
        return replace(self)


UNNAMED_WEAPON: Final[Item] = Item.weapon("", "", 0, 0)
"""Template for a monster whose weapon reference did not resolve."""
