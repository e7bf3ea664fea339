"""Player records."""

from __future__ import annotations

from dataclasses import dataclass, field

from dungeonmark.entities.item import Armor, Exp, Gold, Item, Weapon
from dungeonmark.entities.position import ORIGIN, Position


@dataclass(slots=True)
class Player:
    """Player state as loaded from a player file.

    `inventory` holds one entry per unit: a quantity of N is N equal copies.
    """

    name: str = ""
    life: int = 0
    max_life: int = 0
    position: Position = ORIGIN
    weapon: Item | None = None
    armor: Item | None = None
    inventory: list[Item] = field(default_factory=list)
    experience: int = 0
    level: int = 0
    next_level: int = 0

    def equip_weapon(self, weapon: Item) -> None:
        if not isinstance(weapon.payload, Weapon):
            raise ValueError(f"Not a weapon: {weapon.name!r}")
        self.weapon = weapon

    def equip_armor(self, armor: Item) -> None:
        if not isinstance(armor.payload, Armor):
            raise ValueError(f"Not an armor: {armor.name!r}")
        self.armor = armor

    def move_to(self, position: Position) -> None:
        self.position = position

    def gold(self) -> Item | None:
        for item in self.inventory:
            if item.is_gold:
                return item
        return None

    def add_item(self, item: Item) -> None:
        """Pick up an item.

        Experience is absorbed (possibly levelling up), gold stacks onto the
        existing pile, anything else is appended.
        """
        match item.payload:
            case Exp(amount=amount):
                self.experience += amount
                if self.experience >= self.next_level:
                    self.level_up()
            case Gold():
                pile = self.gold()
                if pile is not None:
                    pile.add_value(item.value)
                else:
                    self.inventory.append(item)
            case _:
                self.inventory.append(item)

    def level_up(self) -> None:
        self.level += 1
        self.next_level = self.next_level * 15 // 10
        self.max_life = self.max_life * 11 // 10
        self.life = self.max_life
