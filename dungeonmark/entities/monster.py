"""Monster records."""

from __future__ import annotations

from dataclasses import dataclass, field

from dungeonmark.entities.item import UNNAMED_WEAPON, Item


@dataclass(slots=True)
class Monster:
    name: str = ""
    life: int = 0
    weapon: Item = field(default_factory=UNNAMED_WEAPON.copy)
    drop: tuple[Item, int] | None = None
    rareness: int = 0

    @property
    def is_dead(self) -> bool:
        return self.life <= 0

    def take_damage(self, amount: int) -> None:
        # life may go negative; callers check is_dead
        self.life -= amount

    def drop_items(self) -> list[Item]:
        """Expand the drop into one independent copy per unit of quantity."""
        if self.drop is None:
            return []
        item, quantity = self.drop
        return [item.copy() for _ in range(quantity)]
