"""Ordered item catalog used for by-name reference resolution."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from dungeonmark.entities.item import Item


@dataclass(frozen=True, slots=True)
class ItemCatalog:
    """Read-only, ordered sequence of previously parsed items.

    Lookup is by exact name; the first match in catalog order wins. Resolved
    items are handed out as copies so that later changes to a catalog entry
    never leak into monsters or players built from it.
    """

    items: tuple[Item, ...] = ()

    @staticmethod
    def of(items: Iterable[Item]) -> ItemCatalog:
        return ItemCatalog(tuple(items))

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def find(self, name: str) -> Item | None:
        for item in self.items:
            if item.name == name:
                return item
        return None

    def resolve(self, name: str) -> Item | None:
        item = self.find(name)
        return item.copy() if item is not None else None

    def with_item(self, item: Item) -> ItemCatalog:
        return ItemCatalog((*self.items, item))
