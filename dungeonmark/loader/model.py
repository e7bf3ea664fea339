"""Results of loading a data directory."""

from __future__ import annotations

from dataclasses import dataclass

from dungeonmark.diagnostics import Diagnostic, has_errors
from dungeonmark.entities import ItemCatalog, Monster, Player


@dataclass(frozen=True, slots=True)
class LoadWorldResult:
    """Catalog, monsters and player loaded from one data directory."""

    catalog: ItemCatalog
    monsters: tuple[Monster, ...]
    player: Player | None
    diagnostics: tuple[Diagnostic, ...]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
