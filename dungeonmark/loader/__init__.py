"""Filesystem loading of item, monster and player files."""

from dungeonmark.loader.load import (
    collect_record_files,
    load_item_catalog,
    load_monsters,
    load_player,
    load_world_from_root,
)
from dungeonmark.loader.model import LoadWorldResult

__all__ = [
    "LoadWorldResult",
    "collect_record_files",
    "load_item_catalog",
    "load_monsters",
    "load_player",
    "load_world_from_root",
]
