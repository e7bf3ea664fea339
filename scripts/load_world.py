#!/usr/bin/env python3
"""Load a data directory and report what was built."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from dungeonmark.diagnostics import Diagnostic
from dungeonmark.loader import collect_record_files, load_item_catalog, load_monsters, load_player
from dungeonmark.loader.load import ITEMS_DIR, MONSTERS_DIR
from dungeonmark.parser import ParseMode, ParserOptions


def _print_diagnostics(diagnostics: list[Diagnostic]) -> None:
    if not diagnostics:
        print("Diagnostics: (none)")
        return
    print("Diagnostics:")
    for d in diagnostics:
        print(f"- {d.severity.upper()} {d.code} {d.source_path}: {d.message}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Load items, monsters and the player from a data directory")
    parser.add_argument("root", type=Path, help="Data directory (contains items/, monsters/, player.txt)")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Require `:` between every field key and its value",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid data directory: {root}")

    options = ParserOptions.for_mode(ParseMode.STRICT if args.strict else ParseMode.COMPATIBLE)
    show_progress = not args.no_progress
    diagnostics: list[Diagnostic] = []

    item_paths = collect_record_files(root / ITEMS_DIR)
    monster_paths = collect_record_files(root / MONSTERS_DIR)

    catalog = load_item_catalog(
        tqdm(item_paths, desc="items", unit="file") if show_progress else item_paths,
        root=root,
        options=options,
        diagnostics=diagnostics,
    )
    monsters = load_monsters(
        tqdm(monster_paths, desc="monsters", unit="file") if show_progress else monster_paths,
        catalog,
        root=root,
        options=options,
        diagnostics=diagnostics,
    )

    player = load_player(root, catalog, options=options, diagnostics=diagnostics)

    print(f"Items:    {len(catalog)}")
    for item in catalog:
        print(f"  {item.name!r:<24} value={item.value:<6} {type(item.payload).__name__}")
    print(f"Monsters: {len(monsters)}")
    for monster in monsters:
        drop = f"{monster.drop[0].name} x{monster.drop[1]}" if monster.drop else "-"
        print(f"  {monster.name!r:<24} life={monster.life:<6} weapon={monster.weapon.name!r} drop={drop}")
    if player is not None:
        print(f"Player:   {player.name!r} life={player.life}/{player.max_life} items={len(player.inventory)}")

    _print_diagnostics(diagnostics)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
