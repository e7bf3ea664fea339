"""Filesystem loaders for markup data directories.

Layout under the project root::

    items/**/*.txt      one item per file
    monsters/**/*.txt   one monster per file
    player.txt          optional

Items are loaded first and frozen into the catalog; monsters and the player
are resolved against it afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from dungeonmark.diagnostics import (
    LOADER_DUPLICATE_ITEM,
    LOADER_REJECTED_RECORD,
    LOADER_UNREADABLE_FILE,
    Diagnostic,
)
from dungeonmark.entities import Item, ItemCatalog, Monster, Player
from dungeonmark.loader.model import LoadWorldResult
from dungeonmark.parser import (
    ParserOptions,
    parse_item_text,
    parse_monster_text,
    parse_player_text,
)
from dungeonmark.text import TextRange, TextSize

logger = logging.getLogger(__name__)

ITEMS_DIR = "items"
MONSTERS_DIR = "monsters"
PLAYER_FILE = "player.txt"

_EMPTY = TextRange.empty(TextSize.from_int(0))


def collect_record_files(root: Path) -> list[Path]:
    """Sorted `*.txt` files below `root`; empty when it does not exist."""
    if not root.is_dir():
        return []
    return [path for path in sorted(root.rglob("*.txt")) if path.is_file()]


def load_item_catalog(
    paths: Iterable[Path],
    *,
    root: Path,
    options: ParserOptions | None = None,
    diagnostics: list[Diagnostic],
) -> ItemCatalog:
    items: list[Item] = []
    seen: set[str] = set()
    for path in paths:
        source_path = _source_path(path, root)
        text = _read_text(path, source_path, diagnostics)
        if text is None:
            continue
        item = parse_item_text(text, options)
        if item is None:
            _reject(source_path, "item", diagnostics)
            continue
        if item.name in seen:
            logger.warning("Duplicate item %r in %s", item.name, source_path)
            diagnostics.append(
                LOADER_DUPLICATE_ITEM.at(
                    _EMPTY,
                    message=f"{LOADER_DUPLICATE_ITEM.message} ({item.name!r})",
                    source_path=source_path,
                )
            )
        seen.add(item.name)
        logger.debug("Loaded item %r from %s", item.name, source_path)
        items.append(item)
    return ItemCatalog.of(items)


def load_monsters(
    paths: Iterable[Path],
    catalog: ItemCatalog,
    *,
    root: Path,
    options: ParserOptions | None = None,
    diagnostics: list[Diagnostic],
) -> tuple[Monster, ...]:
    monsters: list[Monster] = []
    for path in paths:
        source_path = _source_path(path, root)
        text = _read_text(path, source_path, diagnostics)
        if text is None:
            continue
        monster = parse_monster_text(text, catalog, options)
        if monster is None:
            _reject(source_path, "monster", diagnostics)
            continue
        logger.debug("Loaded monster %r from %s", monster.name, source_path)
        monsters.append(monster)
    return tuple(monsters)


def load_player(
    root: Path,
    catalog: ItemCatalog,
    *,
    options: ParserOptions | None = None,
    diagnostics: list[Diagnostic],
) -> Player | None:
    """Parse `root/player.txt`; None when it is missing or rejected."""
    player_path = root / PLAYER_FILE
    if not player_path.is_file():
        return None
    text = _read_text(player_path, PLAYER_FILE, diagnostics)
    if text is None:
        return None
    player = parse_player_text(text, catalog, options)
    if player is None:
        _reject(PLAYER_FILE, "player", diagnostics)
        return None
    logger.debug("Loaded player %r from %s", player.name, PLAYER_FILE)
    return player


def load_world_from_root(
    project_root: str | Path,
    *,
    options: ParserOptions | None = None,
) -> LoadWorldResult:
    """Load every record under `project_root` in dependency order."""
    root = Path(project_root)
    diagnostics: list[Diagnostic] = []

    item_paths = collect_record_files(root / ITEMS_DIR)
    monster_paths = collect_record_files(root / MONSTERS_DIR)
    logger.info(
        "Loading %d item file(s) and %d monster file(s) from %s",
        len(item_paths),
        len(monster_paths),
        root,
    )

    catalog = load_item_catalog(item_paths, root=root, options=options, diagnostics=diagnostics)
    monsters = load_monsters(monster_paths, catalog, root=root, options=options, diagnostics=diagnostics)

    player = load_player(root, catalog, options=options, diagnostics=diagnostics)

    return LoadWorldResult(
        catalog=catalog,
        monsters=monsters,
        player=player,
        diagnostics=tuple(diagnostics),
    )


def _source_path(path: Path, root: Path) -> str:
    return str(path.relative_to(root)).replace("\\", "/")


def _read_text(path: Path, source_path: str, diagnostics: list[Diagnostic]) -> str | None:
    try:
        decoded = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Skipping unreadable file %s: %s", source_path, exc)
        diagnostics.append(LOADER_UNREADABLE_FILE.at(_EMPTY, source_path=source_path))
        return None
    return decoded[1:] if decoded.startswith("\ufeff") else decoded


def _reject(source_path: str, kind: str, diagnostics: list[Diagnostic]) -> None:
    logger.warning("Skipping %s: not a valid %s record", source_path, kind)
    diagnostics.append(
        LOADER_REJECTED_RECORD.at(
            _EMPTY,
            message=f"{LOADER_REJECTED_RECORD.message} Expected a {kind}.",
            source_path=source_path,
        )
    )
