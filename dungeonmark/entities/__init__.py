"""Entity records produced by the parser."""

from dungeonmark.entities.catalog import ItemCatalog
from dungeonmark.entities.item import (
    GOLD_DESCRIPTION,
    GOLD_NAME,
    UNNAMED_WEAPON,
    Armor,
    Damage,
    Effect,
    EffectKind,
    Exp,
    Gold,
    Heal,
    Item,
    ItemPayload,
    RandomTeleport,
    Teleport,
    Weapon,
)
from dungeonmark.entities.monster import Monster
from dungeonmark.entities.player import Player
from dungeonmark.entities.position import ORIGIN, Position

__all__ = [
    "GOLD_DESCRIPTION",
    "GOLD_NAME",
    "ORIGIN",
    "UNNAMED_WEAPON",
    "Armor",
    "Damage",
    "Effect",
    "EffectKind",
    "Exp",
    "Gold",
    "Heal",
    "Item",
    "ItemCatalog",
    "ItemPayload",
    "Monster",
    "Player",
    "Position",
    "RandomTeleport",
    "Teleport",
    "Weapon",
]
