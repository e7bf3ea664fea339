"""Lexer tokens and the keyword vocabulary."""

from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Final, Mapping

from dungeonmark.text import TextRange, TextSize


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Literals / separators
    # -------------------------
    INT = 10
    STRING = 11
    COLON = 12

    # -------------------------
    # Record kinds
    # -------------------------
    ITEM = 20
    WEAPON = 21
    ARMOR = 22
    GOLD = 23
    EFFECT = 24
    EXP = 25
    TREASURE = 26  # recognized, no builder
    MONSTER = 27
    PLAYER = 28

    # -------------------------
    # Field keywords
    # -------------------------
    NAME = 40
    DESCRIPTION = 41
    VALUE = 42
    ATK = 43
    DEF = 44
    LIFE = 45
    DROP = 46
    RARENESS = 47
    LEVEL = 48
    MAX_LIFE = 49
    EXP_TO_LEVEL_UP = 50
    INVENTORY = 51

    # -------------------------
    # Effect sub-keywords
    # -------------------------
    HEAL = 60
    DAMAGE = 61
    TELEPORT = 62
    START = 63
    RANDOM = 64


KEYWORDS: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        "@item": TokenKind.ITEM,
        "@weapon": TokenKind.WEAPON,
        "@armor": TokenKind.ARMOR,
        "@gold": TokenKind.GOLD,
        "@effect": TokenKind.EFFECT,
        "@exp": TokenKind.EXP,
        "@treasure": TokenKind.TREASURE,
        "@monster": TokenKind.MONSTER,
        "@player": TokenKind.PLAYER,
        "@name": TokenKind.NAME,
        "@description": TokenKind.DESCRIPTION,
        "@value": TokenKind.VALUE,
        "@atk": TokenKind.ATK,
        "@def": TokenKind.DEF,
        "@life": TokenKind.LIFE,
        "@drop": TokenKind.DROP,
        "@rareness": TokenKind.RARENESS,
        "@level": TokenKind.LEVEL,
        "@max-life": TokenKind.MAX_LIFE,
        "@exp-to-level-up": TokenKind.EXP_TO_LEVEL_UP,
        "@inventory": TokenKind.INVENTORY,
        "@heal": TokenKind.HEAL,
        "@damage": TokenKind.DAMAGE,
        "@teleport": TokenKind.TELEPORT,
        "@start": TokenKind.START,
        "@random": TokenKind.RANDOM,
    }
)
"""Exact keyword spellings. Case-sensitive, no prefix matching."""


def lookup_keyword(spelling: str) -> TokenKind | None:
    """Return the keyword kind for `spelling`, or None if it is free text."""
    return KEYWORDS.get(spelling)


EMPTY_RANGE: Final[TextRange] = TextRange.empty(TextSize.from_int(0))


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `value` holds the payload of INT (int) and STRING (str) tokens and is None
    for everything else. The source range does not take part in equality.
    """

    kind: TokenKind
    value: int | str | None = None
    range: TextRange = field(default=EMPTY_RANGE, compare=False)

    @property
    def is_eof(self) -> bool:
        return self.kind == TokenKind.EOF

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.kind.name})"
        return f"Token({self.kind.name}, {self.value!r})"


EOF_TOKEN: Final[Token] = Token(TokenKind.EOF)
