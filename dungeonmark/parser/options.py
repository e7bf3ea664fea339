"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    COMPATIBLE = "compatible"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling how forgiving the field-scan loops are."""

    mode: ParseMode = ParseMode.COMPATIBLE
    require_separator: bool = False
    scan_gold_fields: bool = False

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.STRICT:
            return ParserOptions(mode=mode, require_separator=True)

        return ParserOptions(mode=mode, require_separator=False)
