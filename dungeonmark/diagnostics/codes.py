"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from dungeonmark.diagnostics.diagnostic import Diagnostic, Severity
from dungeonmark.text import TextRange


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def at(
        self,
        range: TextRange,
        *,
        message: str | None = None,
        source_path: str | None = None,
    ) -> Diagnostic:
        """Build a diagnostic at `range`, optionally overriding the message."""
        return Diagnostic(
            code=self.code,
            message=message if message is not None else self.message,
            range=range,
            severity=self.severity,
            hint=self.hint,
            category=self.category,
            source_path=source_path,
        )


LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character; lexing stopped here.",
    hint="Only letters, digits, `@`, `-`, `:` and whitespace are allowed.",
    severity="error",
    category="lexer",
)

LOADER_REJECTED_RECORD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LOADER_REJECTED_RECORD",
    message="File does not describe a valid record of the expected kind.",
    hint="Check the leading record keyword (`@item <kind>`, `@monster`, `@player`).",
    severity="error",
    category="loader",
)

LOADER_UNREADABLE_FILE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LOADER_UNREADABLE_FILE",
    message="File could not be read or decoded as UTF-8.",
    severity="error",
    category="loader",
)

LOADER_DUPLICATE_ITEM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LOADER_DUPLICATE_ITEM",
    message="Item name already defined; lookups resolve to the first definition.",
    severity="warning",
    category="loader",
)
