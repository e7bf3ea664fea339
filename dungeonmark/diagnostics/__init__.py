"""Diagnostics."""

from dungeonmark.diagnostics.codes import (
    LEXER_UNEXPECTED_CHARACTER,
    LOADER_DUPLICATE_ITEM,
    LOADER_REJECTED_RECORD,
    LOADER_UNREADABLE_FILE,
    DiagnosticSpec,
)
from dungeonmark.diagnostics.diagnostic import Diagnostic, Severity, has_errors

__all__ = [
    "LEXER_UNEXPECTED_CHARACTER",
    "LOADER_DUPLICATE_ITEM",
    "LOADER_REJECTED_RECORD",
    "LOADER_UNREADABLE_FILE",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
]
