"""Lexer."""

from collections.abc import Iterable

from dungeonmark.diagnostics import Diagnostic
from dungeonmark.diagnostics.codes import LEXER_UNEXPECTED_CHARACTER
from dungeonmark.lexer.tokens import Token, TokenKind, lookup_keyword
from dungeonmark.text import TextRange, TextSize, slice_text_range

INT_MAX = 2**31 - 1


class Lexer:
    """Single-pass lexer for the `@field: value` markup.

    Whitespace is skipped, not emitted. Adjacent free words are glued into one
    STRING token by `lex()`.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token | None:
        """Scan one token.

        Returns None when the current character is outside the accepted
        classes; the cursor is left on that character.
        """
        self._skip_whitespace()
        start = TextSize.from_int(self._position)

        if self.is_eof:
            return Token(TokenKind.EOF, range=TextRange.empty(start))

        ch = self._current_char()

        if ch == ":":
            self._advance(1)
            return Token(TokenKind.COLON, range=self._range_from(start))

        if _is_digit(ch):
            return Token(TokenKind.INT, self._lex_int(), self._range_from(start))

        if _is_word_char(ch):
            word = self._lex_word()
            kind = lookup_keyword(word)
            if kind is not None:
                return Token(kind, range=self._range_from(start))
            return Token(TokenKind.STRING, word, self._range_from(start))

        self._diagnostics.append(
            LEXER_UNEXPECTED_CHARACTER.at(
                TextRange.new(start, TextSize.from_int(self._position + 1)),
                message=f"{LEXER_UNEXPECTED_CHARACTER.message} Found {ch!r}.",
            )
        )
        return None

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            if token is None:
                # Lexing stops at the first unexpected character.
                tokens.append(Token(TokenKind.EOF, range=TextRange.empty(TextSize.from_int(self._position))))
                break
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return glue_strings(tokens)

    def _lex_int(self) -> int:
        value = 0
        while not self.is_eof and _is_digit(self._current_char()):
            value = min(value * 10 + int(self._current_char()), INT_MAX)
            self._advance(1)
        return value

    def _lex_word(self) -> str:
        start = self._position
        while not self.is_eof and _is_word_char(self._current_char()):
            self._advance(1)
        return self._source[start : self._position]

    def _skip_whitespace(self) -> None:
        while not self.is_eof and self._current_char().isspace():
            self._advance(1)

    def _range_from(self, start: TextSize) -> TextRange:
        return TextRange.new(start, TextSize.from_int(self._position))

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self, steps: int) -> None:
        self._position += steps


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "@" or ch == "-"


def glue_strings(tokens: Iterable[Token]) -> list[Token]:
    """Merge runs of adjacent STRING tokens into one space-joined STRING token.

    Idempotent: a glued sequence never contains two adjacent STRING tokens.
    """
    glued: list[Token] = []
    for token in tokens:
        previous = glued[-1] if glued else None
        if token.kind == TokenKind.STRING and previous is not None and previous.kind == TokenKind.STRING:
            glued[-1] = Token(
                TokenKind.STRING,
                f"{previous.value} {token.value}",
                previous.range.cover(token.range),
            )
            continue
        glued.append(token)
    return glued


def tokenize(text: str) -> list[Token]:
    """Lex `text` into a glued token sequence ending with exactly one EOF."""
    return Lexer(text).lex()


def token_text(source: str, token: Token) -> str:
    """Get the raw source text of a token based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, value, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<16} range={tok.range.as_tuple()} value={tok.value!r} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
