"""Token cursor shared by the record grammars."""

from collections.abc import Sequence

from dungeonmark.lexer import EOF_TOKEN, Token, TokenKind
from dungeonmark.parser.options import ParserOptions


class Parser:
    """Forward-only cursor over a lexed token sequence.

    The sequence always ends with EOF and the cursor never moves past it, so
    reading at the end keeps yielding EOF instead of raising.
    """

    def __init__(self, tokens: Sequence[Token], options: ParserOptions | None = None) -> None:
        self._tokens = list(tokens)
        if not self._tokens or not self._tokens[-1].is_eof:
            self._tokens.append(EOF_TOKEN)
        self._options = options or ParserOptions()
        self._position = 0

    @property
    def tokens(self) -> list[Token]:
        return self._tokens

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def position(self) -> int:
        return self._position

    @property
    def current(self) -> TokenKind:
        return self.peek().kind

    @property
    def at_eof(self) -> bool:
        return self.current == TokenKind.EOF

    def peek(self) -> Token:
        return self._tokens[self._position]

    def advance(self) -> Token:
        token = self._tokens[self._position]
        if not token.is_eof:
            self._position += 1
        return token

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.advance()
            return True
        return False
