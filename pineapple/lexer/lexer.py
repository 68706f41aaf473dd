from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass
from typing import Optional, Tuple

from pineapple.error.communicator import Communicator
from pineapple.error.lexer_error import (
    ExpectedTargetError,
    LexerException,
    UnexpectedSymbolError,
)
from pineapple.error.parser_error import ParserException, UnexpectedTokenError
from pineapple.token import Token
from pineapple.type import Type
from pineapple.util import BLANK_CHARACTERS, NEWLINE_PATTERN, Span

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")
BLANK_PATTERN = re.compile(r"[ \t\f\n\r]+")

# Single characters that form a token on their own
PUNCTUATION = {
    "$": Type.VAR_PREFIX,
    "(": Type.LRB,
    ")": Type.RRB,
    "=": Type.EQ,
}


@dataclass(frozen=True)
class Cursor:
    """A position in the program: the index of the next unread character,
    and the (1-based) line and (0-based) column of that character."""

    index: int = 0
    line: int = 1
    col: int = 0

    def advance(self, consumed: str) -> Cursor:
        """Return the Cursor that follows after reading `consumed`."""
        last = None
        lines = 0
        for last in NEWLINE_PATTERN.finditer(consumed):
            lines += 1

        if last is None:
            return Cursor(self.index + len(consumed), self.line, self.col + len(consumed))
        return Cursor(
            self.index + len(consumed), self.line + lines, len(consumed) - last.end()
        )


class Lexer:
    def __init__(self, program: str) -> None:
        self.program = program
        self.cursor = Cursor()

        # The one-token lookahead buffer, and the line we were on when it was filled
        self.peeked: Optional[Token] = None
        self.peeked_line = 0

    @property
    def line(self) -> int:
        """The line of the last consumed token, ignoring the lookahead buffer."""
        if self.peeked is not None:
            return self.peeked_line
        return self.cursor.line

    @property
    def remaining(self) -> str:
        return self.program[self.cursor.index :]

    def span(self, start: Cursor) -> Span:
        """The Span from `start` up to the current cursor."""
        return Span((start.line, self.cursor.line), (start.col, self.cursor.col))

    def skip(self, n: int) -> None:
        consumed = self.program[self.cursor.index : self.cursor.index + n]
        self.cursor = self.cursor.advance(consumed)

    def scan_name(self) -> Optional[Tuple[str, Type]]:
        """Consume the longest run of letters, digits and underscores.

        Returns:
            Optional[Tuple[str, Type]]: The name, and `Type.PRINT` if the name is
                the `print` keyword or `Type.NAME` otherwise. None if no name follows.
        """
        match = NAME_PATTERN.match(self.program, self.cursor.index)
        if match is None:
            return None

        name = match[0]
        self.skip(len(name))
        if name == Type.PRINT.value:
            return name, Type.PRINT
        return name, Type.NAME

    def is_blank_ahead(self) -> bool:
        """Skip all whitespace and newlines at the front of the remaining program.

        Returns:
            bool: True if nothing but whitespace remained, i.e. the program is now
                fully consumed. False if a meaningful character follows.
        """
        match = BLANK_PATTERN.match(self.program, self.cursor.index)
        if match is not None:
            self.skip(len(match[0]))
        return self.cursor.index >= len(self.program)

    def match_token(self) -> Token:
        """Classify and consume the next token of the program.

        Raises:
            LexerException: If the next character cannot start any token.
        """
        start = self.cursor
        if start.index >= len(self.program):
            return Token("EOF", Type.EOF, self.span(start))

        char = self.program[start.index]
        match char:
            case c if c in PUNCTUATION:
                self.skip(1)
                return Token(char, PUNCTUATION[char], self.span(start))

            case '"':
                # Two quotes in a row form the empty string
                if self.program.startswith('""', start.index):
                    self.skip(2)
                    return Token('""', Type.DUOQUOTE, self.span(start))
                self.skip(1)
                return Token('"', Type.QUOTE, self.span(start))

            case c if c == "_" or c in string.ascii_letters:
                name, _type = self.scan_name()
                return Token(name, _type, self.span(start))

            case c if c in BLANK_CHARACTERS:
                # The entire run of whitespace becomes a single token
                self.is_blank_ahead()
                return Token(c, Type.IGNORED, Span(start.line, (start.col, start.col + 1)))

        self.skip(1)
        UnexpectedSymbolError(self.program, self.span(start), char)
        Communicator.communicate(LexerException)

    def scan_until_token(self, target: str) -> str:
        """Consume and return everything up to the next occurrence of `target`,
        leaving `target` itself as the next input.

        Raises:
            LexerException: If `target` does not occur in the remaining program.
        """
        assert self.peeked is None, "cannot scan past a buffered lookahead token"

        start = self.cursor
        end = self.program.find(target, start.index)
        if end == -1:
            ExpectedTargetError(self.program, Span(start.line, (start.col, start.col)), target)
            Communicator.communicate(LexerException)

        scanned = self.program[start.index : end]
        self.skip(len(scanned))
        return scanned

    def get_next_token(self) -> Token:
        if self.peeked is not None:
            token, self.peeked = self.peeked, None
            return token

        token = self.match_token()
        logger.debug("Matched %s %r on line %d", token.type.name, token.text, token.line)
        return token

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        if self.peeked is None:
            line = self.cursor.line
            self.peeked = self.get_next_token()
            self.peeked_line = line
        return self.peeked

    def look_ahead(self) -> Type:
        return self.peek().type

    def look_ahead_and_skip(self, expected: Type) -> None:
        """Consume the next token if it is of type `expected`, e.g. to skip one run
        of `Type.IGNORED` whitespace. Otherwise, keep it as the lookahead."""
        line = self.line
        token = self.get_next_token()
        if token.type != expected:
            self.peeked = token
            self.peeked_line = line

    def find_and_consume(self, target: Type) -> Tuple[int, str]:
        """Consume the next token, which must be of type `target`.

        Returns:
            Tuple[int, str]: The line and text of the consumed token.

        Raises:
            ParserException: If the next token is of any other type.
        """
        token = self.get_next_token()
        if token.type != target:
            UnexpectedTokenError(self.program, token.span, target, token)
            Communicator.communicate(ParserException)
        return token.line, token.text
