"""Tokenizer for the contents of a `{...}` code block."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, NamedTuple

from pagesmith.errors import UnterminatedStringError


SINGLE_CHAR_TOKENS = frozenset("(){},")

# str.isspace() also accepts the ASCII separators \x1c-\x1f; these are word characters.
NON_SPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")

ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}


def is_space(char: str) -> bool:
    return char.isspace() and char not in NON_SPACE_SEPARATORS


class Location(NamedTuple):
    """A position in a source file. Rows and columns start at 1."""

    path: str
    row: int = 1
    column: int = 1

    def advance(self, char: str) -> "Location":
        """Location of the character following `char`."""
        if char == "\n":
            return self._replace(row=self.row + 1, column=1)
        return self._replace(column=self.column + 1)

    def __str__(self) -> str:
        return f"{self.path}:{self.row}:{self.column}"


class TokenKind(enum.Enum):
    WORD = "word"
    STRING = "string"
    SINGLE_CHAR = "single_char"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    location: Location

    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD

    def is_string(self) -> bool:
        return self.kind is TokenKind.STRING

    def is_single_char(self, char: str) -> bool:
        return self.kind is TokenKind.SINGLE_CHAR and self.value == char


class Tokenizer:
    """Splits code into words, quoted strings and punctuation.

    Whitespace separates tokens and is dropped. Each token records the
    location of its first character.
    """

    def __init__(self, code: str, location: Location):
        self.code = code
        self.cursor = 0
        self.location = location

    def _peek(self) -> str | None:
        if self.cursor >= len(self.code):
            return None
        return self.code[self.cursor]

    def _advance(self) -> str | None:
        if self.cursor >= len(self.code):
            return None
        char = self.code[self.cursor]
        self.cursor += 1
        self.location = self.location.advance(char)
        return char

    def _skip_whitespace(self) -> None:
        while True:
            char = self._peek()
            if char is None or not is_space(char):
                return
            self._advance()

    def next_token(self) -> Token | None:
        """Return the next token, or None once the input is exhausted.

        Raises:
            UnterminatedStringError: If a string literal is not closed.
        """
        self._skip_whitespace()

        char = self._peek()
        if char is None:
            return None

        start = self.location

        if char in SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(TokenKind.SINGLE_CHAR, char, start)

        if char == '"':
            return Token(TokenKind.STRING, self._read_string(start), start)

        chars = []
        while True:
            char = self._peek()
            if (
                char is None
                or is_space(char)
                or char in SINGLE_CHAR_TOKENS
                or char == '"'
            ):
                break
            self._advance()
            chars.append(char)
        return Token(TokenKind.WORD, "".join(chars), start)

    def _read_string(self, start: Location) -> str:
        self._advance()  # opening quote
        chars = []
        while True:
            char = self._advance()
            if char is None:
                raise UnterminatedStringError(start)
            if char == "\\":
                escaped = self._advance()
                if escaped is None:
                    raise UnterminatedStringError(start)
                # Unknown escapes keep their backslash.
                chars.append(ESCAPES.get(escaped, "\\" + escaped))
                continue
            if char == '"':
                return "".join(chars)
            chars.append(char)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token
