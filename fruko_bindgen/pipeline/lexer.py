"""
Lexer for the data definition language.

Phase 1 of the pipeline: turn raw source text into an ordered list of
tokens with source locations. Whitespace is discarded and has no effect on
the tokens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .errors import FrukoBindgenError

logger = logging.getLogger(__name__)


@dataclass
class SourceLocation:
    """A line (1-based) and a position within that line (0-based)."""

    line: int = 1
    position: int = 0

    def __str__(self) -> str:
        return f"{self.line}:{self.position}"


class TokenType(str, Enum):
    """Token types of the data definition language."""

    # Grammar
    LPAREN = "("
    RPAREN = ")"
    LCURLY = "{"
    RCURLY = "}"
    LSQUARE = "["
    RSQUARE = "]"
    COMMA = ","
    COLON = ":"

    # Keywords
    STRUCT = "struct"
    ENUM = "enum"

    # Type keywords
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"
    STRING = "string"
    CHAR = "char"
    BOOL = "bool"
    OPTION = "option"
    ARRAY = "array"

    # Generic name
    IDENTIFIER = "identifier"


PUNCTUATION: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LCURLY,
    "}": TokenType.RCURLY,
    "[": TokenType.LSQUARE,
    "]": TokenType.RSQUARE,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
}

KEYWORDS: dict[str, TokenType] = {
    token_type.value: token_type
    for token_type in TokenType
    if token_type.value.isalnum() and token_type is not TokenType.IDENTIFIER
}


@dataclass
class Token:
    """
    A single token.

    Attributes:
        token_type: Type of the token
        source_location: Where the token was read
        value: The identifier text (empty for every other token type)
    """

    token_type: TokenType
    source_location: SourceLocation = field(default_factory=SourceLocation)
    value: str = ""

    def __str__(self) -> str:
        if self.token_type is TokenType.IDENTIFIER:
            return f"'{self.value}'"
        return f"'{self.token_type.value}'"


class LexError(FrukoBindgenError):
    """Raised when the source text cannot be tokenized."""

    pass


class UnknownCharacterError(LexError):
    """Raised when a character outside the language alphabet is found."""

    def __init__(self, location: SourceLocation, character: str = ""):
        self.location = location
        self.character = character
        super().__init__(f"Unknown character at {location}")


class Lexer:
    """
    Single pass, one character lookahead tokenizer.

    The location recorded on a token is the location after consuming the
    character that produced it. For names that is the first character of
    the name.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.source_location = SourceLocation()

    def peek(self) -> str | None:
        """Get the next character without consuming it, or None at the end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def next(self) -> str | None:
        """Consume a character, updating the source location."""
        char = self.peek()
        if char is None:
            return None
        self.pos += 1
        self.source_location.position += 1
        if char == "\n":
            self.source_location.line += 1
            self.source_location.position = 0
        return char

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            The list of tokens, in source order

        Raises:
            UnknownCharacterError: If a character is not part of the language
        """
        tokens: list[Token] = []

        while self.peek() is not None:
            char = self.next()

            if char.isspace():
                continue

            location = self._location()

            if char in PUNCTUATION:
                tokens.append(Token(PUNCTUATION[char], location))
            elif char.isalnum():
                tokens.append(self._lex_name(char, location))
            else:
                raise UnknownCharacterError(location, char)

        return tokens

    def _lex_name(self, start_char: str, location: SourceLocation) -> Token:
        """Lex a keyword or an identifier starting with start_char."""
        chars = [start_char]
        while self.peek() is not None and self.peek().isalnum():
            chars.append(self.next())

        name = "".join(chars)
        if name in KEYWORDS:
            return Token(KEYWORDS[name], location)
        return Token(TokenType.IDENTIFIER, location, name)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.source_location.line, self.source_location.position)


def lex_tokens(contents: str) -> list[Token]:
    """
    Transform a string into a list of tokens.

    Args:
        contents: The source text

    Returns:
        The tokens found in contents

    Raises:
        UnknownCharacterError: If an unknown character is encountered
    """
    tokens = Lexer(contents).tokenize()
    logger.debug("Lexed %d tokens from %d characters", len(tokens), len(contents))
    return tokens
