"""
Lexical analyzer for the minic statement language.

This module turns raw source text into a stream of tokens:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: Immutable token with kind, lexeme, and source location.
    Lexer: Converts a source string into a sequence of tokens, one per call.

Functions:
    tokenize: Exhausts a Lexer and returns every token, END_OF_INPUT included.

Features:
    - Skips ASCII whitespace
    - Recognizes:
        * The `int` keyword and identifiers (ASCII letter followed by letters/digits)
        * Integer literals (runs of ASCII digits, kept as raw text)
        * Single-character operators and punctuation: + - * / = ;
    - Never raises: any other character becomes a one-character UNKNOWN token

Example:
    >>> lexer = Lexer("int x = 1;")
    >>> lexer.next_token()
    Token(INT_KEYWORD, 'int')

Exports:
    - CharacterStream
    - Token
    - Lexer
    - tokenize
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from minic.minic_constants import (
    ALNUM,
    DIGITS,
    LETTERS,
    WHITESPACE,
    TokenKind,
    keyword_hashmap,
    token_hashmap,
)


class CharacterStream:
    """
    Reads characters from a string source with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise EOFError(
                f"Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character at `offset` without advancing, or "" when out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        kind (TokenKind): The token's kind.
        lexeme (str): The exact source text of the token ("" for END_OF_INPUT).
        line (int): The 1-based line where the token starts (0 if synthesized).
        col (int): The 1-based column where the token starts (0 if synthesized).

    Equality and hashing only consider kind and lexeme.
    """

    kind: TokenKind
    lexeme: str
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r})"


class Lexer:
    """Lexical analyzer for minic.

    The source is fixed at construction; each call to `next_token()` advances
    an internal cursor past exactly one token. Once the source is exhausted
    every further call returns an END_OF_INPUT token.

    Attributes:
        stream (CharacterStream): The source stream being tokenized.
    """

    def __init__(self, source: str) -> None:
        self.stream = CharacterStream(source)

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.peek() in WHITESPACE:
            self.advance()

    def read_while(self, allowed: frozenset[str]) -> str:
        """Consumes the maximal run of characters drawn from `allowed`."""
        text = ""
        while not self.stream.end_of_file() and self.peek() in allowed:
            text += self.advance()
        return text

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream."""
        self.skip_whitespace()

        line, col = self.stream.line, self.stream.column
        if self.stream.end_of_file():
            return Token(TokenKind.END_OF_INPUT, "", line, col)

        ch = self.peek()

        # 1. Operator or punctuation
        if ch in token_hashmap:
            return Token(token_hashmap[ch], self.advance(), line, col)

        # 2. Integer literal
        if ch in DIGITS:
            return Token(TokenKind.INTEGER_LITERAL, self.read_while(DIGITS), line, col)

        # 3. Identifier or keyword
        if ch in LETTERS:
            ident = self.read_while(ALNUM)
            return Token(keyword_hashmap.get(ident, TokenKind.IDENTIFIER), ident, line, col)

        # 4. Anything else
        return Token(TokenKind.UNKNOWN, self.advance(), line, col)

    def __iter__(self) -> Iterator[Token]:
        """Yields tokens up to and including the first END_OF_INPUT."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind == TokenKind.END_OF_INPUT:
                return


def tokenize(source: str) -> list[Token]:
    """Tokenizes `source` completely.

    Returns:
        list[Token]: Every token in order, terminated by exactly one END_OF_INPUT token.
    """
    return list(Lexer(source))


__all__ = ["CharacterStream", "Lexer", "Token", "tokenize"]
