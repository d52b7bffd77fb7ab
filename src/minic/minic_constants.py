"""
Token vocabulary for the minic statement language.

Defines the closed set of token kinds produced by the lexer, the lookup tables
used to classify single-character operators and reserved words, and the ASCII
character classes the lexer scans with.

Exports:
    - TokenKind
    - token_hashmap
    - keyword_hashmap
    - additive_operators
    - display_names
    - WHITESPACE, DIGITS, LETTERS, ALNUM
"""

import string
from enum import Enum


class TokenKind(str, Enum):
    """Every kind of token the lexer can emit.

    STAR and SLASH are recognized by the lexer even though the grammar never
    consumes them.
    """

    INT_KEYWORD = "INT_KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    INTEGER_LITERAL = "INTEGER_LITERAL"
    PLUS = "PLUS"
    MINUS = "MINUS"
    STAR = "STAR"
    SLASH = "SLASH"
    ASSIGN = "ASSIGN"
    SEMICOLON = "SEMICOLON"
    END_OF_INPUT = "END_OF_INPUT"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value


# Single-character operators and punctuation
token_hashmap: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "=": TokenKind.ASSIGN,
    ";": TokenKind.SEMICOLON,
}

# Reserved words, matched case-sensitively
keyword_hashmap: dict[str, TokenKind] = {
    "int": TokenKind.INT_KEYWORD,
}

additive_operators: frozenset[TokenKind] = frozenset({TokenKind.PLUS, TokenKind.MINUS})

# Names used in token listings
display_names: dict[TokenKind, str] = {
    TokenKind.INT_KEYWORD: "KEYWORD_INT",
    TokenKind.IDENTIFIER: "IDENTIFIER",
    TokenKind.INTEGER_LITERAL: "INTEGER_LITERAL",
    TokenKind.PLUS: "OPERATOR_PLUS",
    TokenKind.MINUS: "OPERATOR_MINUS",
    TokenKind.STAR: "OPERATOR_MULTIPLY",
    TokenKind.SLASH: "OPERATOR_DIVIDE",
    TokenKind.ASSIGN: "OPERATOR_ASSIGN",
    TokenKind.SEMICOLON: "PUNCTUATION_SEMICOLON",
    TokenKind.END_OF_INPUT: "END_OF_FILE",
    TokenKind.UNKNOWN: "UNKNOWN",
}

# ASCII only: str.isdigit()/isalpha() would also accept non-ASCII characters
WHITESPACE = frozenset(string.whitespace)
DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
ALNUM = DIGITS | LETTERS

__all__ = [
    "ALNUM",
    "DIGITS",
    "LETTERS",
    "WHITESPACE",
    "TokenKind",
    "additive_operators",
    "display_names",
    "keyword_hashmap",
    "token_hashmap",
]
