"""
minic Statement Parser

Parses a minic token sequence into a single abstract syntax tree.

This module implements a recursive-descent parser with one token of lookahead
and no backtracking. Each grammar rule has its own `parse_*` method:

Grammar
-------
    statement            ::= variable_declaration
    variable_declaration ::= "int" IDENTIFIER "=" expression ";"
    expression           ::= term ( ("+" | "-") term )*
    term                 ::= INTEGER_LITERAL

Expressions are a single additive tier folded left to right, so
`1 + 2 - 3` parses as `(1 + 2) - 3`. STAR and SLASH tokens are never consumed.

Parser Behavior
---------------
- Rules raise `ParseError` (a `SyntaxError`) at the first grammar violation.
- There is no recovery: the first error ends the parse.
- `parse()` captures the error into a `ParseResult`, which holds either the
  complete tree or the failure, never a partial tree.
- Tokens after the terminating `;` are not examined.

Entry Points
------------
- `Parser(tokens).parse()`: Parse a token list ending in END_OF_INPUT.
- `parse_source(source)`: Tokenize and parse a source string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from minic.minic_ast import (
    BinaryOperation,
    Expression,
    NumberLiteral,
    SyntaxNode,
    VariableDeclaration,
)
from minic.minic_constants import TokenKind, additive_operators
from minic.minic_lexer import Token, tokenize


class ParseError(SyntaxError):
    """Raised when a required construct is missing at the current token.

    Attributes:
        token (Token): The token the parser was looking at.
        line (int): Line of that token.
        col (int): Column of that token.
    """

    def __init__(self, message: str, token: Token) -> None:
        self.token = token
        self.line = token.line
        self.col = token.col
        super().__init__(
            f"{message} at line {token.line}, col {token.col} "
            f"(got {token.kind} {token.lexeme!r})"
        )


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a parse: a complete tree, or the error that stopped it."""

    node: SyntaxNode | None = None
    error: ParseError | None = None

    def __post_init__(self) -> None:
        if (self.node is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of node or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        return str(self.error) if self.error is not None else None

    def unwrap(self) -> SyntaxNode:
        """Returns the tree, or raises the stored ParseError."""
        if self.error is not None:
            raise self.error
        return cast(SyntaxNode, self.node)

    def __bool__(self) -> bool:
        return self.ok


class Parser:
    """
    minic Parser Class

    Holds a read-only token list and a cursor into it.

    Attributes
    ----------
    tokens : list[Token]
        The input token stream. Must end with exactly one END_OF_INPUT token.
    position : int
        Current index into the token stream.

    Raises
    ------
    ValueError
        If the token list is not terminated by exactly one END_OF_INPUT token.
    """

    def __init__(self, tokens: list[Token]) -> None:
        tokens = list(tokens)
        ends = [i for i, tok in enumerate(tokens) if tok.kind == TokenKind.END_OF_INPUT]
        if ends != [len(tokens) - 1]:
            raise ValueError("Token sequence must end with exactly one END_OF_INPUT token")
        self.tokens: list[Token] = tokens
        self.position: int = 0

    def current(self) -> Token:
        return self.tokens[self.position]

    def advance(self) -> Token:
        """Moves to the next token; stays put on the final END_OF_INPUT."""
        if self.position < len(self.tokens) - 1:
            self.position += 1
        return self.current()

    def expect(self, kind: TokenKind, message: str) -> Token:
        tok = self.current()
        if tok.kind != kind:
            raise ParseError(message, tok)
        self.advance()
        return tok

    def parse(self) -> ParseResult:
        """Parse one statement and report the outcome."""
        try:
            return ParseResult(node=self.parse_statement())
        except ParseError as e:
            return ParseResult(error=e)

    def parse_statement(self) -> SyntaxNode:
        tok = self.current()
        if tok.kind == TokenKind.INT_KEYWORD:
            return self.parse_variable_declaration()
        raise ParseError("Expected 'int' at start of statement", tok)

    def parse_variable_declaration(self) -> VariableDeclaration:
        """Parse `int <identifier> = <expression> ;`."""
        type_tok = self.expect(TokenKind.INT_KEYWORD, "Expected 'int'")
        ident_tok = self.expect(TokenKind.IDENTIFIER, "Expected an identifier after int")
        self.expect(TokenKind.ASSIGN, "Expected equals sign")
        initializer = self.parse_expression()
        self.expect(TokenKind.SEMICOLON, "Expected semicolon")
        return VariableDeclaration(type_tok, ident_tok, initializer)

    def parse_expression(self) -> Expression:
        """Parse a left-associative chain of `+`/`-` over terms."""
        left: Expression | None = self.parse_term()
        if left is None:
            raise ParseError("Expected an expression after '='", self.current())

        while self.current().kind in additive_operators:
            op_tok = self.current()
            self.advance()
            right = self.parse_term()
            if right is None:
                raise ParseError("Expected operand after operator", self.current())
            left = BinaryOperation(left, op_tok, right)

        return left

    def parse_term(self) -> NumberLiteral | None:
        # None means "no term here"; the caller decides whether that is an error
        tok = self.current()
        if tok.kind == TokenKind.INTEGER_LITERAL:
            self.advance()
            return NumberLiteral(tok)
        return None


def parse_source(source: str) -> ParseResult:
    """Tokenize `source` and parse it as a single statement."""
    return Parser(tokenize(source)).parse()


__all__ = ["ParseError", "ParseResult", "Parser", "parse_source"]
