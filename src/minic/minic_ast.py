"""
Defines the abstract syntax tree (AST) node types for the minic statement language.

Classes:
    NumberLiteral:
        Terminal node wrapping one INTEGER_LITERAL token.
    BinaryOperation:
        Additive operation (`+` or `-`) owning a left and a right expression.
    VariableDeclaration:
        `int <name> = <expression>;` owning the initializer expression.
    ASTDict:
        TypedDict shape produced by `to_dict()`, suitable for JSON output or debugging.

Type aliases:
    Expression: NumberLiteral | BinaryOperation
    SyntaxNode: Expression | VariableDeclaration

Nodes are frozen dataclasses. A parent exclusively owns its children and a tree
is never modified once built. Construction checks the token kinds each node
accepts and raises `ValueError` on a mismatch.

Example:
    node = VariableDeclaration(int_tok, name_tok, NumberLiteral(ten_tok))
"""

from dataclasses import dataclass
from typing import TypedDict, Union

from minic.minic_constants import TokenKind, additive_operators
from minic.minic_lexer import Token


class ASTDict(TypedDict, total=False):
    """
    Serialized form of a syntax tree node.

    Fields:
        kind (str): "number", "binary_op" or "var_decl".
        value (str): Literal text (number nodes).
        operator (str): Operator lexeme (binary nodes).
        left (ASTDict): Left operand (binary nodes).
        right (ASTDict): Right operand (binary nodes).
        type (str): Declared type lexeme (declarations).
        name (str): Declared identifier (declarations).
        initializer (ASTDict): Initializer expression (declarations).
        line (int): Source line of the node's leading token.
        col (int): Source column of the node's leading token.
    """

    kind: str
    value: str
    operator: str
    left: "ASTDict"
    right: "ASTDict"
    type: str
    name: str
    initializer: "ASTDict"
    line: int
    col: int


def _require_kind(token: Token, role: str, *kinds: TokenKind) -> None:
    if token.kind not in kinds:
        expected = " or ".join(str(k) for k in kinds)
        raise ValueError(f"{role} must be {expected}, got {token!r}")


@dataclass(frozen=True)
class NumberLiteral:
    token: Token

    def __post_init__(self) -> None:
        _require_kind(self.token, "NumberLiteral token", TokenKind.INTEGER_LITERAL)

    @property
    def value(self) -> str:
        """The raw digit text; converting it to a number is left to later stages."""
        return self.token.lexeme

    def to_dict(self) -> ASTDict:
        return {
            "kind": "number",
            "value": self.token.lexeme,
            "line": self.token.line,
            "col": self.token.col,
        }


@dataclass(frozen=True)
class BinaryOperation:
    left: "Expression"
    operator_token: Token
    right: "Expression"

    def __post_init__(self) -> None:
        _require_kind(self.operator_token, "BinaryOperation operator", *sorted(additive_operators))

    @property
    def operator(self) -> str:
        return self.operator_token.lexeme

    def to_dict(self) -> ASTDict:
        # Built bottom-up along the left spine: a long chain nests one level
        # per operator and would exhaust the recursion limit.
        spine: list[BinaryOperation] = []
        node: Expression = self
        while isinstance(node, BinaryOperation):
            spine.append(node)
            node = node.left
        result = node.to_dict()
        for op in reversed(spine):
            result = {
                "kind": "binary_op",
                "operator": op.operator_token.lexeme,
                "left": result,
                "right": op.right.to_dict(),
                "line": op.operator_token.line,
                "col": op.operator_token.col,
            }
        return result


@dataclass(frozen=True)
class VariableDeclaration:
    declared_type_token: Token
    identifier_token: Token
    initializer: "Expression"

    def __post_init__(self) -> None:
        _require_kind(self.declared_type_token, "Declared type", TokenKind.INT_KEYWORD)
        _require_kind(self.identifier_token, "Declared name", TokenKind.IDENTIFIER)

    @property
    def name(self) -> str:
        return self.identifier_token.lexeme

    def to_dict(self) -> ASTDict:
        return {
            "kind": "var_decl",
            "type": self.declared_type_token.lexeme,
            "name": self.identifier_token.lexeme,
            "initializer": self.initializer.to_dict(),
            "line": self.declared_type_token.line,
            "col": self.declared_type_token.col,
        }


Expression = Union[NumberLiteral, BinaryOperation]
SyntaxNode = Union[NumberLiteral, BinaryOperation, VariableDeclaration]


__all__ = [
    "ASTDict",
    "BinaryOperation",
    "Expression",
    "NumberLiteral",
    "SyntaxNode",
    "VariableDeclaration",
]
