"""
Text rendering for minic syntax trees and token streams.

Classes and Features:
    - TreePrinter: Walks a finished syntax tree and collects indented lines,
      two spaces per depth level, one `emit_*` method per node type.
    - render_tree: Convenience wrapper returning the rendered tree as a string.
    - render_json: The tree's `to_dict()` form as indented JSON.
    - render_tokens: One `Type: <KIND>, Value: '<lexeme>'` line per token.

Long `+`/`-` chains nest one level per operator, so every walker here uses an
explicit stack instead of recursion.

Example:
    >>> print(render_tree(parse_source("int result = 10;").unwrap()))
    VarDecl: result (int)
      Value:
        Number: 10

Raises:
    TypeError: If asked to render something that is not a syntax tree node.
"""

import json
from collections.abc import Iterable, Iterator
from typing import Any, Union

from minic.minic_ast import BinaryOperation, NumberLiteral, SyntaxNode, VariableDeclaration
from minic.minic_constants import display_names
from minic.minic_lexer import Token

# A pending entry is either a node still to visit or a label line to emit
Pending = tuple[Union[SyntaxNode, str], int]


class TreePrinter:
    """Renders a syntax tree as indented text.

    Attributes:
        lines (list[str]): Rendered output lines collected so far.
        pending (list[Pending]): Work stack of nodes and labels not yet emitted.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.pending: list[Pending] = []

    def emit_line(self, text: str, indent: int) -> None:
        self.lines.append("  " * indent + text)

    def emit_var_decl(self, node: VariableDeclaration, indent: int) -> None:
        self.emit_line(f"VarDecl: {node.name} ({node.declared_type_token.lexeme})", indent)
        self.emit_line("  Value:", indent)
        self.pending.append((node.initializer, indent + 2))

    def emit_binary_op(self, node: BinaryOperation, indent: int) -> None:
        self.emit_line(f"BinaryOp: {node.operator}", indent)
        # pushed in reverse so the left side is emitted first
        self.pending.append((node.right, indent + 2))
        self.pending.append(("  Right:", indent))
        self.pending.append((node.left, indent + 2))
        self.pending.append(("  Left:", indent))

    def emit_number(self, node: NumberLiteral, indent: int) -> None:
        self.emit_line(f"Number: {node.value}", indent)

    def visit(self, node: SyntaxNode, indent: int = 0) -> None:
        """Emits `node` and everything below it, dispatching on node type."""
        if isinstance(node, str):
            raise TypeError(f"Not a syntax tree node: {node!r}")
        self.pending.append((node, indent))
        while self.pending:
            item, depth = self.pending.pop()
            match item:
                case str():
                    self.emit_line(item, depth)
                case VariableDeclaration():
                    self.emit_var_decl(item, depth)
                case BinaryOperation():
                    self.emit_binary_op(item, depth)
                case NumberLiteral():
                    self.emit_number(item, depth)
                case _:
                    self.pending.clear()
                    raise TypeError(f"Not a syntax tree node: {item!r}")

    def get_output(self) -> str:
        return "\n".join(self.lines)


def render_tree(node: SyntaxNode) -> str:
    printer = TreePrinter()
    printer.visit(node)
    return printer.get_output()


def render_json(node: SyntaxNode) -> str:
    """Same text as `json.dumps(node.to_dict(), indent=2)`, without recursion."""
    parts: list[str] = ["{"]
    # frames are [items, depth, first]
    stack: list[list[Any]] = [[iter(node.to_dict().items()), 1, True]]
    while stack:
        frame = stack[-1]
        items: Iterator[tuple[str, Any]] = frame[0]
        depth: int = frame[1]
        entry = next(items, None)
        if entry is None:
            stack.pop()
            parts.append("\n" + "  " * (depth - 1) + "}")
            continue
        key, value = entry
        separator = "" if frame[2] else ","
        frame[2] = False
        parts.append(f"{separator}\n{'  ' * depth}{json.dumps(key)}: ")
        if isinstance(value, dict):
            parts.append("{")
            stack.append([iter(value.items()), depth + 1, True])
        else:
            parts.append(json.dumps(value))
    return "".join(parts)


def render_tokens(tokens: Iterable[Token]) -> str:
    return "\n".join(
        f"Type: {display_names[tok.kind]}, Value: '{tok.lexeme}'" for tok in tokens
    )


__all__ = ["TreePrinter", "render_json", "render_tokens", "render_tree"]
