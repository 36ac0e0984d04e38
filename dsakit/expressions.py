"""Conversion between infix, postfix and prefix notation, and expression trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

_OPERATORS = frozenset("+-*/")
_PAREN_SWAP = str.maketrans("()", ")(")


class ExpressionError(ValueError):
    """Raised for a malformed expression."""


@dataclass(eq=False)
class ExprNode:
    """A node of an expression tree: an operand leaf or an operator."""

    data: str
    left: ExprNode | None = field(default=None, repr=False)
    right: ExprNode | None = field(default=None, repr=False)


def is_operator(ch: str) -> bool:
    """Return whether ``ch`` is one of the four arithmetic operators."""
    return ch in _OPERATORS


def precedence(ch: str) -> int:
    """Return the binding strength of ``ch``: 2 for * and /, 1 for + and -, else 0."""
    if ch in "*/" and ch:
        return 2
    if ch in "+-" and ch:
        return 1
    return 0


def _tokens(expression: str) -> Iterator[str]:
    for ch in expression:
        if ch.isspace():
            continue
        if not (ch.isalnum() or is_operator(ch) or ch in "()"):
            raise ExpressionError(f"unexpected character {ch!r}")
        yield ch


def infix_to_postfix(infix: str) -> str:
    """Convert a single-character-operand infix expression to postfix."""
    stack: list[str] = []
    output: list[str] = []
    for ch in _tokens(infix):
        if ch.isalnum():
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unmatched ')'")
            stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ExpressionError("unmatched '('")
        output.append(top)
    return "".join(output)


def infix_to_prefix(infix: str) -> str:
    """Convert an infix expression to prefix by reversing through postfix."""
    reversed_infix = infix[::-1].translate(_PAREN_SWAP)
    return infix_to_postfix(reversed_infix)[::-1]


def postfix_to_infix(postfix: str) -> str:
    """Convert a postfix expression to a fully parenthesised infix expression."""
    stack: list[str] = []
    for ch in _tokens(postfix):
        if ch.isalnum():
            stack.append(ch)
        elif is_operator(ch):
            if len(stack) < 2:
                raise ExpressionError(f"operator {ch!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(f"({left}{ch}{right})")
        else:
            raise ExpressionError("parentheses are not allowed in postfix")
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return stack[0]


def build_expression_tree(postfix: str) -> ExprNode:
    """Build the expression tree of a postfix expression and return its root."""
    stack: list[ExprNode] = []
    for ch in _tokens(postfix):
        if ch.isalnum():
            stack.append(ExprNode(ch))
        elif is_operator(ch):
            if len(stack) < 2:
                raise ExpressionError(f"operator {ch!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(ExprNode(ch, left, right))
        else:
            raise ExpressionError("parentheses are not allowed in postfix")
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single tree")
    return stack[0]


def _inorder(node: ExprNode | None) -> Iterator[str]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: ExprNode | None) -> Iterator[str]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: ExprNode | None) -> Iterator[str]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def inorder(node: ExprNode | None) -> list[str]:
    """Return the symbols of the tree in in-order."""
    return list(_inorder(node))


def preorder(node: ExprNode | None) -> list[str]:
    """Return the symbols of the tree in pre-order."""
    return list(_preorder(node))


def postorder(node: ExprNode | None) -> list[str]:
    """Return the symbols of the tree in post-order."""
    return list(_postorder(node))