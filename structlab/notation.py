"""Conversion between infix, postfix and prefix notation, and expression trees."""

from __future__ import annotations

from typing import Iterator, Optional

from structlab.structures import Stack
from structlab.trees import TreeNode

_OPERATORS = frozenset("+-*/^")
_PAREN_SWAP = str.maketrans("()", ")(")


def priority(operator: str) -> int:
    """Return the binding strength of an operator; anything else counts as 1."""
    if operator == "^":
        return 3
    if operator in ("*", "/"):
        return 2
    return 1


def is_operator(char: str) -> bool:
    """Return whether ``char`` is one of ``+ - * / ^``."""
    return char in _OPERATORS


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def reverse_expression(expression: str) -> str:
    """Reverse ``expression`` and swap opening with closing parentheses."""
    return expression[::-1].translate(_PAREN_SWAP)


def to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Characters that are neither operands, operators nor parentheses are
    skipped. Operators of equal priority associate to the left.
    """
    pending: Stack[str] = Stack()
    result: list[str] = []
    for char in infix:
        if _is_operand(char):
            result.append(char)
        elif char == "(":
            pending.push(char)
        elif char == ")":
            while pending and pending.peek() != "(":
                result.append(pending.pop())
            if pending:
                pending.pop()
        elif is_operator(char):
            while (
                pending
                and is_operator(pending.peek())
                and priority(char) <= priority(pending.peek())
            ):
                result.append(pending.pop())
            pending.push(char)
    result.extend(char for char in _drain(pending) if char not in "()")
    return "".join(result)


def _drain(stack: Stack[str]) -> Iterator[str]:
    while stack:
        yield stack.pop()


def to_prefix(infix: str) -> str:
    """Convert an infix expression to prefix by way of its reversed postfix."""
    return reverse_expression(to_postfix(reverse_expression(infix)))


def build_tree(postfix: str) -> TreeNode[str]:
    """Build an expression tree from a postfix expression.

    Raises ValueError when an operator lacks operands or no tree results.
    """
    pending: Stack[TreeNode[str]] = Stack()
    for char in postfix:
        if _is_operand(char):
            pending.push(TreeNode(char))
        elif is_operator(char):
            try:
                right = pending.pop()
                left = pending.pop()
            except IndexError:
                raise ValueError(
                    f"operator {char!r} is missing an operand in {postfix!r}"
                ) from None
            pending.push(TreeNode(char, left, right))
    if not pending:
        raise ValueError(f"no expression in {postfix!r}")
    return pending.pop()


def _preorder(node: Optional[TreeNode[str]]) -> Iterator[str]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode[str]]) -> Iterator[str]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode[str]]) -> Iterator[str]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def prefix_order(root: Optional[TreeNode[str]]) -> str:
    """Return the tree's symbols in pre-order."""
    return "".join(_preorder(root))


def infix_order(root: Optional[TreeNode[str]]) -> str:
    """Return the tree's symbols in in-order, without parentheses."""
    return "".join(_inorder(root))


def postfix_order(root: Optional[TreeNode[str]]) -> str:
    """Return the tree's symbols in post-order."""
    return "".join(_postorder(root))