"""Binary tree nodes, a binary search tree and breadth-first traversal."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, Sequence, TypeVar

from structlab.structures import Queue

T = TypeVar("T")

_SAMPLE_VALUES = (7, 6, 10, 2, 13, 1, 5, 16)


@dataclass
class TreeNode(Generic[T]):
    """A node of a binary tree."""

    data: T
    left: Optional["TreeNode[T]"] = None
    right: Optional["TreeNode[T]"] = None


class BinarySearchTree(Generic[T]):
    """A binary search tree that ignores duplicate values."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode[T]] = None

    def insert(self, value: T) -> None:
        """Insert ``value`` unless it is already present."""
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value < node.data:  # type: ignore[operator]
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            elif node.data < value:  # type: ignore[operator]
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            else:
                return


def breadth_first(root: Optional[TreeNode[Any]]) -> Iterator[Any]:
    """Yield the values of the tree level by level, left to right."""
    if root is None:
        return
    pending: Queue[TreeNode[Any]] = Queue()
    pending.enqueue(root)
    while pending:
        node = pending.dequeue()
        yield node.data
        if node.left is not None:
            pending.enqueue(node.left)
        if node.right is not None:
            pending.enqueue(node.right)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a sample search tree and print it in breadth-first order."""
    parser = argparse.ArgumentParser(
        description="Print a sample binary search tree in breadth-first order."
    )
    parser.parse_args(argv)
    tree: BinarySearchTree[int] = BinarySearchTree()
    for value in _SAMPLE_VALUES:
        tree.insert(value)
    print(" ".join(str(value) for value in breadth_first(tree.root)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())