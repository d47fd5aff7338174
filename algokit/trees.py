"""Binary tree nodes and traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import groupby
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder(root: TreeNode | None) -> list:
    """Values in left, root, right order."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def preorder(root: TreeNode | None) -> list:
    """Values in root, left, right order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: TreeNode | None) -> list:
    """Values in left, right, root order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: TreeNode | None) -> list:
    """Values level by level, left to right."""
    result = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.val)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def vertical_traversal(root: TreeNode | None) -> list[list]:
    """Values grouped by column, left to right; each column by row, then value."""
    entries = []
    stack = [(root, 0, 0)] if root is not None else []
    while stack:
        node, row, col = stack.pop()
        entries.append((col, row, node.val))
        if node.left is not None:
            stack.append((node.left, row + 1, col - 1))
        if node.right is not None:
            stack.append((node.right, row + 1, col + 1))
    entries.sort()
    return [
        [val for _, _, val in column]
        for _, column in groupby(entries, key=lambda entry: entry[0])
    ]