"""Binary trees built from pre-order input, with the usual traversals."""

from dataclasses import dataclass
from typing import Optional

NULL = -1


@dataclass
class Node:
    """A binary tree node."""

    value: object
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def build_tree(values):
    """Build a tree from its pre-order listing, ``-1`` standing for no node.

    Values left over once the tree is complete are ignored.
    """
    it = iter(values)

    def read():
        try:
            value = next(it)
        except StopIteration:
            raise ValueError("values end before the tree is complete") from None
        if value == NULL:
            return None
        node = Node(value)
        node.left = read()
        node.right = read()
        return node

    return read()


def level_order(root):
    """Return the tree's values level by level, each level left to right."""
    levels = []
    level = [root] if root is not None else []
    while level:
        levels.append([node.value for node in level])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def breadth_first(root):
    """Return the tree's values in breadth-first order."""
    return [value for level in level_order(root) for value in level]


def reverse_level_order(root):
    """Return the levels from the deepest up, each level right to left."""
    return [level[::-1] for level in reversed(level_order(root))]


def preorder(root):
    """Return the values in node, left, right order."""
    out = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        out.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return out


def inorder(root):
    """Return the values in left, node, right order."""
    out = []
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        out.append(node.value)
        node = node.right
    return out


def postorder(root):
    """Return the values in left, right, node order."""
    out = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        out.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    out.reverse()
    return out