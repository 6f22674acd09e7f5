"""Binary trees and the classic algorithms over them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree; nodes compare by identity."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _diameter_and_height(node: TreeNode | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_diameter, left_height = _diameter_and_height(node.left)
    right_diameter, right_height = _diameter_and_height(node.right)
    height = max(left_height, right_height) + 1
    through_here = left_height + right_height + 1
    return max(through_here, left_diameter, right_diameter), height


def diameter(root: TreeNode | None) -> int:
    """Number of nodes on the longest path between any two nodes; 0 for no tree."""
    return _diameter_and_height(root)[0]


def _balanced_height(node: TreeNode | None) -> int | None:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Whether no node's subtrees differ in height by more than one."""
    return _balanced_height(root) is not None


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """The deepest node having both ``p`` and ``q`` as descendants (or itself)."""
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Whether two trees have the same shape and the same values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def max_path_sum(root: TreeNode | None) -> int:
    """Largest sum of values along any non-empty path in the tree."""
    if root is None:
        raise ValueError("an empty tree has no path")
    best: int | None = None

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = gain(node.left)
        right = gain(node.right)
        candidate = max(left + right, left, right, 0) + node.val
        best = candidate if best is None else max(best, candidate)
        return max(0, left, right) + node.val

    gain(root)
    assert best is not None
    return best


def _mirrors(left: TreeNode | None, right: TreeNode | None) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return (
        left.val == right.val
        and _mirrors(left.left, right.right)
        and _mirrors(left.right, right.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Whether the tree is a mirror image of itself."""
    if root is None:
        return True
    return _mirrors(root.left, root.right)