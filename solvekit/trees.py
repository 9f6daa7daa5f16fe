"""Binary tree nodes and operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def remove_leaf_nodes(root: Optional[TreeNode], target: int) -> Optional[TreeNode]:
    """Delete leaves equal to ``target``, repeating while new such leaves appear."""
    if root is None:
        return None
    if root.left is not None:
        root.left = remove_leaf_nodes(root.left, target)
    if root.right is not None:
        root.right = remove_leaf_nodes(root.right, target)
    if root.left is None and root.right is None and root.val == target:
        return None
    return root


def evaluate_tree(root: TreeNode) -> bool:
    """Evaluate a full boolean tree: leaves 0/1, inner nodes 2 = OR, 3 = AND."""
    if root.left is None and root.right is None:
        return bool(root.val)
    if root.val == 2:
        return evaluate_tree(root.left) or evaluate_tree(root.right)
    if root.val == 3:
        return evaluate_tree(root.left) and evaluate_tree(root.right)
    return False