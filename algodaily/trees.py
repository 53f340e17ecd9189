"""Binary tree node type and classic binary tree algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node. Nodes compare by identity."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, _MISSING)
        if left is _MISSING:
            break
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(items, _MISSING)
        if right is _MISSING:
            break
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.val
    yield from _inorder(node.right)


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the node values in left, node, right order."""
    return list(_inorder(root))


def sum_of_left_leaves(root: TreeNode | None) -> int:
    """Sum the values of all leaves that are the left child of their parent."""
    if root is None:
        return 0
    total = 0
    left = root.left
    if left is not None and left.left is None and left.right is None:
        total += left.val
    return total + sum_of_left_leaves(root.left) + sum_of_left_leaves(root.right)


def _mirrored(first: TreeNode | None, second: TreeNode | None) -> bool:
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.val == second.val
        and _mirrored(first.left, second.right)
        and _mirrored(first.right, second.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    if root is None:
        return True
    return _mirrored(root.left, root.right)


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values level by level, alternating left-to-right and right-to-left."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue: deque[TreeNode] = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        if len(levels) % 2 == 1:
            level.reverse()
        levels.append(level)
    return levels


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def depth(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    depth(root)
    return best


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the deepest node that has both p and q as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree(root.left)
        invert_tree(root.right)
    return root


def _height(node: TreeNode | None) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    if root is None:
        return True
    if abs(_height(root.left) - _height(root.right)) > 1:
        return False
    return is_balanced(root.left) and is_balanced(root.right)


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced search tree from sorted values."""

    def build(low: int, high: int) -> TreeNode | None:
        if low > high:
            return None
        mid = (low + high) // 2
        return TreeNode(nums[mid], build(low, mid - 1), build(mid + 1, high))

    return build(0, len(nums) - 1)


def _rob(node: TreeNode | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_take, left_skip = _rob(node.left)
    right_take, right_skip = _rob(node.right)
    take = node.val + left_skip + right_skip
    skip = max(left_take, left_skip) + max(right_take, right_skip)
    return take, skip


def rob_tree(root: TreeNode | None) -> int:
    """Return the largest sum of values with no two chosen nodes directly linked."""
    return max(_rob(root))