import pytest

from algodaily.trees import (
    TreeNode,
    build_tree,
    diameter_of_binary_tree,
    inorder_traversal,
    invert_tree,
    is_balanced,
    is_symmetric,
    lowest_common_ancestor,
    rob_tree,
    sorted_array_to_bst,
    sum_of_left_leaves,
    zigzag_level_order,
)


def _chain(length):
    root = None
    for value in range(length, 0, -1):
        root = TreeNode(value, left=root)
    return root


def test_build_tree_empty():
    assert build_tree([]) is None
    assert build_tree([None]) is None


def test_build_tree_search_tree_inorder_is_sorted():
    values = [4, 2, 6, 1, 3, 5, 7]
    assert inorder_traversal(build_tree(values)) == sorted(values)


def test_build_tree_skips_missing_children():
    root = build_tree([1, None, 2, 3])
    assert root.left is None
    assert root.right.val == 2
    assert root.right.left.val == 3


def test_inorder_of_none():
    assert inorder_traversal(None) == []


@pytest.mark.parametrize("nums", [[], [1], [-10, -3, 0, 5, 9], list(range(31))])
def test_sorted_array_round_trip_and_balance(nums):
    root = sorted_array_to_bst(nums)
    assert inorder_traversal(root) == nums
    assert is_balanced(root)


def test_sum_of_left_leaves_example():
    assert sum_of_left_leaves(build_tree([3, 9, 20, None, None, 15, 7])) == 24


def test_sum_of_left_leaves_ignores_right_leaves():
    root = build_tree([1, None, 2, None, 3])
    assert sum_of_left_leaves(root) == sum_of_left_leaves(None)


def test_is_symmetric():
    assert is_symmetric(build_tree([1, 2, 2, 3, 4, 4, 3]))
    assert not is_symmetric(build_tree([1, 2, 2, None, 3, None, 3]))
    assert is_symmetric(None)


@pytest.mark.parametrize(
    "values",
    [[3, 9, 20, None, None, 15, 7], [1, 2, 3, 4, 5, 6, 7, 8, 9], [1]],
)
def test_zigzag_unwinds_to_level_order(values):
    levels = zigzag_level_order(build_tree(values))
    unwound = [
        value
        for depth, level in enumerate(levels)
        for value in (level if depth % 2 == 0 else level[::-1])
    ]
    assert unwound == [v for v in values if v is not None]


def test_zigzag_of_none():
    assert zigzag_level_order(None) == []


@pytest.mark.parametrize("length", [1, 2, 5, 10])
def test_diameter_of_chain(length):
    assert diameter_of_binary_tree(_chain(length)) == length - 1


def test_diameter_passes_through_both_sides():
    root = TreeNode(0, _chain(3), _chain(4))
    assert diameter_of_binary_tree(root) == 3 + 4


def test_lowest_common_ancestor():
    root = build_tree([3, 5, 1, 6, 2, 0, 8, None, None, 7, 4])
    assert lowest_common_ancestor(root, root.left, root.right) is root
    four = root.left.right.right
    assert lowest_common_ancestor(root, root.left, four) is root.left


def test_invert_reverses_inorder():
    values = [4, 2, 7, 1, 3, 6, 9]
    before = inorder_traversal(build_tree(values))
    root = build_tree(values)
    assert invert_tree(root) is root
    assert inorder_traversal(root) == before[::-1]


def test_invert_twice_restores():
    values = [5, 3, 8, 1, None, 7, 9]
    root = invert_tree(invert_tree(build_tree(values)))
    assert inorder_traversal(root) == inorder_traversal(build_tree(values))


def test_is_balanced():
    assert is_balanced(None)
    assert is_balanced(_chain(2))
    assert not is_balanced(_chain(3))


def test_rob_tree_examples():
    assert rob_tree(build_tree([3, 2, 3, None, 3, None, 1])) == 7
    assert rob_tree(build_tree([3, 4, 5, 1, 3, None, 1])) == 9


def test_rob_tree_bounds():
    values = [10, 1, 1, 50, 2, 3, 4]
    result = rob_tree(build_tree(values))
    assert max(values) <= result <= sum(values)
    assert rob_tree(TreeNode(6)) == 6
    assert rob_tree(None) == 0