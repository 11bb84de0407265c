"""Counting of interior 'spur' nodes that hang above and left of leaves."""

from mmrkit.bits import log2_uint64

__all__ = [
    "spur_sum_height",
    "leaf_minus_spur_sum",
    "spur_height_leaf",
    "tree_index_old",
]


def spur_sum_height(height: int) -> int:
    """Return the count of interior spur nodes required for ``height``."""
    if height == 0:
        return 0
    return sum((1 << (height - 1 - i)) * i for i in range(1, height))


def leaf_minus_spur_sum(leaf_index: int) -> int:
    """Return the number of preceding peaks the future tree needs at ``leaf_index``."""
    total = leaf_index
    leaf_index >>= 1
    while leaf_index > 0:
        total -= leaf_index
        leaf_index >>= 1
    return total


def spur_height_leaf(leaf_index: int) -> int:
    """Return the number of nodes above and to the left of ``leaf_index``."""
    n = leaf_index + 1
    return (n & -n).bit_length() - 1


def tree_index_old(leaf_index: int) -> int:
    """Return the mmr index of the leaf ``leaf_index`` by summing spurs."""
    total = 0
    i = leaf_index
    while i > 0:
        height = log2_uint64(i) + 1
        total += spur_sum_height(height) + height
        i -= 1 << (height - 1)
    return total