"""Navigation of a merkle mountain range using only node indices.

Nodes are identified either by a zero based *index* or a one based
*position* (index + 1). The post order layout of the tree makes every
navigation step a matter of power of two arithmetic.
"""

from mmrkit.bits import all_ones, height_index_size

__all__ = [
    "jump_left_perfect",
    "index_height",
    "max_peak_height",
    "height_index_leaf_count",
    "pos_height",
    "jump_right_sibling",
    "left_child",
    "sibling_offset",
    "parent_offset",
    "index_height2",
    "first_mmr_size",
    "mmr_index",
    "left_ancestors",
    "ancestors",
]


def _check_pos(pos: int) -> None:
    if pos < 1:
        raise ValueError(f"positions are one based, got {pos}")


def jump_left_perfect(pos: int) -> int:
    """Jump left from one based ``pos`` by the largest perfect tree preceding it."""
    _check_pos(pos)
    most_significant_bit = 1 << (pos.bit_length() - 1)
    return pos - (most_significant_bit - 1)


def pos_height(pos: int) -> int:
    """Return the tree height of the one based position ``pos``."""
    _check_pos(pos)
    while not all_ones(pos):
        pos = jump_left_perfect(pos)
    return pos.bit_length() - 1


def index_height(i: int) -> int:
    """Return the tree height of the zero based mmr index ``i``."""
    return pos_height(i + 1)


def max_peak_height(i: int) -> int:
    """Return the height of the highest (left most) peak for mmr index ``i``."""
    height = (i + 1).bit_length() - 1
    if all_ones(i + 1):
        return height
    return height - 1


def height_index_leaf_count(height_index: int) -> int:
    """Return the leaf count of a single mountain of height ``height_index + 1``."""
    return (height_index_size(height_index) + 1) // 2


def jump_right_sibling(pos: int) -> int:
    """Return the position of the next node at the same height as ``pos``."""
    return pos + (1 << (pos_height(pos) + 1)) - 1


def left_child(pos: int) -> int | None:
    """Return the position of the left child of ``pos``, or None for a leaf."""
    height = pos_height(pos)
    if height == 0:
        return None
    return pos - (1 << height)


def sibling_offset(height: int) -> int:
    """Return the offset to the sibling of a node at the zero based ``height``."""
    return (2 << height) - 1


def parent_offset(height: int) -> int:
    """Return the offset from a left node to its parent at the zero based ``height``."""
    return 2 << height


def index_height2(pos: int) -> int:
    """Return the height of mmr index ``pos`` by reducing through perfect trees."""
    if pos == 0:
        return 0
    peak_size = (1 << pos.bit_length()) - 1
    while peak_size > 0:
        if pos >= peak_size:
            pos -= peak_size
        peak_size >>= 1
    return pos


def first_mmr_size(mmr_index: int) -> int:
    """Return the first complete mmr size that contains ``mmr_index``."""
    i = mmr_index
    h0 = index_height(i)
    h1 = index_height(i + 1)
    while h0 < h1:
        i += 1
        h0 = h1
        h1 = index_height(i + 1)
    return i + 1


def mmr_index(leaf_index: int) -> int:
    """Return the mmr node index of the leaf numbered ``leaf_index``."""
    total = 0
    while leaf_index > 0:
        h = leaf_index.bit_length()
        total += (1 << h) - 1
        leaf_index -= 1 << (h - 1)
    return total


def left_ancestors(i: int) -> list[int]:
    """Return the left children of each interior node back filled from ``i``."""
    height = index_height(i)
    if height < 1:
        return []
    height -= 1
    result = []
    while index_height(i) > height:
        result.append(i - (2 << height))
        i += 1
        height += 1
    return result


def ancestors(i: int) -> list[int]:
    """Return left and right child pairs of each interior node back filled from ``i``."""
    height = index_height(i)
    if height < 1:
        return []
    height -= 1
    result = []
    while index_height(i) > height:
        i_left = i - (2 << height)
        result.extend((i_left, i_left + sibling_offset(height)))
        i += 1
        height += 1
    return result