"""Appending leaves to a merkle mountain range."""

from typing import Protocol

from mmrkit.hashing import HashFactory, hash_write_uint64
from mmrkit.indexheight import index_height

__all__ = ["NodeAppender", "add_hashed_leaf"]


class NodeAppender(Protocol):
    """A store that node values are read from and appended to."""

    def get(self, i: int) -> bytes:
        """Return the node value stored at mmr index ``i``."""

    def append(self, value: bytes) -> int:
        """Append ``value`` and return the store size, the index of the next node."""


def add_hashed_leaf(store: NodeAppender, hasher: HashFactory, hashed_leaf: bytes) -> int:
    """Add a leaf and back fill the interior nodes it completes.

    Returns the mmr size after the addition, which is also the index of the
    next leaf. ``hasher`` is a hash constructor such as ``hashlib.sha256``.
    """
    height = 0
    i = store.append(hashed_leaf)

    # While the next index is higher in the tree, the node just added
    # completes a parent, which always lands at the next index.
    while index_height(i) > height:
        i_left = i - (2 << height)
        i_right = i - 1

        h = hasher()
        # Interior nodes commit to their one based position.
        hash_write_uint64(h, i + 1)
        h.update(store.get(i_left))
        h.update(store.get(i_right))

        i = store.append(h.digest())
        height += 1
    return i