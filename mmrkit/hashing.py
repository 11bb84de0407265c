"""Position committing hashes for mmr nodes and proof root recovery.

Functions taking a ``hasher`` expect a hash constructor, such as
``hashlib.sha256``, and start a fresh hash for every node they compute.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from mmrkit.indexheight import index_height

__all__ = [
    "hash_write_uint64",
    "hash_pos_pair64",
    "included_root",
    "proof_path_str",
    "proof_paths_str",
]

HashFactory = Callable[[], Any]


def hash_write_uint64(hasher: Any, value: int) -> None:
    """Feed ``value`` to the running hash ``hasher`` as 8 big endian bytes."""
    hasher.update(value.to_bytes(8, "big"))


def hash_pos_pair64(hasher: HashFactory, pos: int, a: bytes, b: bytes) -> bytes:
    """Return H(pos || a || b) using a fresh hash from ``hasher``."""
    h = hasher()
    hash_write_uint64(h, pos)
    h.update(a)
    h.update(b)
    return h.digest()


def included_root(
    hasher: HashFactory, i: int, node_hash: bytes, proof: Iterable[bytes]
) -> bytes:
    """Return the accumulator peak recovered from ``node_hash`` at index ``i`` and ``proof``.

    Leaf and interior nodes are handled alike.
    """
    root = node_hash
    g = index_height(i)
    for sibling in proof:
        if index_height(i + 1) > g:
            # i is a right child; its parent follows immediately.
            i += 1
            root = hash_pos_pair64(hasher, i + 1, sibling, root)
        else:
            # i is a left child; its parent follows its right sibling.
            i += 2 << g
            root = hash_pos_pair64(hasher, i + 1, root, sibling)
        g += 1
    return root


def proof_path_str(path: Iterable[bytes], sep: str) -> str:
    """Return the hex forms of the values in ``path`` joined by ``sep``."""
    return sep.join(value.hex() for value in path)


def proof_paths_str(paths: Sequence[Iterable[bytes]], sep: str) -> str:
    """Return each path in ``paths`` bracketed, joined by ``sep``."""
    return sep.join(f"[{proof_path_str(path, sep)}]" for path in paths)