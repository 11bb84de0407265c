"""Verification of inclusion proofs against mmr accumulator peaks."""

from collections.abc import Sequence

from mmrkit.hashing import HashFactory, hash_write_uint64, included_root
from mmrkit.indexheight import pos_height
from mmrkit.peaks import IndexStoreGetter, leaf_count, peak_hashes, peak_index

__all__ = ["VerifyInclusionFailedError", "verify_inclusion", "verify_inclusion_path"]


class VerifyInclusionFailedError(ValueError):
    """Raised when an inclusion proof does not verify."""


def verify_inclusion(
    store: IndexStoreGetter,
    hasher: HashFactory,
    mmr_size: int,
    leaf_hash: bytes,
    i_node: int,
    proof: Sequence[bytes],
) -> bool:
    """Return True if ``proof`` shows ``leaf_hash`` at ``i_node`` in the mmr of ``mmr_size``.

    Raises :class:`VerifyInclusionFailedError` when it does not.
    """
    accumulator = peak_hashes(store, mmr_size - 1)
    ipeak = peak_index(leaf_count(mmr_size), len(proof))
    if ipeak >= len(accumulator):
        raise VerifyInclusionFailedError(
            "verify inclusion failed: accumulator index for proof out of range "
            "for the provided mmr size"
        )
    root = included_root(hasher, i_node, leaf_hash, proof)
    if root != accumulator[ipeak]:
        raise VerifyInclusionFailedError(
            "verify inclusion failed: proven root not present in the accumulator"
        )
    return True


def verify_inclusion_path(
    mmr_size: int,
    hasher: HashFactory,
    leaf_hash: bytes,
    i_node: int,
    proof: Sequence[bytes],
    root: bytes,
) -> tuple[bool, int]:
    """Return whether ``leaf_hash`` and ``proof`` reproduce ``root``, and the elements used.

    The count lets callers walk concatenated proof paths.
    """
    # A perfect peak proves itself with an empty proof.
    if not proof and leaf_hash == root:
        return True, 0

    pos = i_node + 1
    height_index = pos_height(pos)
    element_hash = leaf_hash

    for used, p in enumerate(proof, start=1):
        h = hasher()
        if pos_height(pos + 1) > height_index:
            pos += 1
            hash_write_uint64(h, pos)
            h.update(p)
            h.update(element_hash)
        else:
            pos += 2 << height_index
            hash_write_uint64(h, pos)
            h.update(element_hash)
            h.update(p)
        element_hash = h.digest()

        if element_hash == root:
            return True, used
        height_index += 1
    return False, len(proof)