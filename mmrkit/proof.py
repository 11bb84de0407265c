"""Inclusion proofs for nodes of a merkle mountain range."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from mmrkit.indexheight import index_height, sibling_offset
from mmrkit.peaks import IndexStoreGetter, peak_index, peaks_bitmap

__all__ = [
    "ProofLenTooLargeError",
    "PeakListTooShortError",
    "NewLogSizeMustBeGreaterError",
    "ConsistencyProofLocal",
    "get_proof_peak_root",
    "get_leaf_proof_root",
    "get_proof_peak_index",
    "inclusion_proof",
    "inclusion_proof_path",
    "left_pos_for_height",
    "inclusion_proof_local_old",
    "inclusion_proof_local_extend",
]


class ProofLenTooLargeError(ValueError):
    """Raised when a proof length value is too large."""

    def __init__(self, message: str = "proof length value is too large") -> None:
        super().__init__(message)


class PeakListTooShortError(ValueError):
    """Raised when the list of peak values is too short for a proof."""

    def __init__(self, message: str = "the list of peak values is too short") -> None:
        super().__init__(message)


class NewLogSizeMustBeGreaterError(ValueError):
    """Raised when a log extension does not grow the log."""


@dataclass
class ConsistencyProofLocal:
    """A local peak proof valid for two mmr sizes.

    ``path`` is identical for both sizes up to ``path[height_a]``.
    """

    log_index: int
    size_a: int
    size_b: int
    path: list[bytes] = field(default_factory=list)
    peak_index_a: int = 0
    height_a: int = 0
    peak_index_b: int = 0


def get_proof_peak_index(mmr_size: int, d: int, height_index: int) -> int:
    """Return the accumulator index for a proof of length ``d`` of a node at ``height_index``."""
    return peak_index(peaks_bitmap(mmr_size), height_index + d)


def get_proof_peak_root(
    mmr_size: int, mmr_index: int, peak_hashes: Sequence[bytes], proof_len: int
) -> bytes:
    """Return the peak value committing ``mmr_index`` for a proof of ``proof_len`` elements."""
    index = get_proof_peak_index(mmr_size, proof_len, index_height(mmr_index))
    if index >= len(peak_hashes):
        raise PeakListTooShortError()
    return peak_hashes[index]


def get_leaf_proof_root(
    peak_hashes: Sequence[bytes], proof: Sequence[bytes], mmr_size: int
) -> bytes:
    """Return the peak value for a leaf proof, counting peaks from the lowest."""
    index = get_proof_peak_index(mmr_size, len(proof), 0)
    if index >= len(peak_hashes):
        raise PeakListTooShortError()
    return peak_hashes[len(peak_hashes) - index - 1]


def _witness_indices(mmr_last_index: int, i: int):
    """Yield the sibling indices on the path from ``i`` to its accumulator peak."""
    g = index_height(i)
    while True:
        offset = 2 << g
        if index_height(i + 1) > g:
            # i is a right child: its sibling is behind it, its parent next.
            i_sibling = i - offset + 1
            i += 1
        else:
            # i is a left child: its sibling is ahead, the parent after that.
            i_sibling = i + offset - 1
            i += offset
        if i_sibling > mmr_last_index:
            return
        yield i_sibling
        g += 1


def inclusion_proof(store: IndexStoreGetter, mmr_last_index: int, i: int) -> list[bytes]:
    """Return the witness values proving index ``i`` in the mmr ending at ``mmr_last_index``."""
    if i > mmr_last_index:
        raise IndexError("index out of range")
    return [store.get(s) for s in _witness_indices(mmr_last_index, i)]


def inclusion_proof_path(mmr_last_index: int, i: int) -> list[int]:
    """Return the mmr indices of the witness nodes for index ``i``."""
    return list(_witness_indices(mmr_last_index, i))


def left_pos_for_height(height: int) -> int:
    """Return the left most mmr index at ``height``."""
    return (1 << (height + 1)) - 2


def inclusion_proof_local_old(
    mmr_size: int, store: IndexStoreGetter, i: int
) -> tuple[list[bytes], int]:
    """Return the proof of ``i`` against its local peak, and the index of that peak."""
    proof = []
    height = index_height(i)
    while i < mmr_size:
        if index_height(i + 1) > index_height(i):
            i_sibling = i - sibling_offset(height)
            if i_sibling < 0 or i_sibling >= mmr_size:
                break
            proof.append(store.get(i_sibling))
            i += 1
        else:
            i_sibling = i + sibling_offset(height)
            if i_sibling >= mmr_size:
                break
            proof.append(store.get(i_sibling))
            i += 2 << height
        height += 1
    return proof, i


def inclusion_proof_local_extend(
    mmr_size_a: int, mmr_size_b: int, store: IndexStoreGetter, i: int
) -> ConsistencyProofLocal:
    """Return a local proof for ``i`` in size B that extends its proof in size A."""
    if mmr_size_b <= mmr_size_a:
        raise NewLogSizeMustBeGreaterError(
            f"{mmr_size_b} is less than or equal {mmr_size_a}: "
            "the new log size must be greater than the previous"
        )

    result = ConsistencyProofLocal(log_index=i, size_a=mmr_size_a, size_b=mmr_size_b)
    path: list[bytes] = []
    height = 0
    prev_complete = False

    while i < mmr_size_b:
        is_right = index_height(i + 1) > index_height(i)
        if is_right:
            i_sibling = i - sibling_offset(height)
        else:
            i_sibling = i + sibling_offset(height)

        if (i_sibling < 0 or i_sibling >= mmr_size_a) and not prev_complete:
            result.peak_index_a = i
            result.height_a = len(path)
            prev_complete = True
        if i_sibling < 0 or i_sibling >= mmr_size_b:
            break

        path.append(store.get(i_sibling))
        i += 1 if is_right else 2 << height
        height += 1

    result.peak_index_b = i
    result.path = path
    return result