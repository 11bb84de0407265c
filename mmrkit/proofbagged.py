"""Inclusion proofs against the single "bagged" root of a merkle mountain range.

The bagged root is formed by hashing the peaks together, starting from the
lowest (right most) peak. Plain verification works against the accumulator
peaks instead; these functions serve the bagged variant.
"""

from collections.abc import Sequence
from itertools import takewhile

from mmrkit.hashing import HashFactory
from mmrkit.indexheight import index_height, sibling_offset
from mmrkit.peaks import IndexStoreGetter, pos_peaks

__all__ = [
    "get_root",
    "inclusion_proof_bagged",
    "bag_peaks_rhs",
    "peak_bag_rhs",
    "inclusion_proof_local",
    "hash_peaks_rhs",
    "peaks_lhs",
]


def get_root(mmr_size: int, store: IndexStoreGetter, hasher: HashFactory) -> bytes | None:
    """Return the bagged root of all peaks of the mmr of ``mmr_size`` nodes."""
    return bag_peaks_rhs(store, hasher, 0, pos_peaks(mmr_size))


def inclusion_proof_local(
    mmr_size: int, store: IndexStoreGetter, i: int
) -> tuple[list[bytes], int]:
    """Return the proof of index ``i`` against its local peak, and that peak's index.

    Interior nodes are supported; the proof then starts at the node's height.
    """
    proof: list[bytes] = []
    height = index_height(i)
    while i < mmr_size:
        is_right = index_height(i + 1) > index_height(i)
        offset = sibling_offset(height)
        i_sibling = i - offset if is_right else i + offset
        if i_sibling < 0 or i_sibling >= mmr_size:
            break
        proof.append(store.get(i_sibling))
        # The parent of a right child follows it; that of a left child
        # follows its right sibling.
        i += 1 if is_right else 2 << height
        height += 1
    return proof, i


def peak_bag_rhs(
    store: IndexStoreGetter, hasher: HashFactory, pos: int, peaks: Sequence[int]
) -> list[bytes]:
    """Return the values of the peaks at one based positions after ``pos``, in order."""
    return [store.get(peak_pos - 1) for peak_pos in peaks if peak_pos > pos]


def hash_peaks_rhs(hasher: HashFactory, peak_hashes: Sequence[bytes]) -> bytes | None:
    """Merge the peak values, lowest first, into a single root.

    Returns None when there are no peaks. The input is left unchanged.
    """
    pending = list(peak_hashes)
    while len(pending) > 1:
        right = pending.pop()
        left = pending.pop()
        h = hasher()
        h.update(right)
        h.update(left)
        pending.append(h.digest())
    return pending[0] if pending else None


def bag_peaks_rhs(
    store: IndexStoreGetter, hasher: HashFactory, pos: int, peaks: Sequence[int]
) -> bytes | None:
    """Return the bagged root of the peaks to the right of one based position ``pos``.

    Returns None if there are no such peaks. The caller must supply the peaks
    valid for the mmr that ``pos`` belongs to.
    """
    return hash_peaks_rhs(hasher, peak_bag_rhs(store, hasher, pos, peaks))


def peaks_lhs(store: IndexStoreGetter, pos: int, peaks: Sequence[int]) -> list[bytes]:
    """Return the values of the peaks at one based positions before ``pos``, in order."""
    return [store.get(peak_pos - 1) for peak_pos in takewhile(lambda p: p < pos, peaks)]


def inclusion_proof_bagged(
    mmr_size: int, store: IndexStoreGetter, hasher: HashFactory, i: int
) -> list[bytes]:
    """Return a proof of index ``i`` against the bagged root of the mmr.

    The layout is the local peak proof, then the bagged right hand peaks if
    any, then the left hand peaks in reverse order.
    """
    proof, i_local_peak = inclusion_proof_local(mmr_size, store, i)
    peaks = pos_peaks(mmr_size)

    right = bag_peaks_rhs(store, hasher, i_local_peak + 1, peaks)
    if right is not None:
        proof.append(right)

    proof.extend(reversed(peaks_lhs(store, i_local_peak + 1, peaks)))
    return proof