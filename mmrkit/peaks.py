"""Peaks of a merkle mountain range and the leaf counts they encode."""

from typing import Protocol

from mmrkit.indexheight import (
    first_mmr_size,
    jump_right_sibling,
    left_child,
    pos_height,
)

__all__ = [
    "IndexStoreGetter",
    "NotFoundError",
    "peaks",
    "pos_peaks",
    "peak_hashes",
    "peak_index",
    "top_peak",
    "top_height",
    "peaks_bitmap",
    "peaks_old",
    "leaf_count",
    "leaf_index",
]

_NODE_VALUE_SIZE = 32


class NotFoundError(LookupError):
    """Raised by a store when no node is held at the requested index."""


class IndexStoreGetter(Protocol):
    """A store from which node values are read by mmr index."""

    def get(self, i: int) -> bytes:
        """Return the node value stored at mmr index ``i``."""


def top_peak(i: int) -> int:
    """Return the smallest, left most, peak index containing or equal to ``i``."""
    return (1 << ((i + 2).bit_length() - 1)) - 2


def top_height(i: int) -> int:
    """Return the height index of the largest perfect peak contained in ``i``."""
    return (i + 2).bit_length() - 2


def peaks(mmr_index: int) -> list[int]:
    """Return the peak indices, highest first, of the mmr whose last index is ``mmr_index``.

    An empty list is returned when ``mmr_index`` is not the last index of a
    complete mmr.
    """
    mmr_size = mmr_index + 1
    if mmr_size < 1:
        raise ValueError(f"mmr index must not be negative, got {mmr_index}")

    # Siblings exist but their parent has not been added yet.
    if pos_height(mmr_size + 1) > pos_height(mmr_size):
        return []

    result = []
    peak = 0
    while mmr_size:
        peak_size = top_peak(mmr_size - 1) + 1
        peak += peak_size
        result.append(peak - 1)
        mmr_size -= peak_size
    return result


def pos_peaks(mmr_size: int) -> list[int]:
    """Return the one based peak positions for an mmr of ``mmr_size`` nodes."""
    if mmr_size == 0:
        return []
    return [p + 1 for p in peaks(mmr_size - 1)]


def peaks_old(mmr_size: int) -> list[int]:
    """Return the one based peak positions by walking right along the peaks.

    An alternative to :func:`pos_peaks`, kept for cross checking.
    """
    if mmr_size == 0:
        return []
    if pos_height(mmr_size + 1) > pos_height(mmr_size):
        return []

    top = top_peak(mmr_size - 1) + 1
    result = [top]
    peak = top
    while True:
        peak = jump_right_sibling(peak)
        while peak > mmr_size:
            child = left_child(peak)
            if child is None:
                return result
            peak = child
        result.append(peak)


def peak_hashes(store: IndexStoreGetter, mmr_index: int) -> list[bytes]:
    """Return copies of the peak values, highest first, for the mmr ending at ``mmr_index``.

    Each value is fitted to 32 bytes, truncating or zero padding as needed.
    """
    return [
        bytes(store.get(i)[:_NODE_VALUE_SIZE]).ljust(_NODE_VALUE_SIZE, b"\0")
        for i in peaks(mmr_index)
    ]


def peak_index(leaf_count: int, d: int) -> int:
    """Return the accumulator index of the peak reached by a proof of length ``d``.

    ``leaf_count`` identifies the mmr state. For interior nodes add the node
    height to the proof length.
    """
    peaks_mask = (1 << (d + 1)) - 1
    below = (leaf_count & peaks_mask).bit_count()
    return leaf_count.bit_count() - below


def peaks_bitmap(mmr_size: int) -> int:
    """Return a mask with a bit set at the height of each peak; also the leaf count.

    For an invalid size the result is that of the largest valid size below it.
    """
    if mmr_size == 0:
        return 0
    pos = mmr_size
    peak_size = (1 << mmr_size.bit_length()) - 1
    peak_map = 0
    while peak_size > 0:
        peak_map <<= 1
        if pos >= peak_size:
            pos -= peak_size
            peak_map |= 1
        peak_size >>= 1
    return peak_map


def leaf_count(size: int) -> int:
    """Return the leaf count of the largest mmr whose size is at most ``size``."""
    return peaks_bitmap(size)


def leaf_index(mmr_index: int) -> int:
    """Return the index of the last leaf added when ``mmr_index`` was added."""
    return leaf_count(first_mmr_size(mmr_index)) - 1