"""Recovery of future accumulator peaks from consistency proofs."""

from collections.abc import Sequence

from mmrkit.hashing import HashFactory, included_root
from mmrkit.peaks import peaks

__all__ = ["AccumulatorProofLenError", "consistent_roots"]


class AccumulatorProofLenError(ValueError):
    """Raised when the proofs do not match the accumulator one for one."""

    def __init__(self, message: str = "a proof for each accumulator is required") -> None:
        super().__init__(message)


def consistent_roots(
    hasher: HashFactory,
    ifrom: int,
    accumulator_from: Sequence[bytes],
    proofs: Sequence[Sequence[bytes]],
) -> list[bytes]:
    """Return the future accumulator peaks that the proofs of ``accumulator_from`` reach.

    ``ifrom`` is the last index of the complete mmr the accumulator belongs to.
    The result is ordered as the accumulator and is a prefix of, or equal to,
    the future accumulator; repeated adjacent roots are reported once.
    """
    from_peaks = peaks(ifrom)
    if len(from_peaks) != len(proofs) or len(accumulator_from) > len(from_peaks):
        raise AccumulatorProofLenError()

    roots: list[bytes] = []
    for peak, value, proof in zip(from_peaks, accumulator_from, proofs):
        root = included_root(hasher, peak, value, proof)
        # Many old peaks are committed by the same new peak.
        if roots and roots[-1] == root:
            continue
        roots.append(root)
    return roots