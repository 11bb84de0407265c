"""Proofs that one merkle mountain range state is contained in a later one."""

from dataclasses import dataclass, field

from mmrkit.hashing import HashFactory
from mmrkit.peaks import IndexStoreGetter, peaks, pos_peaks
from mmrkit.proof import inclusion_proof
from mmrkit.proofbagged import inclusion_proof_bagged

__all__ = [
    "ConsistencyProof",
    "index_consistency_proof",
    "index_consistency_proof_bagged",
]


@dataclass
class ConsistencyProof:
    """A proof that the log of size A is perfectly contained in the log of size B.

    ``path`` holds one inclusion proof per peak of A against the peaks of B.
    ``path_bagged`` holds the concatenated proofs against the bagged root of B.
    """

    mmr_size_a: int
    mmr_size_b: int
    path_bagged: list[bytes] = field(default_factory=list)
    path: list[list[bytes]] = field(default_factory=list)


def index_consistency_proof(
    store: IndexStoreGetter, mmr_index_a: int, mmr_index_b: int
) -> ConsistencyProof:
    """Return a proof that the mmr ending at ``mmr_index_b`` extends that ending at ``mmr_index_a``.

    Each peak of A is proven for inclusion in B; since interior nodes commit
    to their position, a peak can only appear at the same place in B.
    """
    return ConsistencyProof(
        mmr_size_a=mmr_index_a + 1,
        mmr_size_b=mmr_index_b + 1,
        path=[inclusion_proof(store, mmr_index_b, i_peak) for i_peak in peaks(mmr_index_a)],
    )


def index_consistency_proof_bagged(
    mmr_size_a: int, mmr_size_b: int, store: IndexStoreGetter, hasher: HashFactory
) -> ConsistencyProof:
    """Return a proof against bagged roots that mmr B extends mmr A.

    The bagged inclusion proofs of each peak of A in B are concatenated.
    """
    proof = ConsistencyProof(mmr_size_a=mmr_size_a, mmr_size_b=mmr_size_b)
    for peak_pos in pos_peaks(mmr_size_a):
        proof.path_bagged.extend(
            inclusion_proof_bagged(mmr_size_b, store, hasher, peak_pos - 1)
        )
    return proof