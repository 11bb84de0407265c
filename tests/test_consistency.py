import hashlib

import pytest

from mmrkit.add import add_hashed_leaf
from mmrkit.consistency import (
    ConsistencyProof,
    index_consistency_proof,
    index_consistency_proof_bagged,
)
from mmrkit.consistentroots import consistent_roots
from mmrkit.peaks import NotFoundError, peak_hashes


class _Db:
    def __init__(self):
        self.nodes = []

    def get(self, i):
        if 0 <= i < len(self.nodes):
            return self.nodes[i]
        raise NotFoundError(f"no node at {i}")

    def append(self, value):
        self.nodes.append(value)
        return len(self.nodes)


@pytest.fixture(scope="module")
def store():
    db = _Db()
    for n in range(32):
        add_hashed_leaf(db, hashlib.sha256, hashlib.sha256(n.to_bytes(8, "big")).digest())
    assert len(db.nodes) == 63
    return db


def test_consistency_proof_11_to_18(store):
    h = store.nodes
    got = index_consistency_proof(store, 10, 17)
    assert got.mmr_size_a == 11
    assert got.mmr_size_b == 18
    assert got.path == [
        [h[13]],
        [h[12], h[6]],
        [h[11], h[9], h[6]],
    ]
    assert got.path_bagged == []


def test_consistency_proof_11_to_18_peaks(store):
    h = store.nodes
    assert peak_hashes(store, 10) == [h[6], h[9], h[10]]
    assert peak_hashes(store, 17) == [h[14], h[17]]


@pytest.mark.parametrize("size_a, size_b", [(11, 18), (7, 15), (7, 63), (4, 26), (19, 39)])
def test_consistency_proof_reaches_future_peaks(store, size_a, size_b):
    got = index_consistency_proof(store, size_a - 1, size_b - 1)
    peaks_a = peak_hashes(store, got.mmr_size_a - 1)
    peaks_b = peak_hashes(store, got.mmr_size_b - 1)
    roots = consistent_roots(hashlib.sha256, got.mmr_size_a - 1, peaks_a, got.path)
    assert roots
    assert roots == peaks_b[: len(roots)]


def test_consistency_proof_7_to_63(store):
    got = index_consistency_proof(store, 6, 62)
    assert len(got.path) == 1
    roots = consistent_roots(hashlib.sha256, 6, [store.nodes[6]], got.path)
    assert roots == [store.nodes[62]]


def test_consistency_proof_shrinking_log_raises(store):
    with pytest.raises(IndexError):
        index_consistency_proof(store, 17, 10)


def test_consistency_proof_bagged_11_to_18(store):
    h = store.nodes
    got = index_consistency_proof_bagged(11, 18, store, hashlib.sha256)
    assert got == ConsistencyProof(
        mmr_size_a=11,
        mmr_size_b=18,
        path_bagged=[
            h[13], h[17],
            h[12], h[6], h[17],
            h[11], h[9], h[6], h[17],
        ],
        path=[],
    )


def test_consistency_proof_bagged_7_to_15(store):
    got = index_consistency_proof_bagged(7, 15, store, hashlib.sha256)
    assert got.mmr_size_a == 7
    assert got.mmr_size_b == 15
    assert got.path_bagged == [store.nodes[13]]


def test_consistency_proof_bagged_7_to_63(store):
    h = store.nodes
    got = index_consistency_proof_bagged(7, 63, store, hashlib.sha256)
    assert got.path_bagged == [h[13], h[29], h[61]]


def test_consistency_proof_bagged_missing_node_raises(store):
    with pytest.raises(NotFoundError):
        index_consistency_proof_bagged(7, 127, store, hashlib.sha256)