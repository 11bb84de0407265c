import hashlib

import pytest

from mmrkit.hashing import (
    hash_pos_pair64,
    hash_write_uint64,
    included_root,
    proof_path_str,
    proof_paths_str,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0xFF00000000000001, "0946348eb9631ac3fa6b8bedbbac750a06a6b13c8ca2c65a0f35914304b3b124"),
        (1, "cd2662154e6d76b2b2b92e70c0cac3ccf534f9b74eb5b89819ec509083d00a50"),
    ],
)
def test_hash_write_uint64(value, expected):
    hasher = hashlib.sha256()
    hash_write_uint64(hasher, value)
    assert hasher.digest() == bytes.fromhex(expected)


def test_hash_write_uint64_rejects_values_beyond_64_bits():
    with pytest.raises(OverflowError):
        hash_write_uint64(hashlib.sha256(), 1 << 64)


def test_hash_pos_pair64_with_empty_children_commits_only_position():
    expected = bytes.fromhex("cd2662154e6d76b2b2b92e70c0cac3ccf534f9b74eb5b89819ec509083d00a50")
    assert hash_pos_pair64(hashlib.sha256, 1, b"", b"") == expected


def test_hash_pos_pair64_depends_on_position_and_order():
    a, b = b"\x01" * 32, b"\x02" * 32
    base = hash_pos_pair64(hashlib.sha256, 3, a, b)
    assert hash_pos_pair64(hashlib.sha256, 3, a, b) == base
    assert hash_pos_pair64(hashlib.sha256, 4, a, b) != base
    assert hash_pos_pair64(hashlib.sha256, 3, b, a) != base


@pytest.fixture
def seven_node_tree():
    leaves = {i: bytes([i + 1]) * 32 for i in (0, 1, 3, 4)}
    n2 = hash_pos_pair64(hashlib.sha256, 3, leaves[0], leaves[1])
    n5 = hash_pos_pair64(hashlib.sha256, 6, leaves[3], leaves[4])
    n6 = hash_pos_pair64(hashlib.sha256, 7, n2, n5)
    return {**leaves, 2: n2, 5: n5, 6: n6}


@pytest.mark.parametrize(
    "i, proof_indices",
    [(0, [1, 5]), (1, [0, 5]), (3, [4, 2]), (4, [3, 2]), (2, [5]), (5, [2])],
)
def test_included_root_recovers_peak(seven_node_tree, i, proof_indices):
    proof = [seven_node_tree[p] for p in proof_indices]
    assert included_root(hashlib.sha256, i, seven_node_tree[i], proof) == seven_node_tree[6]


def test_included_root_rejects_wrong_value(seven_node_tree):
    proof = [seven_node_tree[1], seven_node_tree[5]]
    assert included_root(hashlib.sha256, 0, b"\xee" * 32, proof) != seven_node_tree[6]


def test_included_root_with_empty_proof_is_node_hash():
    assert included_root(hashlib.sha256, 6, b"\x07" * 32, []) == b"\x07" * 32


def test_proof_path_str():
    assert proof_path_str([b"\x01\x02", b"\xff"], ", ") == "0102, ff"


def test_proof_paths_str():
    assert proof_paths_str([[b"\x01\x02", b"\xff"], []], ", ") == "[0102, ff], []"