# mmrkit

Tools for working with Merkle Mountain Ranges (MMRs). An MMR is an
append-only structure made of perfect binary Merkle trees. The nodes are
stored flat in post order, so every navigation step is simple binary
arithmetic, and the whole tree never has to be built in memory.

Nodes are identified by a zero based *index*. Some functions take a one based
*position* (index + 1) instead; their docstrings say which.

## What it offers

- **Navigation** (`mmrkit.indexheight`, `mmrkit.bits`, `mmrkit.spurs`):
  - node heights: `index_height`, `pos_height`, `max_peak_height`
  - sibling and parent offsets: `sibling_offset`, `parent_offset`,
    `jump_right_sibling`, `left_child`
  - mapping a leaf number to its node index: `mmr_index`
  - the first complete MMR size that holds a node: `first_mmr_size`
  - the children that each newly added interior node combines:
    `left_ancestors`, `ancestors`
  - spur counts: `spur_sum_height`, `leaf_minus_spur_sum`,
    `spur_height_leaf`
- **Peaks and accumulators** (`mmrkit.peaks`):
  - peak indices: `peaks`, and one based positions with `pos_peaks`.
    Both return an empty list for a size that is not a complete MMR.
  - peak bitmaps and leaf counts: `peaks_bitmap`, `leaf_count`, `leaf_index`
  - which peak a proof of a given length reaches: `peak_index`
  - reading peak values from a store: `peak_hashes`. Each value is fitted to
    32 bytes.
- **Appending** (`mmrkit.add`): `add_hashed_leaf` appends a leaf and fills in
  the interior nodes that the leaf completes. It returns the new MMR size.
- **Inclusion proofs** (`mmrkit.proof`, `mmrkit.hashing`, `mmrkit.verify`):
  - building proofs: `inclusion_proof`, `inclusion_proof_path`,
    `inclusion_proof_local_extend`
  - choosing the peak a proof reaches: `get_proof_peak_root`,
    `get_leaf_proof_root`
  - recovering the root: `included_root`
  - checking a proof: `verify_inclusion`, which raises
    `VerifyInclusionFailedError` when the proof does not hold, and
    `verify_inclusion_path`, which returns `(ok, elements_used)`
- **Bagged roots** (`mmrkit.proofbagged`): `get_root`,
  `inclusion_proof_bagged`, `inclusion_proof_local`, `bag_peaks_rhs` and
  `hash_peaks_rhs`. These work with proofs against a single root, made by
  hashing the peaks together starting from the lowest peak.
- **Consistency proofs** (`mmrkit.consistency`, `mmrkit.consistentroots`):
  - `index_consistency_proof` and `index_consistency_proof_bagged` build a
    `ConsistencyProof`.
  - `consistent_roots` recovers the later accumulator peaks that the old
    peaks reach through their proofs.

## Hashing

Each interior node commits to its one based position. Its value is
`H(pos || left || right)`, where `pos` is written as a big-endian 64-bit
integer.

Functions that take a `hasher` expect a hash *constructor*, such as
`hashlib.sha256`, and start a fresh hash for every node.
`hash_write_uint64(h, value)` is the exception: it writes into a running
hash object `h` that you pass in.

## Storage

A store is any object with a `get(i)` method that returns the bytes of node
`i`. `NotFoundError` is provided for stores to raise when a node is missing.
For appending, the store also needs an `append(value)` method that returns
the store's new size, which is the index of the next node. A wrapper around
a list is enough:

```python
import hashlib
from mmrkit.add import add_hashed_leaf
from mmrkit.peaks import peaks
from mmrkit.proof import inclusion_proof
from mmrkit.hashing import included_root


class ListStore:
    def __init__(self):
        self.nodes = []

    def get(self, i):
        return self.nodes[i]

    def append(self, value):
        self.nodes.append(value)
        return len(self.nodes)


store = ListStore()
size = 0
for n in range(7):
    leaf = hashlib.sha256(n.to_bytes(8, "big")).digest()
    size = add_hashed_leaf(store, hashlib.sha256, leaf)

last = size - 1
proof = inclusion_proof(store, last, 0)
root = included_root(hashlib.sha256, 0, store.get(0), proof)
assert root in [store.get(p) for p in peaks(last)]
```

## What it does not do

- It has no storage of its own. You supply the store.
- It has no command-line tool.
- It builds consistency proofs but has no function that verifies them as a
  whole. `consistent_roots` and `included_root` are the building blocks for
  that check.
- It has no verifier for bagged inclusion proofs.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```