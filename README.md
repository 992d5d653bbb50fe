# svmmerkle

Merkle trees and Merkle proofs over SHA-256 or Keccak-256. Leaf and inner hashes can be cut down to any length from 1 to 32 bytes. The root of a tree with two or more leaves is always a full 32-byte hash.

## Installation

```
pip install svmmerkle
```

To run the tests:

```
pip install "svmmerkle[test]"
pytest
```

## Hashing algorithms

`svmmerkle.hashing.HashingAlgorithm` is an `IntEnum` with four members:

| Member    | Value | Hash used for inner nodes |
|-----------|-------|---------------------------|
| `SHA256`  | 0     | SHA-256                   |
| `SHA256D` | 1     | SHA-256 applied twice     |
| `KECCAK`  | 2     | Keccak-256                |
| `KECCAKD` | 3     | Keccak-256 applied twice  |

`HashingAlgorithm.from_byte(value)` maps a byte to a member. Any value other than 1, 2 or 3 gives `SHA256`.

Each member has two methods:

- `hash(data, size)` hashes once. The `D` variants hash twice.
- `double_hash(data, size)` always hashes twice with the member's hash family.

Both methods cut the result down to `size` bytes. A size of 0 or less, or above 32, means 32.

The module also has `sha256(data)` and `keccak256(data)`. Each returns the full 32-byte digest.

## Building a tree

```python
from svmmerkle.hashing import HashingAlgorithm
from svmmerkle.tree import MerkleTree

tree = MerkleTree(HashingAlgorithm.SHA256, 16)  # 16-byte leaf and inner hashes
tree.add_leaf(b"first leaf")
tree.add_leaves([b"second leaf", b"third leaf"])
tree.merklize()

root = tree.merkle_root()          # 32 bytes
leaf = tree.leaf_hash(0)           # 16 bytes
proof = tree.merkle_proof_index(0)
len(tree)                          # 3 leaves
```

A hash size of 0 or less, or above 32, is treated as 32.

Leaves added with `add_leaf` or `add_leaves` are hashed twice with the tree's hash family. This guards against length-extension attacks.

### Adding leaf hashes directly

If your leaves are already hashed, add the hashes themselves:

- `add_hash` and `add_hashes` check that every hash has exactly the tree's hash size. If any hash has the wrong size, they raise `InvalidHashSizeError` and add nothing.
- `add_hash_unchecked` and `add_hashes_unchecked` skip that check.

For example, to build a Bitcoin block's transaction tree from its txids:

```python
tree = MerkleTree(HashingAlgorithm.SHA256D, 32)
tree.add_hashes([txid0, txid1, txid2, txid3])
tree.merklize()
```

### Tree shape and behaviour

- **Odd levels:** when a level has an odd number of nodes, the last node is paired with itself.
- **Single leaf:** a tree with one leaf uses that leaf hash as its root. That root has the tree's hash size.
- **Empty tree:** `merklize()` raises `TreeEmptyError` if the tree has no leaves.
- **Root before merklizing:** calling `merkle_root()` or asking for a proof before `merklize()` raises `TreeNotMerklizedError`.
- **Rebuilding:** `reset()` throws away the computed inner levels and keeps the leaves. `merklize()` calls it before it rebuilds, so you can add more leaves and merklize again.
- **Leaf index out of range:** `leaf_hash(index)` and `merkle_proof_index(index)` raise `LeafOutOfRangeError` for an index outside the leaves.
- **Lookup by hash:** `merkle_proof_hash(hash)` finds the leaf with a binary search, so it expects the leaf hashes to be in sorted order. It raises `LeafNotFoundError` if the hash is not found.

## Verifying a proof

```python
from svmmerkle.proof import MerkleProof

proof = MerkleProof(HashingAlgorithm.SHA256, 16, 0, pairing_hashes)
assert proof.merklize(b"first leaf") == root
```

`MerkleProof(algorithm, hash_size, index, hashes)` has these methods:

- `merklize(leaf)` hashes a raw leaf twice and walks it up to the root.
- `merklize_hash(hash)` starts from a leaf hash you already have. It raises `InvalidHashSizeError` if the hash does not have the proof's hash size. The one exception is a proof with no pairing hashes, which returns a 32-byte hash unchanged.
- `hash(data)` and `double_hash(data)` hash with the proof's algorithm and cut the result to its hash size.
- `pairing_hashes()` returns the sibling hashes joined into one `bytes` value. You can store or send this and build the proof again from it.

Other rules:

- A proof from a single-leaf tree has no pairing hashes. For it, `merklize(leaf)` returns the full 32-byte double hash of the leaf.
- If the pairing hashes are not a whole number of hashes long, merklizing raises `InvalidHashSizeError`.
- A negative index raises `ValueError`.

## Errors

Every error is a subclass of `svmmerkle.errors.MerkleError`:

- `LeafOutOfRangeError`, which is also an `IndexError`
- `BranchOutOfRangeError`, which is also an `IndexError` (defined, but not raised by the tree or proof)
- `LeafNotFoundError`, which is also a `LookupError`
- `TreeNotMerklizedError`
- `TreeEmptyError`
- `InvalidHashSizeError`, which is also a `ValueError`

## What this package does not do

svmmerkle is a library only. It has no command-line tool. It does not save trees or proofs to disk, and it has no serialisation format beyond the raw bytes that `pairing_hashes()` returns.