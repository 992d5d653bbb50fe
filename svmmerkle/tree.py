"""Merkle trees built from leaves or leaf hashes."""

from bisect import bisect_left
from collections.abc import Iterable, Iterator

from .errors import (
    InvalidHashSizeError,
    LeafNotFoundError,
    LeafOutOfRangeError,
    TreeEmptyError,
    TreeNotMerklizedError,
)
from .hashing import MAX_HASH_SIZE, HashingAlgorithm
from .proof import MerkleProof


def _pairs(level: list[bytes]) -> Iterator[tuple[bytes, bytes]]:
    """Yield neighbouring pairs, pairing a trailing odd hash with itself."""
    it = iter(level)
    for left in it:
        yield left, next(it, left)


class MerkleTree:
    """A Merkle tree with a configurable hashing algorithm and hash size.

    Leaf and branch hashes are truncated to ``hash_size`` bytes; the root
    is always a full 32-byte hash.
    """

    def __init__(self, algorithm: HashingAlgorithm, hash_size: int) -> None:
        self.algorithm = HashingAlgorithm(algorithm)
        self.hash_size = (
            MAX_HASH_SIZE if hash_size <= 0 or hash_size > MAX_HASH_SIZE else hash_size
        )
        self._root = b""
        self._levels: list[list[bytes]] = [[]]

    def __len__(self) -> int:
        return len(self._levels[0])

    def __repr__(self) -> str:
        return (
            f"MerkleTree(algorithm={self.algorithm.name}, "
            f"hash_size={self.hash_size}, leaves={len(self)})"
        )

    @property
    def _leaves(self) -> list[bytes]:
        return self._levels[0]

    def _double_hash(self, data: bytes) -> bytes:
        return self.algorithm.double_hash(data, self.hash_size)

    def _next_level(self, level: list[bytes], size: int) -> list[bytes]:
        return [self.algorithm.hash(left + right, size) for left, right in _pairs(level)]

    def add_leaves(self, leaves: Iterable[bytes]) -> None:
        """Double hash each leaf and append the hashes."""
        self.add_hashes_unchecked([self._double_hash(bytes(leaf)) for leaf in leaves])

    def add_leaf(self, leaf: bytes) -> None:
        """Double hash a leaf and append its hash."""
        # Double hashing guards against length extension attacks.
        self.add_hash_unchecked(self._double_hash(bytes(leaf)))

    def add_hashes(self, hashes: Iterable[bytes]) -> None:
        """Append hashes after checking that each one has the tree's hash size.

        Nothing is appended if any hash has the wrong size.
        """
        hashes = [bytes(h) for h in hashes]
        if any(len(h) != self.hash_size for h in hashes):
            raise InvalidHashSizeError()
        self._leaves.extend(hashes)

    def add_hashes_unchecked(self, hashes: Iterable[bytes]) -> None:
        """Append hashes without checking their size."""
        self._leaves.extend(bytes(h) for h in hashes)

    def add_hash(self, hash: bytes) -> None:
        """Append a hash after checking that it has the tree's hash size."""
        hash = bytes(hash)
        if len(hash) != self.hash_size:
            raise InvalidHashSizeError()
        self.add_hash_unchecked(hash)

    def add_hash_unchecked(self, hash: bytes) -> None:
        """Append a hash without checking its size."""
        self._leaves.append(bytes(hash))

    def merklize(self) -> None:
        """Build the branch levels and compute the root."""
        leaves = self._leaves
        if not leaves:
            raise TreeEmptyError()
        self.reset()
        if len(leaves) == 1:
            self._root = leaves[0]
            return
        while len(self._levels[-1]) > 2:
            self._levels.append(self._next_level(self._levels[-1], self.hash_size))
        self._root = self._next_level(self._levels[-1], MAX_HASH_SIZE)[0]

    def reset(self) -> None:
        """Drop every branch level, keeping the leaf hashes."""
        del self._levels[1:]

    def _require_merklized(self) -> None:
        if not self._root or self._root == bytes(MAX_HASH_SIZE):
            raise TreeNotMerklizedError()

    def _require_in_range(self, index: int) -> None:
        if index < 0 or index >= len(self._leaves):
            raise LeafOutOfRangeError()

    def _hash_index(self, hash: bytes) -> int:
        # Binary search: the leaf hashes are expected to be sorted.
        leaves = self._leaves
        position = bisect_left(leaves, hash)
        if position < len(leaves) and leaves[position] == hash:
            return position
        raise LeafNotFoundError()

    def merkle_root(self) -> bytes:
        """Return the root of a merklized tree."""
        self._require_merklized()
        return self._root

    def leaf_hash(self, index: int) -> bytes:
        """Return the hash of the leaf at ``index``."""
        self._require_in_range(index)
        return self._leaves[index]

    def merkle_proof_hash(self, hash: bytes) -> MerkleProof:
        """Return the proof for the leaf with the given hash."""
        self._require_merklized()
        return self._proof(self._hash_index(bytes(hash)))

    def merkle_proof_index(self, index: int) -> MerkleProof:
        """Return the proof for the leaf at ``index``."""
        self._require_merklized()
        self._require_in_range(index)
        return self._proof(index)

    def _proof(self, index: int) -> MerkleProof:
        leaf_count = len(self._leaves)
        if leaf_count == 0:
            raise TreeEmptyError()
        if leaf_count == 1:
            return MerkleProof(self.algorithm, self.hash_size, index, b"")
        siblings = []
        n = index
        for level in self._levels:
            n = min(n + 1, len(level)) if n % 2 == 0 else n - 1
            siblings.append(level[n] if n < len(level) else level[n - 1])
            n //= 2
        return MerkleProof(self.algorithm, self.hash_size, index, b"".join(siblings))