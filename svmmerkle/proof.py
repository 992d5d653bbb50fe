"""Merkle inclusion proofs."""

from dataclasses import dataclass

from .errors import InvalidHashSizeError
from .hashing import MAX_HASH_SIZE, HashingAlgorithm


@dataclass(init=False)
class MerkleProof:
    """Pairing hashes that lead from one leaf to the Merkle root."""

    algorithm: HashingAlgorithm
    hash_size: int
    index: int
    hashes: bytes

    def __init__(
        self,
        algorithm: HashingAlgorithm,
        hash_size: int,
        index: int,
        hashes: bytes,
    ) -> None:
        if index < 0:
            raise ValueError("proof index must not be negative")
        self.algorithm = HashingAlgorithm(algorithm)
        self.hash_size = (
            MAX_HASH_SIZE if hash_size <= 0 or hash_size > MAX_HASH_SIZE else hash_size
        )
        self.index = index
        self.hashes = bytes(hashes)

    def hash(self, data: bytes) -> bytes:
        """Hash with the proof's algorithm, truncated to its hash size."""
        return self.algorithm.hash(data, self.hash_size)

    def double_hash(self, data: bytes) -> bytes:
        """Double hash with the proof's algorithm, truncated to its hash size."""
        return self.algorithm.double_hash(data, self.hash_size)

    def merklize(self, leaf: bytes) -> bytes:
        """Compute the root implied by the proof for a raw leaf."""
        if not self.hashes:
            return self.algorithm.double_hash(leaf, 0)
        return self._merklize_hash_unchecked(self.double_hash(leaf))

    def merklize_hash(self, hash: bytes) -> bytes:
        """Compute the root implied by the proof for an already hashed leaf."""
        hash = bytes(hash)
        if len(hash) != self.hash_size:
            if not self.hashes and len(hash) == MAX_HASH_SIZE:
                return hash
            raise InvalidHashSizeError()
        return self._merklize_hash_unchecked(hash)

    def _merklize_hash_unchecked(self, hash: bytes) -> bytes:
        size = self.hash_size
        if len(self.hashes) % size:
            raise InvalidHashSizeError()
        if not self.hashes:
            return bytes(hash)
        siblings = [
            self.hashes[start : start + size]
            for start in range(0, len(self.hashes), size)
        ]
        last = len(siblings) - 1
        index = self.index
        current = bytes(hash)
        for level, sibling in enumerate(siblings):
            pair = current + sibling if index % 2 == 0 else sibling + current
            current = (
                self.algorithm.hash(pair, MAX_HASH_SIZE)
                if level == last
                else self.hash(pair)
            )
            index //= 2
        return current

    def pairing_hashes(self) -> bytes:
        """Return the concatenated pairing hashes."""
        return self.hashes