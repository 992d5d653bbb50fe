"""Hash primitives and the hashing algorithms a Merkle tree can use."""

from enum import IntEnum

import hashlib

from Crypto.Hash import keccak as _keccak

MAX_HASH_SIZE = 32


def sha256(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``."""
    return hashlib.sha256(bytes(data)).digest()


def keccak256(data: bytes) -> bytes:
    """Return the 32-byte Keccak-256 digest of ``data``."""
    return _keccak.new(digest_bits=256, data=bytes(data)).digest()


def _normalize_size(size: int) -> int:
    return MAX_HASH_SIZE if size <= 0 or size > MAX_HASH_SIZE else size


class HashingAlgorithm(IntEnum):
    """Hashing algorithm, with the byte value used to identify it."""

    SHA256 = 0
    SHA256D = 1
    KECCAK = 2
    KECCAKD = 3

    @classmethod
    def from_byte(cls, value: int) -> "HashingAlgorithm":
        """Map a byte to an algorithm; unknown values fall back to SHA256."""
        try:
            return cls(value)
        except ValueError:
            return cls.SHA256

    def _digest(self, data: bytes) -> bytes:
        if self in (HashingAlgorithm.SHA256, HashingAlgorithm.SHA256D):
            return sha256(data)
        return keccak256(data)

    def hash(self, data: bytes, size: int = MAX_HASH_SIZE) -> bytes:
        """Hash ``data`` and truncate to ``size`` bytes (0 or >32 means 32).

        The double variants hash twice.
        """
        size = _normalize_size(size)
        if self in (HashingAlgorithm.SHA256D, HashingAlgorithm.KECCAKD):
            return self.double_hash(data, size)
        return self._digest(data)[:size]

    def double_hash(self, data: bytes, size: int = MAX_HASH_SIZE) -> bytes:
        """Hash ``data`` twice and truncate to ``size`` bytes (0 or >32 means 32)."""
        size = _normalize_size(size)
        return self._digest(self._digest(data))[:size]