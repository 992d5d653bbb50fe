"""Exceptions raised by Merkle tree and proof operations."""


class MerkleError(Exception):
    """Base class for every Merkle tree and proof error."""

    default_message = "Merkle error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class LeafOutOfRangeError(MerkleError, IndexError):
    """A leaf index lies beyond the leaves of the tree."""

    default_message = "Leaf out of range"


class BranchOutOfRangeError(MerkleError, IndexError):
    """A branch level of the tree does not exist."""

    default_message = "Branch out of range"


class LeafNotFoundError(MerkleError, LookupError):
    """A leaf hash is not present in the tree."""

    default_message = "Leaf not found"


class TreeNotMerklizedError(MerkleError):
    """The tree has not been merklized yet."""

    default_message = "Merkle tree not merklized"


class TreeEmptyError(MerkleError):
    """The tree holds no leaves."""

    default_message = "Merkle tree is empty"


class InvalidHashSizeError(MerkleError, ValueError):
    """A hash or a run of pairing hashes has the wrong length."""

    default_message = "Invalid hash size"