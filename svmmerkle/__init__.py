"""Merkle trees and proofs with SHA-256/Keccak-256 hashing and configurable truncation."""

__version__ = "0.1.1"
__all__ = ["errors", "hashing", "proof", "tree"]