"""Merkle Mountain Range navigation, appending, inclusion and consistency proofs."""

__version__ = "0.1.0"