"""
Avalanche Binary Codec Module

Canonical binary encoding for X-chain transactions.

Key components:
- writer.py: Big-endian binary writer
- encoder.py: Codec id framing, encoded-byte ordering and signing digest
- hashes.py: SHA-256 and SHA-256 + RIPEMD-160 helpers
"""

from .encoder import (
    compare_encoded,
    encode_node,
    encode_signed,
    encode_unsigned,
    encoded_key,
    hash_for_signing,
    sort_encoded,
)
from .hashes import ripemd160_bytes, sha256_bytes, sha256_ripemd160
from .writer import BinaryWriter

__all__ = [
    "BinaryWriter",
    "compare_encoded",
    "encode_node",
    "encode_signed",
    "encode_unsigned",
    "encoded_key",
    "hash_for_signing",
    "sort_encoded",
    "ripemd160_bytes",
    "sha256_bytes",
    "sha256_ripemd160",
]
