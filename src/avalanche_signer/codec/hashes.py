"""
Hash Functions

SHA-256 for the signing digest and SHA-256 + RIPEMD-160 for address
derivation.
"""

import hashlib

from Crypto.Hash import RIPEMD160


def sha256_bytes(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    return hashlib.sha256(input_bytes).digest()


def ripemd160_bytes(input_bytes: bytes) -> bytes:
    """
    Compute RIPEMD-160 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        RIPEMD-160 hash as bytes (20 bytes)
    """
    return RIPEMD160.new(input_bytes).digest()


def sha256_ripemd160(public_key_bytes: bytes) -> bytes:
    """
    Compute the 20-byte address hash of a public key: RIPEMD-160(SHA-256(key)).

    Args:
        public_key_bytes: Compressed secp256k1 public key

    Returns:
        20-byte address hash
    """
    return ripemd160_bytes(sha256_bytes(public_key_bytes))
