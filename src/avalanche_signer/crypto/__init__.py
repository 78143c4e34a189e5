"""
Cryptographic primitives for Avalanche credentials.
"""

from .secp256k1 import Secp256k1PrivateKey, Secp256k1PublicKey, Secp256k1Error

__all__ = [
    "Secp256k1PrivateKey",
    "Secp256k1PublicKey",
    "Secp256k1Error",
]
