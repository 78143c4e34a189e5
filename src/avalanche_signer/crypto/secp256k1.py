"""
SECP256K1 cryptographic operations for Avalanche credentials.

Provides Bitcoin-style secp256k1 keys and the 65-byte recoverable signature
(r || s || recovery id) carried by SECP256k1 credentials.
"""

from __future__ import annotations
import os
from typing import Optional

import coincurve

from ..runtime.errors import AvalancheError, ErrorCode


class Secp256k1Error(AvalancheError):
    """Base exception for SECP256K1 operations."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_KEY, cause: Optional[Exception] = None):
        super().__init__(message, code, cause=cause)


class Secp256k1PublicKey:
    """SECP256K1 public key, always held in compressed form."""

    def __init__(self, public_key_bytes: bytes):
        """
        Initialize public key.

        Args:
            public_key_bytes: Public key bytes (33 or 65 bytes)

        Raises:
            Secp256k1Error: If the bytes are not a point on the curve
        """
        try:
            self._public_key = coincurve.PublicKey(bytes(public_key_bytes))
        except (ValueError, TypeError) as e:
            raise Secp256k1Error(f"Invalid public key: {e}", cause=e)
        self.public_key_bytes = self._public_key.format(compressed=True)

    @classmethod
    def recover(cls, signature: bytes, digest: bytes) -> Secp256k1PublicKey:
        """
        Recover the signing public key from a recoverable signature.

        Args:
            signature: 65-byte recoverable signature
            digest: 32-byte digest that was signed

        Returns:
            Recovered public key
        """
        try:
            public_key = coincurve.PublicKey.from_signature_and_message(signature, digest, hasher=None)
        except (ValueError, TypeError) as e:
            raise Secp256k1Error(f"Cannot recover public key: {e}", ErrorCode.SIGNING_FAILED, cause=e)
        return cls(public_key.format(compressed=True))

    def to_bytes(self) -> bytes:
        """Get compressed public key as bytes."""
        return self.public_key_bytes

    def verify(self, signature: bytes, digest: bytes) -> bool:
        """
        Verify a recoverable signature against a digest.

        Args:
            signature: 65-byte recoverable signature
            digest: 32-byte digest

        Returns:
            True if the signature recovers to this key
        """
        try:
            return Secp256k1PublicKey.recover(signature, digest) == self
        except Secp256k1Error:
            return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Secp256k1PublicKey):
            return self.public_key_bytes == other.public_key_bytes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.public_key_bytes)

    def __str__(self) -> str:
        return f"Secp256k1PublicKey({self.public_key_bytes.hex()[:16]}...)"


class Secp256k1PrivateKey:
    """SECP256K1 private key producing recoverable signatures over digests."""

    def __init__(self, private_key_bytes: Optional[bytes] = None):
        """
        Initialize private key.

        Args:
            private_key_bytes: 32-byte private key; random when omitted

        Raises:
            Secp256k1Error: If the key is not 32 bytes or not a valid scalar
        """
        if private_key_bytes is None:
            private_key_bytes = os.urandom(32)
        private_key_bytes = bytes(private_key_bytes)
        if len(private_key_bytes) != 32:
            raise Secp256k1Error(f"Private key must be 32 bytes, got {len(private_key_bytes)}")
        try:
            self._private_key = coincurve.PrivateKey(private_key_bytes)
        except ValueError as e:
            raise Secp256k1Error(f"Invalid private key: {e}", cause=e)
        self._private_key_bytes = private_key_bytes

    @classmethod
    def generate(cls) -> Secp256k1PrivateKey:
        """Generate a new random key."""
        return cls()

    @classmethod
    def from_hex(cls, private_key_hex: str) -> Secp256k1PrivateKey:
        """Create key from private key hex string."""
        try:
            private_key_bytes = bytes.fromhex(private_key_hex)
        except ValueError as e:
            raise Secp256k1Error(f"Invalid hex string: {e}", cause=e)
        return cls(private_key_bytes)

    def public_key(self) -> Secp256k1PublicKey:
        """
        Get the public key.

        Returns:
            Secp256k1PublicKey instance
        """
        return Secp256k1PublicKey(self._private_key.public_key.format(compressed=True))

    def sign(self, digest: bytes) -> bytes:
        """
        Sign a 32-byte digest.

        RFC 6979 nonces make the result deterministic for a given key and digest.

        Args:
            digest: 32-byte message digest

        Returns:
            65-byte recoverable signature (r || s || recovery id)
        """
        if len(digest) != 32:
            raise Secp256k1Error(f"Digest must be 32 bytes, got {len(digest)}", ErrorCode.SIGNING_FAILED)
        return self._private_key.sign_recoverable(digest, hasher=None)

    def to_hex(self) -> str:
        """Get private key as hex string."""
        return self._private_key_bytes.hex()

    def to_bytes(self) -> bytes:
        """Get private key as bytes."""
        return self._private_key_bytes

    def __str__(self) -> str:
        return f"Secp256k1PrivateKey(public={self.public_key().to_bytes().hex()[:16]}...)"


__all__ = [
    "Secp256k1PrivateKey",
    "Secp256k1PublicKey",
    "Secp256k1Error",
]
