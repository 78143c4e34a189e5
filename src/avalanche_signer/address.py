"""
Chain-prefixed Avalanche addresses.

An address is a 20-byte public key hash. Its text form is
``"<chain>-<bech32>"`` where the chain letter is X or P. Equality, hashing
and ordering use the raw hash only; the chain letter is an annotation.
"""

from __future__ import annotations
import functools
from typing import Any, Optional, Union

from bech32 import bech32_decode, bech32_encode, convertbits

from .codec.hashes import sha256_ripemd160
from .constants import ADDRESS_HASH_LEN, AVAX_HRP, DEFAULT_CHAIN, SUPPORTED_CHAINS
from .crypto.secp256k1 import Secp256k1Error, Secp256k1PublicKey
from .networks import NetworkParams
from .runtime.errors import ErrorCode, InvalidAddressError

HrpLike = Union[str, NetworkParams]


def _hrp_of(hrp: HrpLike) -> str:
    if isinstance(hrp, NetworkParams):
        return hrp.hrp
    return hrp


@functools.total_ordering
class Address:
    """20-byte address hash with a chain letter annotation."""

    __slots__ = ("_hash", "chain", "hrp")

    def __init__(self, key_hash: bytes, chain: str = DEFAULT_CHAIN, hrp: HrpLike = AVAX_HRP):
        """
        Initialize address.

        Args:
            key_hash: 20-byte RIPEMD-160(SHA-256(public key)) hash
            chain: Chain letter used when rendering text
            hrp: Bech32 human-readable prefix, or the network whose prefix is used
        """
        key_hash = bytes(key_hash)
        if len(key_hash) != ADDRESS_HASH_LEN:
            raise InvalidAddressError(
                f"Address hash must be {ADDRESS_HASH_LEN} bytes, got {len(key_hash)}",
                ErrorCode.INVALID_ADDRESS,
            )
        self._hash = key_hash
        self.chain = chain
        self.hrp = _hrp_of(hrp)

    @classmethod
    def from_public_key(cls, public_key: Union[bytes, Secp256k1PublicKey],
                        chain: str = DEFAULT_CHAIN, hrp: HrpLike = AVAX_HRP) -> Address:
        """
        Derive the address of a secp256k1 public key.

        Args:
            public_key: Public key (33 or 65 bytes, or key object)
            chain: Chain letter annotation
            hrp: Bech32 human-readable prefix

        Returns:
            Address of the compressed key

        Raises:
            InvalidAddressError: If the bytes are not a valid public key
        """
        if not isinstance(public_key, Secp256k1PublicKey):
            try:
                public_key = Secp256k1PublicKey(public_key)
            except Secp256k1Error as e:
                raise InvalidAddressError(e.message, ErrorCode.INVALID_PUBLIC_KEY, cause=e)
        return cls(sha256_ripemd160(public_key.to_bytes()), chain, hrp)

    @staticmethod
    def _split(text: str) -> Optional[tuple]:
        if not isinstance(text, str):
            return None
        chain, sep, payload = text.partition("-")
        if not sep or not chain:
            return None
        return chain, payload

    @classmethod
    def is_valid(cls, text: str, hrp: HrpLike = AVAX_HRP) -> bool:
        """
        Check whether text is a well formed address for the given prefix.

        Args:
            text: Address text, e.g. "X-avax1..."
            hrp: Expected bech32 human-readable prefix

        Returns:
            True if from_string would accept the text
        """
        try:
            cls.from_string(text, hrp)
        except InvalidAddressError:
            return False
        return True

    @classmethod
    def from_string(cls, text: str, hrp: HrpLike = AVAX_HRP) -> Address:
        """
        Parse ``"<X|P>-<bech32>"`` address text.

        Args:
            text: Address text
            hrp: Expected bech32 human-readable prefix, or a network preset

        Returns:
            Parsed address carrying the chain letter of the text

        Raises:
            InvalidAddressError: If the separator is missing, the chain letter
                is empty or not X/P, or the payload fails bech32 decoding
        """
        parts = cls._split(text)
        if parts is None:
            raise InvalidAddressError("Invalid address string", details={"address": text})
        chain, payload = parts
        hrp = _hrp_of(hrp)
        if chain not in SUPPORTED_CHAINS:
            raise InvalidAddressError(
                f"Unsupported chain '{chain}'", ErrorCode.INVALID_CHAIN, {"address": text}
            )

        decoded_hrp, data = bech32_decode(payload)
        if decoded_hrp is None or decoded_hrp != hrp:
            raise InvalidAddressError("Invalid address string", details={"address": text})
        key_hash = convertbits(data, 5, 8, True)
        if key_hash is None or len(key_hash) != ADDRESS_HASH_LEN:
            raise InvalidAddressError("Invalid address string", details={"address": text})
        return cls(bytes(key_hash), chain, hrp)

    @property
    def key_hash(self) -> bytes:
        """Raw 20-byte hash."""
        return self._hash

    def to_bytes(self) -> bytes:
        """Get the raw 20-byte hash, as written on the wire."""
        return self._hash

    def bech32(self) -> str:
        """Bech32 payload without the chain prefix."""
        return bech32_encode(self.hrp, convertbits(self._hash, 8, 5, True))

    def __str__(self) -> str:
        return f"{self.chain}-{self.bech32()}"

    def __repr__(self) -> str:
        return f"Address('{self}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Address):
            return self._hash == other._hash
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Address):
            return self._hash < other._hash
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._hash)


__all__ = ["Address"]
