"""
Canonical encoder.

Serializes transaction nodes in field order behind the two-byte codec id,
and provides the encoded-byte ordering used wherever the codec requires a
deterministic sort of polymorphic values.
"""

from __future__ import annotations
from typing import Any, Iterable, List, Protocol, TypeVar

from ..constants import CODEC_ID
from .hashes import sha256_bytes
from .writer import BinaryWriter


class Encodable(Protocol):
    def encode(self, writer: BinaryWriter) -> None:
        ...


E = TypeVar("E", bound=Encodable)


def encode_node(node: Encodable) -> bytes:
    """
    Encode a single node without the codec id.

    Args:
        node: Any transaction model node

    Returns:
        Canonical bytes of the node
    """
    writer = BinaryWriter()
    node.encode(writer)
    return writer.to_bytes()


def encoded_key(node: Encodable) -> bytes:
    """
    Sort key comparing nodes by their full encoding.

    Type id bytes come first in every variant encoding, so they take part
    in the ordering.
    """
    return encode_node(node)


def compare_encoded(lhs: Encodable, rhs: Encodable) -> int:
    """
    Three-way byte-wise lexicographic comparison of two encodings.

    Returns:
        Negative, zero or positive like a classic cmp function
    """
    a = encoded_key(lhs)
    b = encoded_key(rhs)
    return (a > b) - (a < b)


def sort_encoded(nodes: Iterable[E]) -> List[E]:
    """Return nodes sorted ascending by their encoded bytes."""
    return sorted(nodes, key=encoded_key)


def encode_with_codec(node: Encodable) -> bytes:
    """
    Encode a node behind the two-byte codec id.

    Args:
        node: Unsigned or signed transaction

    Returns:
        codec id + node bytes
    """
    writer = BinaryWriter()
    writer.bytes(CODEC_ID)
    node.encode(writer)
    return writer.to_bytes()


def encode_unsigned(transaction: Any) -> bytes:
    """
    Encode an unsigned transaction: codec id followed by the transaction body.

    Input and output order is preserved exactly as supplied.
    """
    return encode_with_codec(transaction)


def encode_signed(signed_transaction: Any) -> bytes:
    """
    Encode a signed transaction: codec id, transaction body, u32 credential
    count, credentials.
    """
    return encode_with_codec(signed_transaction)


def hash_for_signing(transaction: Any) -> bytes:
    """SHA-256 digest of the unsigned encoding, signed once per required signer."""
    return sha256_bytes(encode_unsigned(transaction))


__all__ = [
    "Encodable",
    "encode_node",
    "encoded_key",
    "compare_encoded",
    "sort_encoded",
    "encode_with_codec",
    "encode_unsigned",
    "encode_signed",
    "hash_for_signing",
]
