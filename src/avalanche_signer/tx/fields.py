"""
Field helpers shared by the transaction model.

Collections are written as a u32 big-endian count followed by the elements;
address hashes and ids are fixed width with no prefix.
"""

from __future__ import annotations
from typing import Any, Iterable, Sequence, Tuple

from ..address import Address
from ..codec.encoder import encoded_key
from ..codec.writer import BinaryWriter
from ..constants import ADDRESS_HASH_LEN, ID_LEN


class EncodedOrdering:
    """
    Mixin ordering nodes by their full canonical encoding.

    Variant type ids are the first encoded field, so nodes of different
    variants order by tag before content.
    """

    def __lt__(self, other: Any) -> bool:
        if not hasattr(other, "encode"):
            return NotImplemented
        return encoded_key(self) < encoded_key(other)

    def __le__(self, other: Any) -> bool:
        if not hasattr(other, "encode"):
            return NotImplemented
        return encoded_key(self) <= encoded_key(other)

    def __gt__(self, other: Any) -> bool:
        if not hasattr(other, "encode"):
            return NotImplemented
        return encoded_key(self) > encoded_key(other)

    def __ge__(self, other: Any) -> bool:
        if not hasattr(other, "encode"):
            return NotImplemented
        return encoded_key(self) >= encoded_key(other)


def write_id(writer: BinaryWriter, value: bytes) -> None:
    """Write a 32-byte id (transaction, asset, blockchain or chain id)."""
    writer.fixed_bytes(value, ID_LEN)


def write_addresses(writer: BinaryWriter, addresses: Sequence[Address]) -> None:
    writer.u32be(len(addresses))
    for address in addresses:
        writer.fixed_bytes(address.to_bytes(), ADDRESS_HASH_LEN)


def write_indices(writer: BinaryWriter, indices: Sequence[int]) -> None:
    writer.u32be(len(indices))
    for index in indices:
        writer.u32be(index)


def write_nodes(writer: BinaryWriter, nodes: Sequence[Any]) -> None:
    """Write a u32 count followed by each node's encoding, order unchanged."""
    writer.u32be(len(nodes))
    for node in nodes:
        node.encode(writer)


def sorted_addresses(addresses: Iterable[Address]) -> Tuple[Address, ...]:
    """Addresses ascending by raw hash."""
    return tuple(sorted(addresses))
