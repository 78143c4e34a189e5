"""
Transaction outputs.

Four output variants form a closed family. Each encodes its type id first,
then its fields in declaration order. Owner addresses are kept sorted by
raw hash.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

from ..address import Address
from ..codec.writer import BinaryWriter
from ..constants import TransactionOutputTypeID
from .fields import EncodedOrdering, sorted_addresses, write_addresses, write_id


@dataclass(frozen=True, eq=True)
class SECP256k1TransferOutput(EncodedOrdering):
    """Spendable amount locked to a threshold of addresses."""

    amount: int
    locktime: int
    threshold: int
    addresses: Tuple[Address, ...]

    type_id: ClassVar[TransactionOutputTypeID] = TransactionOutputTypeID.SECP_TRANSFER_OUTPUT

    def __post_init__(self):
        object.__setattr__(self, "addresses", sorted_addresses(self.addresses))

    def encode(self, writer: BinaryWriter) -> None:
        writer.u32be(self.type_id)
        writer.u64be(self.amount)
        writer.u64be(self.locktime)
        writer.u32be(self.threshold)
        write_addresses(writer, self.addresses)


@dataclass(frozen=True, eq=True)
class SECP256k1MintOutput(EncodedOrdering):
    """Right to mint more of a fungible asset."""

    locktime: int
    threshold: int
    addresses: Tuple[Address, ...]

    type_id: ClassVar[TransactionOutputTypeID] = TransactionOutputTypeID.SECP_MINT_OUTPUT

    def __post_init__(self):
        object.__setattr__(self, "addresses", sorted_addresses(self.addresses))

    def encode(self, writer: BinaryWriter) -> None:
        writer.u32be(self.type_id)
        writer.u64be(self.locktime)
        writer.u32be(self.threshold)
        write_addresses(writer, self.addresses)


@dataclass(frozen=True, eq=True)
class NFTTransferOutput(EncodedOrdering):
    """Ownership of one NFT of a group, with its payload."""

    group_id: int
    payload: bytes
    locktime: int
    threshold: int
    addresses: Tuple[Address, ...]

    type_id: ClassVar[TransactionOutputTypeID] = TransactionOutputTypeID.NFT_TRANSFER_OUTPUT

    def __post_init__(self):
        object.__setattr__(self, "payload", bytes(self.payload))
        object.__setattr__(self, "addresses", sorted_addresses(self.addresses))

    def encode(self, writer: BinaryWriter) -> None:
        writer.u32be(self.type_id)
        writer.u32be(self.group_id)
        writer.len_prefixed_bytes(self.payload)
        writer.u64be(self.locktime)
        writer.u32be(self.threshold)
        write_addresses(writer, self.addresses)


@dataclass(frozen=True, eq=True)
class NFTMintOutput(EncodedOrdering):
    """Right to mint NFTs of a group."""

    group_id: int
    locktime: int
    threshold: int
    addresses: Tuple[Address, ...]

    type_id: ClassVar[TransactionOutputTypeID] = TransactionOutputTypeID.NFT_MINT_OUTPUT

    def __post_init__(self):
        object.__setattr__(self, "addresses", sorted_addresses(self.addresses))

    def encode(self, writer: BinaryWriter) -> None:
        writer.u32be(self.type_id)
        writer.u32be(self.group_id)
        writer.u64be(self.locktime)
        writer.u32be(self.threshold)
        write_addresses(writer, self.addresses)


TransactionOutput = Union[
    SECP256k1TransferOutput,
    SECP256k1MintOutput,
    NFTTransferOutput,
    NFTMintOutput,
]


@dataclass(frozen=True, eq=True)
class TransferableOutput(EncodedOrdering):
    """Output of a given asset."""

    asset_id: bytes
    output: TransactionOutput

    def __post_init__(self):
        object.__setattr__(self, "asset_id", bytes(self.asset_id))

    def encode(self, writer: BinaryWriter) -> None:
        write_id(writer, self.asset_id)
        self.output.encode(writer)


__all__ = [
    "SECP256k1TransferOutput",
    "SECP256k1MintOutput",
    "NFTTransferOutput",
    "NFTMintOutput",
    "TransactionOutput",
    "TransferableOutput",
]
