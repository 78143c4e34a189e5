"""
Transfer operations spending UTXOs through an operation transaction.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

from ..address import Address
from ..codec.writer import BinaryWriter
from ..constants import TransactionOperationTypeID
from .fields import (
    EncodedOrdering,
    sorted_addresses,
    write_addresses,
    write_id,
    write_indices,
    write_nodes,
)
from .outputs import NFTTransferOutput, SECP256k1MintOutput, SECP256k1TransferOutput


@dataclass(frozen=True, eq=True)
class UTXOID(EncodedOrdering):
    """UTXO reference: source transaction id and output index."""

    tx_id: bytes
    utxo_index: int

    def __post_init__(self):
        object.__setattr__(self, "tx_id", bytes(self.tx_id))

    def encode(self, writer: BinaryWriter) -> None:
        write_id(writer, self.tx_id)
        writer.u32be(self.utxo_index)


@dataclass(frozen=True, eq=True)
class NFTMintOperationOutput(EncodedOrdering):
    """Owner record of a newly minted NFT; written without a type id."""

    locktime: int
    threshold: int
    addresses: Tuple[Address, ...]

    def __post_init__(self):
        object.__setattr__(self, "addresses", sorted_addresses(self.addresses))

    def encode(self, writer: BinaryWriter) -> None:
        writer.u64be(self.locktime)
        writer.u32be(self.threshold)
        write_addresses(writer, self.addresses)


@dataclass(frozen=True, eq=True)
class SECP256k1MintOperation(EncodedOrdering):
    address_indices: Tuple[int, ...]
    mint_output: SECP256k1MintOutput
    transfer_output: SECP256k1TransferOutput

    type_id: ClassVar[TransactionOperationTypeID] = TransactionOperationTypeID.SECP_MINT_OP

    def __post_init__(self):
        object.__setattr__(self, "address_indices", tuple(self.address_indices))

    def encode(self, writer: BinaryWriter) -> None:
        writer.u32be(self.type_id)
        write_indices(writer, self.address_indices)
        self.mint_output.encode(writer)
        self.transfer_output.encode(writer)


@dataclass(frozen=True, eq=True)
class NFTMintOperation(EncodedOrdering):
    address_indices: Tuple[int, ...]
    group_id: int
    payload: bytes
    outputs: Tuple[NFTMintOperationOutput, ...]

    type_id: ClassVar[TransactionOperationTypeID] = TransactionOperationTypeID.NFT_MINT_OP

    def __post_init__(self):
        object.__setattr__(self, "address_indices", tuple(self.address_indices))
        object.__setattr__(self, "payload", bytes(self.payload))
        object.__setattr__(self, "outputs", tuple(self.outputs))

    def encode(self, writer: BinaryWriter) -> None:
        writer.u32be(self.type_id)
        write_indices(writer, self.address_indices)
        writer.u32be(self.group_id)
        writer.len_prefixed_bytes(self.payload)
        write_nodes(writer, self.outputs)


@dataclass(frozen=True, eq=True)
class NFTTransferOperation(EncodedOrdering):
    address_indices: Tuple[int, ...]
    transfer_output: NFTTransferOutput

    type_id: ClassVar[TransactionOperationTypeID] = TransactionOperationTypeID.NFT_TRANSFER_OP

    def __post_init__(self):
        object.__setattr__(self, "address_indices", tuple(self.address_indices))

    def encode(self, writer: BinaryWriter) -> None:
        writer.u32be(self.type_id)
        write_indices(writer, self.address_indices)
        self.transfer_output.encode(writer)


TransferOperation = Union[SECP256k1MintOperation, NFTMintOperation, NFTTransferOperation]


@dataclass(frozen=True, eq=True)
class TransferableOp(EncodedOrdering):
    """Operation on an asset consuming the listed UTXOs."""

    asset_id: bytes
    utxo_ids: Tuple[UTXOID, ...]
    operation: TransferOperation

    def __post_init__(self):
        object.__setattr__(self, "asset_id", bytes(self.asset_id))
        object.__setattr__(self, "utxo_ids", tuple(self.utxo_ids))

    def encode(self, writer: BinaryWriter) -> None:
        write_id(writer, self.asset_id)
        write_nodes(writer, self.utxo_ids)
        self.operation.encode(writer)


__all__ = [
    "UTXOID",
    "NFTMintOperationOutput",
    "SECP256k1MintOperation",
    "NFTMintOperation",
    "NFTTransferOperation",
    "TransferOperation",
    "TransferableOp",
]
