"""
Transaction inputs.

The only supported input variant spends a SECP256k1 transfer output. The
spendable address list travels with the input so the signer can map
address indices to keys; it is not part of the encoding.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar, Tuple, Union

from ..address import Address
from ..codec.writer import BinaryWriter
from ..constants import TransactionInputTypeID
from .fields import EncodedOrdering, sorted_addresses, write_id, write_indices


@dataclass(frozen=True, eq=True)
class SECP256k1TransferInput(EncodedOrdering):
    """Amount being spent and the indices of the addresses that must sign."""

    amount: int
    address_indices: Tuple[int, ...]

    type_id: ClassVar[TransactionInputTypeID] = TransactionInputTypeID.SECP_INPUT

    def __post_init__(self):
        object.__setattr__(self, "address_indices", tuple(self.address_indices))

    def encode(self, writer: BinaryWriter) -> None:
        writer.u32be(self.type_id)
        writer.u64be(self.amount)
        write_indices(writer, self.address_indices)


TransactionInput = Union[SECP256k1TransferInput]


@dataclass(frozen=True, eq=True)
class TransferableInput(EncodedOrdering):
    """Reference to a UTXO plus the input that spends it."""

    tx_id: bytes
    utxo_index: int
    asset_id: bytes
    input: TransactionInput
    spendable_addresses: Tuple[Address, ...] = field(default=(), compare=False)

    def __post_init__(self):
        object.__setattr__(self, "tx_id", bytes(self.tx_id))
        object.__setattr__(self, "asset_id", bytes(self.asset_id))
        object.__setattr__(self, "spendable_addresses", tuple(self.spendable_addresses))

    def sorted_spendable_addresses(self) -> Tuple[Address, ...]:
        """Spendable addresses ascending by raw hash; address indices point into this list."""
        return sorted_addresses(self.spendable_addresses)

    def encode(self, writer: BinaryWriter) -> None:
        write_id(writer, self.tx_id)
        writer.u32be(self.utxo_index)
        write_id(writer, self.asset_id)
        self.input.encode(writer)


__all__ = [
    "SECP256k1TransferInput",
    "TransactionInput",
    "TransferableInput",
]
