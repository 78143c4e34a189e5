"""
Unsigned and signed X-chain transactions.

Every specialization embeds a BaseTransaction and appends its own fields
after the base fields. Input and output order is caller determined and is
never changed here; it feeds the signing digest as given.

Field order:
    BaseTransaction: type id, network id, blockchain id, outputs, inputs, memo
    CreateAssetTransaction: base, name, symbol, denomination, initial states
    ExportTransaction: base, destination chain, exported outputs
    ImportTransaction: base, source chain, imported inputs
    OperationTransaction: base, operations
    SignedTransaction: unsigned transaction, credentials
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

from ..codec.encoder import sort_encoded
from ..codec.writer import BinaryWriter
from .credentials import Credential
from .fields import write_id, write_nodes
from .initial_state import InitialState
from .inputs import TransferableInput
from .operations import TransferableOp
from .outputs import TransferableOutput


@dataclass(frozen=True, eq=True)
class BaseTransaction:
    """Plain transfer of assets between UTXOs on one chain."""

    type_id: int
    network_id: int
    blockchain_id: bytes
    inputs: Tuple[TransferableInput, ...] = ()
    outputs: Tuple[TransferableOutput, ...] = ()
    memo: bytes = b""

    def __post_init__(self):
        object.__setattr__(self, "blockchain_id", bytes(self.blockchain_id))
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))
        object.__setattr__(self, "memo", bytes(self.memo))

    @property
    def base(self) -> BaseTransaction:
        return self

    def signable_inputs(self) -> Tuple[TransferableInput, ...]:
        """Inputs that each need one credential, in credential order."""
        return self.inputs

    def encode(self, writer: BinaryWriter) -> None:
        writer.u32be(self.type_id)
        writer.u32be(self.network_id)
        write_id(writer, self.blockchain_id)
        write_nodes(writer, self.outputs)
        write_nodes(writer, self.inputs)
        writer.len_prefixed_bytes(self.memo)


@dataclass(frozen=True, eq=True)
class _EmbeddedBase:
    base: BaseTransaction

    @property
    def type_id(self) -> int:
        return self.base.type_id

    @property
    def network_id(self) -> int:
        return self.base.network_id

    @property
    def blockchain_id(self) -> bytes:
        return self.base.blockchain_id

    @property
    def inputs(self) -> Tuple[TransferableInput, ...]:
        return self.base.inputs

    @property
    def outputs(self) -> Tuple[TransferableOutput, ...]:
        return self.base.outputs

    @property
    def memo(self) -> bytes:
        return self.base.memo

    def signable_inputs(self) -> Tuple[TransferableInput, ...]:
        """Base inputs only; imported inputs carry no credentials."""
        return self.base.inputs


@dataclass(frozen=True, eq=True)
class CreateAssetTransaction(_EmbeddedBase):
    """Creates a new asset with its genesis outputs."""

    name: str = ""
    symbol: str = ""
    denomination: int = 0
    initial_states: Tuple[InitialState, ...] = ()

    # InitialState is mutable and unhashable
    __hash__ = None

    def __post_init__(self):
        states = [state.copy() for state in self.initial_states]
        object.__setattr__(self, "initial_states", tuple(sort_encoded(states)))

    def encode(self, writer: BinaryWriter) -> None:
        self.base.encode(writer)
        writer.string(self.name)
        writer.string(self.symbol)
        writer.u8(self.denomination)
        write_nodes(writer, self.initial_states)


@dataclass(frozen=True, eq=True)
class ExportTransaction(_EmbeddedBase):
    """Moves outputs to another chain's shared memory."""

    destination_chain: bytes = b""
    exported_outputs: Tuple[TransferableOutput, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "destination_chain", bytes(self.destination_chain))
        object.__setattr__(self, "exported_outputs", tuple(self.exported_outputs))

    def encode(self, writer: BinaryWriter) -> None:
        self.base.encode(writer)
        write_id(writer, self.destination_chain)
        write_nodes(writer, self.exported_outputs)


@dataclass(frozen=True, eq=True)
class ImportTransaction(_EmbeddedBase):
    """Consumes UTXOs exported to this chain from another chain."""

    source_chain: bytes = b""
    imported_inputs: Tuple[TransferableInput, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "source_chain", bytes(self.source_chain))
        object.__setattr__(self, "imported_inputs", tuple(self.imported_inputs))

    def encode(self, writer: BinaryWriter) -> None:
        self.base.encode(writer)
        write_id(writer, self.source_chain)
        write_nodes(writer, self.imported_inputs)


@dataclass(frozen=True, eq=True)
class OperationTransaction(_EmbeddedBase):
    """Applies feature-extension operations to UTXOs."""

    operations: Tuple[TransferableOp, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "operations", tuple(self.operations))

    def encode(self, writer: BinaryWriter) -> None:
        self.base.encode(writer)
        write_nodes(writer, self.operations)


UnsignedTransaction = Union[
    BaseTransaction,
    CreateAssetTransaction,
    ExportTransaction,
    ImportTransaction,
    OperationTransaction,
]


@dataclass(frozen=True, eq=True)
class SignedTransaction:
    """Unsigned transaction plus one credential per signable input, index aligned."""

    unsigned: UnsignedTransaction
    credentials: Tuple[Credential, ...]

    def __post_init__(self):
        object.__setattr__(self, "credentials", tuple(self.credentials))

    def encode(self, writer: BinaryWriter) -> None:
        self.unsigned.encode(writer)
        write_nodes(writer, self.credentials)


__all__ = [
    "BaseTransaction",
    "CreateAssetTransaction",
    "ExportTransaction",
    "ImportTransaction",
    "OperationTransaction",
    "UnsignedTransaction",
    "SignedTransaction",
]
