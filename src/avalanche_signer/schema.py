"""
Unsigned transaction description.

Pydantic models describing a signing request: the private keys and one
unsigned transaction tagged by kind. Each "one of" group is a model whose
fields are the known variants; ``case`` names the variant that is set, or
is None when the group is unset or carries only unknown variants. The
assembler decides what an unset case means.

Byte fields accept ``bytes`` or hex strings (with or without ``0x``).
Field names may be given in snake_case or camelCase.
"""

from __future__ import annotations
from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


def _coerce_bytes(value: Any) -> Any:
    if isinstance(value, str):
        text = value[2:] if value.startswith(("0x", "0X")) else value
        try:
            return bytes.fromhex(text)
        except ValueError as e:
            raise ValueError(f"Invalid hex string: {e}")
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, list):
        return bytes(value)
    return value


def _coerce_address(value: Any) -> Any:
    # Address text keeps its form; anything else is raw key or hash bytes.
    if isinstance(value, str) and "-" in value:
        return value
    return _coerce_bytes(value)


HexBytes = Annotated[bytes, BeforeValidator(_coerce_bytes)]
AddressValue = Annotated[Union[bytes, str], BeforeValidator(_coerce_address)]
U32 = Annotated[int, Field(ge=0, le=0xFFFFFFFF)]
U64 = Annotated[int, Field(ge=0, le=0xFFFFFFFFFFFFFFFF)]


class DescriptionModel(BaseModel):
    """Base for every description model."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class OneOf(DescriptionModel):
    """
    Group of mutually exclusive variants.

    Unknown keys are kept so a description from a newer producer still
    parses; they never count as a set case.
    """

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, extra="allow")

    @property
    def case(self) -> Optional[str]:
        """Name of the variant that is set, or None."""
        for name in type(self).model_fields:
            if getattr(self, name) is not None:
                return name
        return None

    @model_validator(mode="after")
    def check_single_case(self) -> OneOf:
        set_cases = [name for name in type(self).model_fields if getattr(self, name) is not None]
        if len(set_cases) > 1:
            raise ValueError(f"Only one of {', '.join(set_cases)} may be set")
        return self


# Inputs


class SECP256k1TransferInput(DescriptionModel):
    amount: U64 = 0
    address_indices: List[U32] = Field(default_factory=list)


class TransactionInput(OneOf):
    secp_transfer_input: Optional[SECP256k1TransferInput] = None


class TransferableInput(DescriptionModel):
    tx_id: HexBytes = b""
    utxo_index: U32 = 0
    asset_id: HexBytes = b""
    spendable_addresses: List[AddressValue] = Field(default_factory=list)
    input: TransactionInput = Field(default_factory=TransactionInput)


# Outputs


class SECP256k1TransferOutput(DescriptionModel):
    amount: U64 = 0
    locktime: U64 = 0
    threshold: U32 = 0
    addresses: List[AddressValue] = Field(default_factory=list)


class SECP256k1MintOutput(DescriptionModel):
    locktime: U64 = 0
    threshold: U32 = 0
    addresses: List[AddressValue] = Field(default_factory=list)


class NFTTransferOutput(DescriptionModel):
    group_id: U32 = 0
    payload: HexBytes = b""
    locktime: U64 = 0
    threshold: U32 = 0
    addresses: List[AddressValue] = Field(default_factory=list)


class NFTMintOutput(DescriptionModel):
    group_id: U32 = 0
    locktime: U64 = 0
    threshold: U32 = 0
    addresses: List[AddressValue] = Field(default_factory=list)


class TransactionOutput(OneOf):
    secp_transfer_output: Optional[SECP256k1TransferOutput] = None
    secp_mint_output: Optional[SECP256k1MintOutput] = None
    nft_transfer_output: Optional[NFTTransferOutput] = None
    nft_mint_output: Optional[NFTMintOutput] = None


class TransferableOutput(DescriptionModel):
    asset_id: HexBytes = b""
    output: TransactionOutput = Field(default_factory=TransactionOutput)


# Operations


class UTXOID(DescriptionModel):
    tx_id: HexBytes = b""
    utxo_index: U32 = 0


class SECP256k1MintOperation(DescriptionModel):
    address_indices: List[U32] = Field(default_factory=list)
    mint_output: SECP256k1MintOutput = Field(default_factory=SECP256k1MintOutput)
    transfer_output: SECP256k1TransferOutput = Field(default_factory=SECP256k1TransferOutput)


class NFTMintOperationOutput(DescriptionModel):
    locktime: U64 = 0
    threshold: U32 = 0
    addresses: List[AddressValue] = Field(default_factory=list)


class NFTMintOperation(DescriptionModel):
    address_indices: List[U32] = Field(default_factory=list)
    group_id: U32 = 0
    payload: HexBytes = b""
    outputs: List[NFTMintOperationOutput] = Field(default_factory=list)


class NFTTransferOperation(DescriptionModel):
    address_indices: List[U32] = Field(default_factory=list)
    group_id: U32 = 0
    payload: HexBytes = b""
    locktime: U64 = 0
    threshold: U32 = 0
    addresses: List[AddressValue] = Field(default_factory=list)


class TransferOperation(OneOf):
    secp_mint_op: Optional[SECP256k1MintOperation] = None
    nft_mint_op: Optional[NFTMintOperation] = None
    nft_transfer_op: Optional[NFTTransferOperation] = None


class TransferableOp(DescriptionModel):
    asset_id: HexBytes = b""
    utxo_ids: List[UTXOID] = Field(default_factory=list)
    transfer_op: TransferOperation = Field(default_factory=TransferOperation)


# Transactions


class InitialState(DescriptionModel):
    fx_id: U32 = 0
    outputs: List[TransactionOutput] = Field(default_factory=list)


class BaseTx(DescriptionModel):
    type_id: U32 = 0
    network_id: U32 = 0
    blockchain_id: HexBytes = b""
    outputs: List[TransferableOutput] = Field(default_factory=list)
    inputs: List[TransferableInput] = Field(default_factory=list)
    memo: HexBytes = b""


class CreateAssetTx(DescriptionModel):
    base_tx: BaseTx = Field(default_factory=BaseTx)
    name: str = ""
    symbol: str = ""
    denomination: Annotated[int, Field(ge=0, le=0xFF)] = 0
    initial_states: List[InitialState] = Field(default_factory=list)


class ExportTx(DescriptionModel):
    base_tx: BaseTx = Field(default_factory=BaseTx)
    destination_chain: HexBytes = b""
    outs: List[TransferableOutput] = Field(default_factory=list)


class ImportTx(DescriptionModel):
    base_tx: BaseTx = Field(default_factory=BaseTx)
    source_chain: HexBytes = b""
    ins: List[TransferableInput] = Field(default_factory=list)


class OperationTx(DescriptionModel):
    base_tx: BaseTx = Field(default_factory=BaseTx)
    ops: List[TransferableOp] = Field(default_factory=list)


class UnsignedTx(OneOf):
    base_tx: Optional[BaseTx] = None
    create_asset_tx: Optional[CreateAssetTx] = None
    export_tx: Optional[ExportTx] = None
    import_tx: Optional[ImportTx] = None
    operation_tx: Optional[OperationTx] = None


class SigningInput(DescriptionModel):
    private_keys: List[HexBytes] = Field(default_factory=list)
    input_tx: UnsignedTx = Field(default_factory=UnsignedTx)


class SigningOutput(DescriptionModel):
    """Signed transaction bytes; empty when signing was refused."""

    encoded: bytes = b""
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return bool(self.encoded)


__all__ = [
    "HexBytes",
    "SECP256k1TransferInput",
    "TransactionInput",
    "TransferableInput",
    "SECP256k1TransferOutput",
    "SECP256k1MintOutput",
    "NFTTransferOutput",
    "NFTMintOutput",
    "TransactionOutput",
    "TransferableOutput",
    "UTXOID",
    "SECP256k1MintOperation",
    "NFTMintOperationOutput",
    "NFTMintOperation",
    "NFTTransferOperation",
    "TransferOperation",
    "TransferableOp",
    "InitialState",
    "BaseTx",
    "CreateAssetTx",
    "ExportTx",
    "ImportTx",
    "OperationTx",
    "UnsignedTx",
    "SigningInput",
    "SigningOutput",
]
