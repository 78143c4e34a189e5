"""
Description to model assembly.

Stateless mapping from the pydantic description (``schema``) to the typed
transaction model (``tx``): one function per variant family and one per
transaction kind, composed by ``build_transaction``.

List mappers never raise. An unset or unknown variant anywhere inside a
list element discards the whole list and the mapper returns an empty list.
The transaction builders treat a non-empty description list that maps to
an empty list as fatal and raise UnsupportedVariantError, which the signer
turns into an empty result.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, List, Sequence, TypeVar, Union

from . import schema
from .address import Address
from .constants import ADDRESS_HASH_LEN, FeatureExtension
from .runtime.errors import AvalancheError, ErrorCode, UnsupportedVariantError
from .tx import (
    UTXOID,
    BaseTransaction,
    CreateAssetTransaction,
    ExportTransaction,
    ImportTransaction,
    InitialState,
    NFTMintOperation,
    NFTMintOperationOutput,
    NFTMintOutput,
    NFTTransferOperation,
    NFTTransferOutput,
    OperationTransaction,
    SECP256k1MintOperation,
    SECP256k1MintOutput,
    SECP256k1TransferInput,
    SECP256k1TransferOutput,
    TransactionOutput,
    TransferableInput,
    TransferableOp,
    TransferableOutput,
    UnsignedTransaction,
)

logger = logging.getLogger(__name__)

S = TypeVar("S")
T = TypeVar("T")


def _map_all(kind: str, items: Sequence[S], convert: Callable[[S], T]) -> List[T]:
    """Convert every item, or return [] if any item is unsupported."""
    result = []
    for position, item in enumerate(items):
        try:
            result.append(convert(item))
        except AvalancheError as e:
            logger.warning(f"Discarding {kind} list: element {position} rejected: {e}")
            return []
    return result


def _require_mapped(kind: str, described: Sequence, mapped: Sequence, code: ErrorCode) -> None:
    if described and not mapped:
        raise UnsupportedVariantError(f"Unsupported {kind} in description", code, {"count": len(described)})


# Addresses


def struct_to_address(value: Union[bytes, str]) -> Address:
    """
    Map one address description to an Address.

    Accepts a 33/65-byte public key, a 20-byte raw hash, or address text.

    Raises:
        InvalidAddressError: If the value is none of those
    """
    if isinstance(value, str):
        return Address.from_string(value)
    if len(value) == ADDRESS_HASH_LEN:
        return Address(value)
    return Address.from_public_key(value)


def struct_to_addresses(values: Sequence[Union[bytes, str]]) -> List[Address]:
    """Map address descriptions, raising on the first invalid one."""
    return [struct_to_address(value) for value in values]


# Inputs


def struct_to_input(input_struct: schema.TransferableInput) -> TransferableInput:
    """
    Map one transferable input.

    Raises:
        UnsupportedVariantError: If the input variant is unset or unknown
    """
    case = input_struct.input.case
    if case == "secp_transfer_input":
        secp = input_struct.input.secp_transfer_input
        transaction_input = SECP256k1TransferInput(secp.amount, tuple(secp.address_indices))
    else:
        raise UnsupportedVariantError(
            "Unsupported transaction input", ErrorCode.UNSUPPORTED_INPUT, {"case": case}
        )
    return TransferableInput(
        tx_id=input_struct.tx_id,
        utxo_index=input_struct.utxo_index,
        asset_id=input_struct.asset_id,
        input=transaction_input,
        spendable_addresses=tuple(struct_to_addresses(input_struct.spendable_addresses)),
    )


def struct_to_inputs(input_structs: Sequence[schema.TransferableInput]) -> List[TransferableInput]:
    """Map inputs in order; [] if any input is unsupported."""
    return _map_all("input", input_structs, struct_to_input)


# Outputs


def extract_transfer_output(output_struct: schema.TransactionOutput) -> TransactionOutput:
    """
    Map one output variant.

    Raises:
        UnsupportedVariantError: If the output variant is unset or unknown
    """
    case = output_struct.case
    if case == "secp_transfer_output":
        out = output_struct.secp_transfer_output
        return SECP256k1TransferOutput(out.amount, out.locktime, out.threshold,
                                       tuple(struct_to_addresses(out.addresses)))
    if case == "secp_mint_output":
        out = output_struct.secp_mint_output
        return SECP256k1MintOutput(out.locktime, out.threshold, tuple(struct_to_addresses(out.addresses)))
    if case == "nft_transfer_output":
        out = output_struct.nft_transfer_output
        return NFTTransferOutput(out.group_id, out.payload, out.locktime, out.threshold,
                                 tuple(struct_to_addresses(out.addresses)))
    if case == "nft_mint_output":
        out = output_struct.nft_mint_output
        return NFTMintOutput(out.group_id, out.locktime, out.threshold, tuple(struct_to_addresses(out.addresses)))
    raise UnsupportedVariantError("Unsupported transaction output", ErrorCode.UNSUPPORTED_OUTPUT, {"case": case})


def struct_to_output(output_struct: schema.TransferableOutput) -> TransferableOutput:
    return TransferableOutput(output_struct.asset_id, extract_transfer_output(output_struct.output))


def struct_to_outputs(output_structs: Sequence[schema.TransferableOutput]) -> List[TransferableOutput]:
    """Map outputs in order; [] if any output is unsupported."""
    return _map_all("output", output_structs, struct_to_output)


def extract_outputs_from_initial_state(state_struct: schema.InitialState) -> List[TransactionOutput]:
    """Map the outputs of one initial state; [] if any output is unsupported."""
    return _map_all("initial state output", state_struct.outputs, extract_transfer_output)


def struct_to_initial_state(state_struct: schema.InitialState) -> InitialState:
    """
    Map one initial state.

    Raises:
        UnsupportedVariantError: If the fx id is unknown or an output is unsupported
    """
    try:
        fx_id = FeatureExtension(state_struct.fx_id)
    except ValueError:
        raise UnsupportedVariantError(
            "Unsupported feature extension", ErrorCode.UNSUPPORTED_FX, {"fx_id": state_struct.fx_id}
        ) from None
    outputs = extract_outputs_from_initial_state(state_struct)
    _require_mapped("initial state output", state_struct.outputs, outputs, ErrorCode.UNSUPPORTED_OUTPUT)
    return InitialState(fx_id, outputs)


def struct_to_initial_states(state_structs: Sequence[schema.InitialState]) -> List[InitialState]:
    """Map initial states; [] if any state is unsupported."""
    return _map_all("initial state", state_structs, struct_to_initial_state)


# Operations


def _secp_mint_op(op: schema.SECP256k1MintOperation) -> SECP256k1MintOperation:
    mint = op.mint_output
    transfer = op.transfer_output
    return SECP256k1MintOperation(
        address_indices=tuple(op.address_indices),
        mint_output=SECP256k1MintOutput(mint.locktime, mint.threshold, tuple(struct_to_addresses(mint.addresses))),
        transfer_output=SECP256k1TransferOutput(transfer.amount, transfer.locktime, transfer.threshold,
                                                tuple(struct_to_addresses(transfer.addresses))),
    )


def _nft_mint_op(op: schema.NFTMintOperation) -> NFTMintOperation:
    outputs = tuple(
        NFTMintOperationOutput(out.locktime, out.threshold, tuple(struct_to_addresses(out.addresses)))
        for out in op.outputs
    )
    return NFTMintOperation(tuple(op.address_indices), op.group_id, op.payload, outputs)


def _nft_transfer_op(op: schema.NFTTransferOperation) -> NFTTransferOperation:
    output = NFTTransferOutput(op.group_id, op.payload, op.locktime, op.threshold,
                               tuple(struct_to_addresses(op.addresses)))
    return NFTTransferOperation(tuple(op.address_indices), output)


_OPERATION_MAPPERS: Dict[str, Callable] = {
    "secp_mint_op": _secp_mint_op,
    "nft_mint_op": _nft_mint_op,
    "nft_transfer_op": _nft_transfer_op,
}


def struct_to_operation(op_struct: schema.TransferableOp) -> TransferableOp:
    """
    Map one transferable operation.

    Raises:
        UnsupportedVariantError: If the operation variant is unset or unknown
    """
    case = op_struct.transfer_op.case
    mapper = _OPERATION_MAPPERS.get(case)
    if mapper is None:
        raise UnsupportedVariantError(
            "Unsupported transfer operation", ErrorCode.UNSUPPORTED_OPERATION, {"case": case}
        )
    utxo_ids = tuple(UTXOID(utxo.tx_id, utxo.utxo_index) for utxo in op_struct.utxo_ids)
    return TransferableOp(op_struct.asset_id, utxo_ids, mapper(getattr(op_struct.transfer_op, case)))


def struct_to_operations(op_structs: Sequence[schema.TransferableOp]) -> List[TransferableOp]:
    """Map operations in order; [] if any operation is unsupported."""
    return _map_all("operation", op_structs, struct_to_operation)


# Transactions


def struct_to_base_tx(tx_struct: schema.BaseTx) -> BaseTransaction:
    """
    Map the base fields shared by every transaction kind.

    Raises:
        UnsupportedVariantError: If any input or output is unsupported
    """
    outputs = struct_to_outputs(tx_struct.outputs)
    _require_mapped("output", tx_struct.outputs, outputs, ErrorCode.UNSUPPORTED_OUTPUT)
    inputs = struct_to_inputs(tx_struct.inputs)
    _require_mapped("input", tx_struct.inputs, inputs, ErrorCode.UNSUPPORTED_INPUT)
    return BaseTransaction(
        type_id=tx_struct.type_id,
        network_id=tx_struct.network_id,
        blockchain_id=tx_struct.blockchain_id,
        inputs=tuple(inputs),
        outputs=tuple(outputs),
        memo=tx_struct.memo,
    )


def build_base_tx(tx_struct: schema.BaseTx) -> BaseTransaction:
    return struct_to_base_tx(tx_struct)


def build_create_asset_tx(tx_struct: schema.CreateAssetTx) -> CreateAssetTransaction:
    base = struct_to_base_tx(tx_struct.base_tx)
    states = struct_to_initial_states(tx_struct.initial_states)
    _require_mapped("initial state", tx_struct.initial_states, states, ErrorCode.UNSUPPORTED_OUTPUT)
    return CreateAssetTransaction(
        base=base,
        name=tx_struct.name,
        symbol=tx_struct.symbol,
        denomination=tx_struct.denomination,
        initial_states=tuple(states),
    )


def build_export_tx(tx_struct: schema.ExportTx) -> ExportTransaction:
    base = struct_to_base_tx(tx_struct.base_tx)
    exports = struct_to_outputs(tx_struct.outs)
    _require_mapped("exported output", tx_struct.outs, exports, ErrorCode.UNSUPPORTED_OUTPUT)
    return ExportTransaction(base=base, destination_chain=tx_struct.destination_chain,
                             exported_outputs=tuple(exports))


def build_import_tx(tx_struct: schema.ImportTx) -> ImportTransaction:
    base = struct_to_base_tx(tx_struct.base_tx)
    imports = struct_to_inputs(tx_struct.ins)
    _require_mapped("imported input", tx_struct.ins, imports, ErrorCode.UNSUPPORTED_INPUT)
    return ImportTransaction(base=base, source_chain=tx_struct.source_chain, imported_inputs=tuple(imports))


def build_operation_tx(tx_struct: schema.OperationTx) -> OperationTransaction:
    base = struct_to_base_tx(tx_struct.base_tx)
    ops = struct_to_operations(tx_struct.ops)
    _require_mapped("operation", tx_struct.ops, ops, ErrorCode.UNSUPPORTED_OPERATION)
    return OperationTransaction(base=base, operations=tuple(ops))


_TRANSACTION_BUILDERS: Dict[str, Callable] = {
    "base_tx": build_base_tx,
    "create_asset_tx": build_create_asset_tx,
    "export_tx": build_export_tx,
    "import_tx": build_import_tx,
    "operation_tx": build_operation_tx,
}


def build_transaction(unsigned_tx: schema.UnsignedTx) -> UnsignedTransaction:
    """
    Build the typed transaction for whichever kind the description carries.

    Raises:
        UnsupportedVariantError: If no kind is set or any nested variant is unsupported
    """
    case = unsigned_tx.case
    builder = _TRANSACTION_BUILDERS.get(case)
    if builder is None:
        raise UnsupportedVariantError("Transaction kind not set", ErrorCode.UNSUPPORTED_TRANSACTION, {"case": case})
    transaction = builder(getattr(unsigned_tx, case))
    logger.debug(f"Assembled {type(transaction).__name__} with {len(transaction.signable_inputs())} signable inputs")
    return transaction


__all__ = [
    "struct_to_address",
    "struct_to_addresses",
    "struct_to_input",
    "struct_to_inputs",
    "extract_transfer_output",
    "struct_to_output",
    "struct_to_outputs",
    "extract_outputs_from_initial_state",
    "struct_to_initial_state",
    "struct_to_initial_states",
    "struct_to_operation",
    "struct_to_operations",
    "struct_to_base_tx",
    "build_base_tx",
    "build_create_asset_tx",
    "build_export_tx",
    "build_import_tx",
    "build_operation_tx",
    "build_transaction",
]
