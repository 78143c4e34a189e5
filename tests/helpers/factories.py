"""
Test factories for creating test data consistently.

Provides deterministic keys, ids and minimal descriptions/models of every
transaction kind.
"""

from __future__ import annotations
import hashlib
from typing import Any, Dict, List, Optional, Sequence

from avalanche_signer.address import Address
from avalanche_signer.crypto.secp256k1 import Secp256k1PrivateKey
from avalanche_signer.tx import (
    BaseTransaction,
    SECP256k1TransferInput,
    SECP256k1TransferOutput,
    TransferableInput,
    TransferableOutput,
)

BLOCKCHAIN_ID = bytes(range(32))
ASSET_ID = b"\xaa" * 32
TX_ID = b"\x11" * 32


def mk_private_key(seed: int) -> Secp256k1PrivateKey:
    """
    Create a deterministic secp256k1 private key for testing.

    Args:
        seed: Integer seed; equal seeds give equal keys

    Returns:
        Private key derived from sha256 of the seed
    """
    return Secp256k1PrivateKey(hashlib.sha256(f"avalanche-test-key-{seed}".encode()).digest())


def mk_address(fill: int) -> Address:
    """Address whose 20-byte hash repeats a single byte."""
    return Address(bytes([fill]) * 20)


def key_address(key: Secp256k1PrivateKey) -> Address:
    return Address.from_public_key(key.public_key())


def mk_transfer_output(amount: int = 1000, addresses: Sequence[Address] = (), threshold: int = 1,
                       locktime: int = 0) -> SECP256k1TransferOutput:
    return SECP256k1TransferOutput(amount, locktime, threshold, tuple(addresses))


def mk_input(spendable: Sequence[Address], indices: Sequence[int] = (0,), amount: int = 2000,
             tx_id: bytes = TX_ID, utxo_index: int = 0) -> TransferableInput:
    return TransferableInput(
        tx_id=tx_id,
        utxo_index=utxo_index,
        asset_id=ASSET_ID,
        input=SECP256k1TransferInput(amount, tuple(indices)),
        spendable_addresses=tuple(spendable),
    )


def mk_base_tx(inputs: Sequence[TransferableInput] = (), outputs: Optional[Sequence[TransferableOutput]] = None,
               memo: bytes = b"") -> BaseTransaction:
    if outputs is None:
        outputs = (TransferableOutput(ASSET_ID, mk_transfer_output(addresses=[mk_address(0x42)])),)
    return BaseTransaction(
        type_id=0,
        network_id=1,
        blockchain_id=BLOCKCHAIN_ID,
        inputs=tuple(inputs),
        outputs=tuple(outputs),
        memo=memo,
    )


def mk_input_description(spendable: Sequence[Any], indices: Sequence[int] = (0,),
                         amount: int = 2000, utxo_index: int = 0) -> Dict[str, Any]:
    return {
        "tx_id": TX_ID.hex(),
        "utxo_index": utxo_index,
        "asset_id": ASSET_ID.hex(),
        "spendable_addresses": list(spendable),
        "input": {"secp_transfer_input": {"amount": amount, "address_indices": list(indices)}},
    }


def mk_output_description(addresses: Sequence[Any], amount: int = 1000) -> Dict[str, Any]:
    return {
        "asset_id": ASSET_ID.hex(),
        "output": {
            "secp_transfer_output": {
                "amount": amount,
                "locktime": 0,
                "threshold": 1,
                "addresses": list(addresses),
            }
        },
    }


def mk_base_tx_description(inputs: List[Dict[str, Any]], outputs: Optional[List[Dict[str, Any]]] = None,
                           memo: str = "") -> Dict[str, Any]:
    if outputs is None:
        outputs = [mk_output_description([(b"\x42" * 20).hex()])]
    return {
        "type_id": 0,
        "network_id": 1,
        "blockchain_id": BLOCKCHAIN_ID.hex(),
        "outputs": outputs,
        "inputs": inputs,
        "memo": memo,
    }
