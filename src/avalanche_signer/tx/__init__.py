"""
Typed X-chain transaction model.

Each node owns its canonical encoding through ``encode(writer)``.
"""

from .credentials import Credential, NFTCredential, SECP256k1Credential
from .initial_state import InitialState
from .inputs import SECP256k1TransferInput, TransactionInput, TransferableInput
from .operations import (
    UTXOID,
    NFTMintOperation,
    NFTMintOperationOutput,
    NFTTransferOperation,
    SECP256k1MintOperation,
    TransferableOp,
    TransferOperation,
)
from .outputs import (
    NFTMintOutput,
    NFTTransferOutput,
    SECP256k1MintOutput,
    SECP256k1TransferOutput,
    TransactionOutput,
    TransferableOutput,
)
from .transactions import (
    BaseTransaction,
    CreateAssetTransaction,
    ExportTransaction,
    ImportTransaction,
    OperationTransaction,
    SignedTransaction,
    UnsignedTransaction,
)

__all__ = [
    "Credential",
    "NFTCredential",
    "SECP256k1Credential",
    "InitialState",
    "SECP256k1TransferInput",
    "TransactionInput",
    "TransferableInput",
    "UTXOID",
    "NFTMintOperation",
    "NFTMintOperationOutput",
    "NFTTransferOperation",
    "SECP256k1MintOperation",
    "TransferableOp",
    "TransferOperation",
    "NFTMintOutput",
    "NFTTransferOutput",
    "SECP256k1MintOutput",
    "SECP256k1TransferOutput",
    "TransactionOutput",
    "TransferableOutput",
    "BaseTransaction",
    "CreateAssetTransaction",
    "ExportTransaction",
    "ImportTransaction",
    "OperationTransaction",
    "SignedTransaction",
    "UnsignedTransaction",
]
