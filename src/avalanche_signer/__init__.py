"""
Avalanche X-chain transaction signer

Builds canonical AVM transaction bytes from an unsigned transaction
description, derives one secp256k1 credential per input and returns the
signed transaction bytes.
"""

from .address import Address
from .assembler import build_transaction
from .codec import BinaryWriter, encode_signed, encode_unsigned, hash_for_signing
from .constants import CODEC_ID, FeatureExtension
from .crypto import Secp256k1PrivateKey, Secp256k1PublicKey
from .networks import FUJI, LOCAL, MAINNET, NetworkParams, get_network
from .runtime.errors import *
from .schema import SigningInput, SigningOutput, UnsignedTx
from .signers import Signer
from .tx import *

__version__ = "0.1.0"
__all__ = [
    "Address",
    "BinaryWriter",
    "CODEC_ID",
    "FeatureExtension",
    "Secp256k1PrivateKey",
    "Secp256k1PublicKey",
    "NetworkParams",
    "MAINNET",
    "FUJI",
    "LOCAL",
    "get_network",
    "SigningInput",
    "SigningOutput",
    "UnsignedTx",
    "Signer",
    "build_transaction",
    "encode_signed",
    "encode_unsigned",
    "hash_for_signing",

    # All errors and transaction model types are included via *
]
