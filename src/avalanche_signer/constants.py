"""
Wire constants for the Avalanche X-chain codec.

Type ids match the AVM codec registration order.
"""

from enum import IntEnum

CODEC_ID = b"\x00\x00"

ID_LEN = 32
ADDRESS_HASH_LEN = 20
SIGNATURE_LEN = 65

AVAX_HRP = "avax"
SUPPORTED_CHAINS = ("X", "P")
DEFAULT_CHAIN = "X"


class TransactionInputTypeID(IntEnum):
    SECP_INPUT = 5


class TransactionOutputTypeID(IntEnum):
    SECP_MINT_OUTPUT = 6
    SECP_TRANSFER_OUTPUT = 7
    NFT_MINT_OUTPUT = 10
    NFT_TRANSFER_OUTPUT = 11


class TransactionOperationTypeID(IntEnum):
    SECP_MINT_OP = 8
    NFT_MINT_OP = 12
    NFT_TRANSFER_OP = 13


class CredentialTypeID(IntEnum):
    SECP_CREDENTIAL = 9
    NFT_CREDENTIAL = 14


class FeatureExtension(IntEnum):
    """Fx id selecting the output family of an initial state."""
    SECP256K1 = 0
    NFT = 1


__all__ = [
    "CODEC_ID",
    "ID_LEN",
    "ADDRESS_HASH_LEN",
    "SIGNATURE_LEN",
    "AVAX_HRP",
    "SUPPORTED_CHAINS",
    "DEFAULT_CHAIN",
    "TransactionInputTypeID",
    "TransactionOutputTypeID",
    "TransactionOperationTypeID",
    "CredentialTypeID",
    "FeatureExtension",
]
