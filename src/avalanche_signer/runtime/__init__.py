"""Runtime helpers for the Avalanche signer"""

from .errors import (
    ErrorCode,
    AvalancheError,
    EncodingError,
    InvalidAddressError,
    UnsupportedVariantError,
    SignerIndexError,
)

__all__ = [
    "ErrorCode",
    "AvalancheError",
    "EncodingError",
    "InvalidAddressError",
    "UnsupportedVariantError",
    "SignerIndexError",
]
