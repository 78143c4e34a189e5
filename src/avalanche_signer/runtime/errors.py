"""
Avalanche Signer Error Model

This module provides the error handling framework for the signer. Address
parsing raises these errors to its callers; the signing pipeline raises them
internally and collapses them to an empty result at its public boundary.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for encoding, address and signing failures."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    VALUE_OUT_OF_RANGE = 101
    INVALID_LENGTH = 102

    # Address errors (200-299)
    INVALID_ADDRESS = 200
    INVALID_CHAIN = 201
    INVALID_PUBLIC_KEY = 202

    # Description errors (300-399)
    UNSUPPORTED_TRANSACTION = 300
    UNSUPPORTED_INPUT = 301
    UNSUPPORTED_OUTPUT = 302
    UNSUPPORTED_OPERATION = 303
    UNSUPPORTED_FX = 304

    # Signing errors (400-499)
    SIGNER_INDEX_OUT_OF_RANGE = 400
    INVALID_KEY = 401
    SIGNING_FAILED = 402


class AvalancheError(Exception):
    """
    Base class for all signer errors.

    Carries a code plus optional details and cause. The signer reports the
    code name as its diagnostic.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize an error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)


class EncodingError(AvalancheError):
    """Value cannot be written in its wire representation."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidAddressError(AvalancheError, ValueError):
    """Address text or public key cannot be turned into an address."""

    def __init__(self, message: str = "Invalid address string", code: ErrorCode = ErrorCode.INVALID_ADDRESS,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class UnsupportedVariantError(AvalancheError):
    """Description carries an unset or unknown variant tag."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNSUPPORTED_TRANSACTION,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class SignerIndexError(AvalancheError):
    """Signer index does not exist in the sorted spendable address list."""

    def __init__(self, message: str = "Signer index out of range",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.SIGNER_INDEX_OUT_OF_RANGE, details, cause)


__all__ = [
    "ErrorCode",
    "AvalancheError",
    "EncodingError",
    "InvalidAddressError",
    "UnsupportedVariantError",
    "SignerIndexError",
]
