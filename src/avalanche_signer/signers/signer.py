"""
Credential builder and signer for X-chain transactions.

Signing is a single pass:

1. Encode the unsigned transaction behind the codec id and hash it with
   SHA-256. The digest is the same for every input.
2. For each signable input, in order, sort its spendable addresses by raw
   hash, resolve every address index against that sorted list, and collect
   a recoverable signature from every supplied key whose address matches.
   Keys that match nothing are skipped silently.
3. Encode the signed transaction: unsigned body plus one credential per
   input.

An unsupported input, an address index out of range, or any other error
aborts the whole call; the public entry points then return empty bytes.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Union

from ..address import Address
from ..assembler import build_transaction
from ..codec.encoder import encode_signed, hash_for_signing
from ..crypto.secp256k1 import Secp256k1PrivateKey
from ..runtime.errors import AvalancheError, ErrorCode, SignerIndexError, UnsupportedVariantError
from ..schema import SigningInput, SigningOutput
from ..tx import (
    Credential,
    SECP256k1Credential,
    SECP256k1TransferInput,
    SignedTransaction,
    TransferableInput,
    UnsignedTransaction,
)

logger = logging.getLogger(__name__)

PrivateKeyLike = Union[bytes, Secp256k1PrivateKey]


class Signer:
    """
    Signs X-chain transactions with secp256k1 keys.

    Stateless; every method is a pure function of its arguments.
    """

    @staticmethod
    def sign(signing_input: Union[SigningInput, Dict[str, Any]]) -> SigningOutput:
        """
        Sign a described transaction.

        Args:
            signing_input: Private keys plus an unsigned transaction description

        Returns:
            SigningOutput with the signed bytes, or empty bytes and the
            diagnostic error code name when signing was refused
        """
        if not isinstance(signing_input, SigningInput):
            signing_input = SigningInput.model_validate(signing_input)

        try:
            keys = Signer._load_keys(signing_input.private_keys)
            transaction = build_transaction(signing_input.input_tx)
            encoded = Signer._sign(keys, transaction)
        except AvalancheError as e:
            logger.warning(f"Signing refused: {e}")
            return SigningOutput(encoded=b"", error=e.code.name)
        return SigningOutput(encoded=encoded)

    @staticmethod
    def sign_transaction(private_keys: Iterable[PrivateKeyLike], transaction: UnsignedTransaction) -> bytes:
        """
        Sign a typed transaction.

        Args:
            private_keys: Raw 32-byte keys or key objects
            transaction: Unsigned transaction

        Returns:
            Signed transaction bytes, or b"" if signing was refused
        """
        try:
            return Signer._sign(Signer._load_keys(private_keys), transaction)
        except AvalancheError as e:
            logger.warning(f"Signing refused: {e}")
            return b""

    @staticmethod
    def hash_for_signing(transaction: UnsignedTransaction) -> bytes:
        """SHA-256 of codec id + unsigned transaction body."""
        return hash_for_signing(transaction)

    @staticmethod
    def build_credentials(private_keys: Sequence[PrivateKeyLike], transaction: UnsignedTransaction,
                          digest: bytes) -> List[Credential]:
        """
        Build one credential per signable input.

        Args:
            private_keys: Candidate signing keys
            transaction: Unsigned transaction
            digest: Signing digest of the transaction

        Returns:
            Credentials aligned with transaction.signable_inputs()

        Raises:
            UnsupportedVariantError: If an input is not a SECP256k1 transfer input
            SignerIndexError: If an address index exceeds the spendable addresses
        """
        keyring = Signer._keyring(Signer._load_keys(private_keys))
        credentials = []
        for position, transferable_input in enumerate(transaction.signable_inputs()):
            signatures = Signer._input_signatures(position, transferable_input, keyring, digest)
            credentials.append(SECP256k1Credential(signatures))
        return credentials

    @staticmethod
    def _sign(keys: List[Secp256k1PrivateKey], transaction: UnsignedTransaction) -> bytes:
        digest = hash_for_signing(transaction)
        logger.debug(f"Signing digest {digest.hex()} for {type(transaction).__name__}")
        credentials = Signer.build_credentials(keys, transaction, digest)
        return encode_signed(SignedTransaction(transaction, credentials))

    @staticmethod
    def _load_keys(private_keys: Iterable[PrivateKeyLike]) -> List[Secp256k1PrivateKey]:
        return [
            key if isinstance(key, Secp256k1PrivateKey) else Secp256k1PrivateKey(key)
            for key in private_keys
        ]

    @staticmethod
    def _keyring(keys: Sequence[Secp256k1PrivateKey]) -> List[Tuple[Address, Secp256k1PrivateKey]]:
        return [(Address.from_public_key(key.public_key()), key) for key in keys]

    @staticmethod
    def _input_signatures(position: int, transferable_input: TransferableInput,
                          keyring: Sequence[Tuple[Address, Secp256k1PrivateKey]], digest: bytes) -> List[bytes]:
        if not isinstance(transferable_input.input, SECP256k1TransferInput):
            raise UnsupportedVariantError(
                "Only SECP256k1 transfer inputs can be signed",
                ErrorCode.UNSUPPORTED_INPUT,
                {"input": position, "type": type(transferable_input.input).__name__},
            )

        addresses = transferable_input.sorted_spendable_addresses()
        signatures = []
        for signer_index in transferable_input.input.address_indices:
            if signer_index >= len(addresses):
                raise SignerIndexError(details={
                    "input": position, "index": signer_index, "addresses": len(addresses),
                })
            requested = addresses[signer_index]
            matched = False
            for address, key in keyring:
                if address == requested:
                    signatures.append(key.sign(digest))
                    matched = True
            if not matched:
                logger.debug(f"No key for {requested} required by input {position}")
        return signatures


__all__ = ["Signer"]
