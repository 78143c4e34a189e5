"""
Credentials: the signatures attached to one transaction input.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple

from ..codec.writer import BinaryWriter
from ..constants import SIGNATURE_LEN, CredentialTypeID
from .fields import EncodedOrdering


@dataclass(frozen=True, eq=True)
class Credential(EncodedOrdering):
    """Signature bundle tagged with the scheme that produced it."""

    type_id: CredentialTypeID
    signatures: Tuple[bytes, ...]

    def __post_init__(self):
        object.__setattr__(self, "type_id", CredentialTypeID(self.type_id))
        object.__setattr__(self, "signatures", tuple(bytes(sig) for sig in self.signatures))

    def encode(self, writer: BinaryWriter) -> None:
        writer.u32be(self.type_id)
        writer.u32be(len(self.signatures))
        for signature in self.signatures:
            writer.fixed_bytes(signature, SIGNATURE_LEN)


class SECP256k1Credential(Credential):
    """Credential of recoverable secp256k1 signatures."""

    def __init__(self, signatures: Iterable[bytes]):
        super().__init__(CredentialTypeID.SECP_CREDENTIAL, tuple(signatures))


class NFTCredential(Credential):
    """Credential for NFT inputs; never produced by the signer."""

    def __init__(self, signatures: Iterable[bytes]):
        super().__init__(CredentialTypeID.NFT_CREDENTIAL, tuple(signatures))


__all__ = ["Credential", "SECP256k1Credential", "NFTCredential"]
