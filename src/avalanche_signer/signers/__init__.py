"""
Transaction signers.
"""

from .signer import Signer

__all__ = ["Signer"]
