"""
Binary Writer for the AVM codec.

Big-endian fixed-width primitives, fixed-length byte fields and
length-prefixed blobs. Every value is range checked so a malformed model
never produces a silently truncated encoding.
"""

import struct
from typing import List

from ..runtime.errors import EncodingError, ErrorCode


class BinaryWriter:
    """
    Append-only byte buffer with the AVM wire primitives.

    Maintains the encoding rules shared by every transaction node:
    big-endian integers, u32 counts for collections, no prefix on
    fixed-size ids and hashes.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def u8(self, v: int) -> None:
        """
        Write unsigned 8-bit integer.

        Args:
            v: Integer value to write (0-255)
        """
        self._bb.extend(self._pack('>B', v, 0xFF))

    def u16be(self, v: int) -> None:
        """
        Write unsigned 16-bit integer in big-endian format.

        Args:
            v: Integer value to write as 16-bit big-endian
        """
        self._bb.extend(self._pack('>H', v, 0xFFFF))

    def u32be(self, v: int) -> None:
        """
        Write unsigned 32-bit integer in big-endian format.

        Args:
            v: Integer value to write as 32-bit big-endian
        """
        self._bb.extend(self._pack('>I', v, 0xFFFFFFFF))

    def u64be(self, v: int) -> None:
        """
        Write unsigned 64-bit integer in big-endian format.

        Args:
            v: Integer value to write as 64-bit big-endian
        """
        self._bb.extend(self._pack('>Q', v, 0xFFFFFFFFFFFFFFFF))

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def fixed_bytes(self, v: bytes, length: int) -> None:
        """
        Write a fixed-size field (ids, address hashes, signatures).

        Args:
            v: Bytes to write
            length: Required length of v

        Raises:
            EncodingError: If v has a different length
        """
        if len(v) != length:
            raise EncodingError(
                f"Expected {length} bytes, got {len(v)}",
                ErrorCode.INVALID_LENGTH,
                {"expected": length, "actual": len(v)},
            )
        self._bb.extend(v)

    def len_prefixed_bytes(self, v: bytes) -> None:
        """
        Write bytes with a u32 big-endian length prefix.

        Args:
            v: Bytes to write with length prefix
        """
        self.u32be(len(v))
        self.bytes(v)

    def string(self, s: str) -> None:
        """
        Write UTF-8 string with a u16 big-endian length prefix.

        Args:
            s: String to write with length prefix
        """
        b = s.encode('utf-8')
        self.u16be(len(b))
        self.bytes(b)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)

    def __len__(self) -> int:
        return len(self._bb)

    @staticmethod
    def _pack(fmt: str, v: int, limit: int) -> bytes:
        if not isinstance(v, int) or isinstance(v, bool) or v < 0 or v > limit:
            raise EncodingError(
                f"Value {v!r} does not fit format {fmt}",
                ErrorCode.VALUE_OUT_OF_RANGE,
                {"value": v, "max": limit},
            )
        return struct.pack(fmt, v)
