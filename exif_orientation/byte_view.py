# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Bounds-checked byte access

This module provides ByteView, a fixed-length window over a caller's buffer
that reads and writes little- or big-endian integers at arbitrary offsets.
Every access is checked against the buffer length before any bytes are
touched.

Copyright 2025 DNAi inc.
"""

import struct
from typing import Union

from exif_orientation.exceptions import OutOfBoundsError, ReadOnlyBufferError

BufferLike = Union[bytes, bytearray, memoryview]


class ByteView:
    """
    Bounds-aware accessor over a byte buffer.

    The view never copies the buffer: writes go straight to the caller's
    memory, so a ByteView over a bytearray updates that bytearray in place.
    Use it as a context manager to release the underlying memoryview (a
    bytearray cannot be resized while a view on it is alive).
    """

    def __init__(self, data: BufferLike):
        """
        Initialize the view.

        Args:
            data: Any object supporting the buffer protocol
        """
        view = memoryview(data)
        if view.format != 'B' or view.ndim != 1:
            view = view.cast('B')
        self._view = view

    def __len__(self) -> int:
        return self._view.nbytes

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False

    def release(self) -> None:
        """Release the underlying memoryview."""
        self._view.release()

    @property
    def readonly(self) -> bool:
        return self._view.readonly

    def _check(self, offset: int, width: int) -> None:
        if offset < 0 or offset + width > len(self):
            raise OutOfBoundsError(offset, width, len(self))

    @staticmethod
    def _prefix(big_endian: bool) -> str:
        return '>' if big_endian else '<'

    def read_u8(self, offset: int) -> int:
        self._check(offset, 1)
        return self._view[offset]

    def read_u16(self, offset: int, big_endian: bool) -> int:
        self._check(offset, 2)
        return struct.unpack_from(f'{self._prefix(big_endian)}H', self._view, offset)[0]

    def read_u32(self, offset: int, big_endian: bool) -> int:
        self._check(offset, 4)
        return struct.unpack_from(f'{self._prefix(big_endian)}I', self._view, offset)[0]

    def read_bytes(self, offset: int, length: int) -> bytes:
        self._check(offset, length)
        return self._view[offset:offset + length].tobytes()

    def write_u16(self, offset: int, value: int, big_endian: bool) -> None:
        """
        Write an unsigned 16-bit integer.

        Args:
            offset: Absolute byte offset
            value: Value in 0..0xFFFF
            big_endian: Byte order to write in

        Raises:
            OutOfBoundsError: If the two bytes do not fit in the buffer
            ReadOnlyBufferError: If the buffer is immutable
            ValueError: If value does not fit in 16 bits
        """
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"Value {value} does not fit in an unsigned 16-bit field")
        self._check(offset, 2)
        if self._view.readonly:
            raise ReadOnlyBufferError()
        struct.pack_into(f'{self._prefix(big_endian)}H', self._view, offset, value)
