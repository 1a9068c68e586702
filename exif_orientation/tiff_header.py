# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
TIFF header reader

The Exif payload of an APP1 segment is a TIFF structure. This module reads
its 8-byte header to learn the byte order and the position of IFD0.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass

from exif_orientation.byte_view import ByteView
from exif_orientation.exceptions import MalformedTiffHeaderError


@dataclass(frozen=True)
class TiffHeader:
    """Parsed TIFF header. All offsets are absolute within the file."""
    offset: int
    big_endian: bool
    ifd_offset: int


class TiffHeaderReader:
    """
    Reads a TIFF header (CIPA DC-008, 4.5.2):
    - byte order (short): 0x4949 "II" little-endian, 0x4D4D "MM" big-endian
    - 42 (0x002A) (short), in that byte order
    - offset of IFD0 (long), from the header start; minimum 8
    """

    ORDER_LITTLE_ENDIAN = 0x4949
    ORDER_BIG_ENDIAN = 0x4D4D
    MAGIC = 0x002A
    HEADER_SIZE = 8

    BYTE_ORDER_OFFSET = 0
    MAGIC_OFFSET = 2
    IFD_OFFSET_OFFSET = 4

    def __init__(self, view: ByteView):
        self.view = view

    def read(self, offset: int) -> TiffHeader:
        """
        Parse the header starting at offset.

        Raises:
            MalformedTiffHeaderError: On an unknown byte order, a wrong magic
                                      number, or an IFD0 offset inside the header
            OutOfBoundsError: If the header is truncated
        """
        order = self.view.read_u16(offset + self.BYTE_ORDER_OFFSET, True)
        if order == self.ORDER_LITTLE_ENDIAN:
            big_endian = False
        elif order == self.ORDER_BIG_ENDIAN:
            big_endian = True
        else:
            raise MalformedTiffHeaderError(
                f"Invalid TIFF header: unknown byte order 0x{order:04x}"
            )

        magic = self.view.read_u16(offset + self.MAGIC_OFFSET, big_endian)
        if magic != self.MAGIC:
            raise MalformedTiffHeaderError(
                f"Invalid TIFF header: big_endian {big_endian}, assertion: 0x{magic:04x}"
            )

        distance = self.view.read_u32(offset + self.IFD_OFFSET_OFFSET, big_endian)
        if distance < self.HEADER_SIZE:
            raise MalformedTiffHeaderError(
                f"Invalid TIFF header: IFD0 offset {distance} points into the header"
            )

        return TiffHeader(offset=offset, big_endian=big_endian, ifd_offset=offset + distance)
