# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
IFD field scanner

This module enumerates the 12-byte entries of a TIFF Image File Directory
and finds an entry by tag.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional

from exif_orientation.byte_view import ByteView


class ExifTagType(IntEnum):
    """EXIF tag data types"""
    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    UNDEFINED = 7
    SLONG = 9
    SRATIONAL = 10


@dataclass(frozen=True)
class IFDEntry:
    """One IFD entry. offset is the absolute start of the 12-byte record."""
    index: int
    offset: int
    tag: int
    tag_type: int
    count: int

    @property
    def value_offset(self) -> int:
        return self.offset + IFDFieldScanner.VALUE_OFFSET


class IFDFieldScanner:
    """
    Scans an IFD (CIPA DC-008, 4.6.2):
    - number of entries (short)
    - entries, 12 bytes each:
      - tag (short)
      - type (short)
      - count (long)
      - value, or offset to the value (long)
    - offset of the next IFD (long)
    """

    ENTRY_COUNT_SIZE = 2
    ENTRY_SIZE = 12
    TAG_OFFSET = 0
    TYPE_OFFSET = 2
    COUNT_OFFSET = 4
    VALUE_OFFSET = 8

    def __init__(self, view: ByteView, ifd_offset: int, big_endian: bool):
        self.view = view
        self.ifd_offset = ifd_offset
        self.big_endian = big_endian

    def iter_entries(self) -> Iterator[IFDEntry]:
        """
        Yield the IFD entries in table order.

        Raises:
            OutOfBoundsError: If the count or an entry lies past the buffer
        """
        view = self.view
        num_entries = view.read_u16(self.ifd_offset, self.big_endian)
        entries_start = self.ifd_offset + self.ENTRY_COUNT_SIZE

        for index in range(num_entries):
            entry_offset = entries_start + index * self.ENTRY_SIZE
            yield IFDEntry(
                index=index,
                offset=entry_offset,
                tag=view.read_u16(entry_offset + self.TAG_OFFSET, self.big_endian),
                tag_type=view.read_u16(entry_offset + self.TYPE_OFFSET, self.big_endian),
                count=view.read_u32(entry_offset + self.COUNT_OFFSET, self.big_endian),
            )

    def find_entry(self, tag: int) -> Optional[IFDEntry]:
        """
        Return the first entry with the given tag, or None.

        A valid file has at most one entry per tag, so the first match is
        the only match.
        """
        for entry in self.iter_entries():
            if entry.tag == tag:
                return entry
        return None
