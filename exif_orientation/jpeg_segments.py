# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
JPEG marker segment scanner

This module walks the marker segments at the head of a JPEG file and finds
the APP1 segment that carries Exif data. Only segment headers are read; the
walk stops before the entropy-coded image data.

Copyright 2025 DNAi inc.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from exif_orientation.byte_view import ByteView
from exif_orientation.exceptions import NotAJpegError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SegmentHeader:
    """Position and header fields of one marker segment."""
    offset: int
    marker: int
    length: int  # counts the length field itself, not the marker

    @property
    def end(self) -> int:
        return self.offset + 2 + self.length

    @property
    def tiff_header_offset(self) -> int:
        # marker (2) + length (2) + "Exif\0\0" (6)
        return self.offset + JPEGSegmentScanner.TIFF_HEADER_FROM_SEGMENT


class JPEGSegmentScanner:
    """
    Walks the JPEG marker-segment chain.

    Layout of an APPn segment (CIPA DC-008, 4.5.4):
    - marker (short), e.g. 0xFFE1 for APP1
    - length (short, big-endian) of the segment, excluding the marker
    - content; for Exif, "Exif\\0\\0" followed by a TIFF structure

    The Exif standard places APP1 right after SOI, but Photoshop and other
    writers emit APP0 (JFIF) or XMP APP1 segments first, so every segment up
    to SOS is considered.
    """

    # JPEG markers
    SOI = 0xFFD8  # Start of Image
    EOI = 0xFFD9  # End of Image
    SOS = 0xFFDA  # Start of Scan
    APP1 = 0xFFE1  # APP1 (Exif, XMP)
    FILL = 0xFFFF  # Fill byte before a marker

    EXIF_ID = b'Exif\x00\x00'
    FIRST_MARKER_OFFSET = 2
    SEGMENT_LENGTH_OFFSET = 2
    EXIF_ID_OFFSET = 4
    TIFF_HEADER_FROM_SEGMENT = 10

    def __init__(self, view: ByteView):
        """
        Initialize the scanner.

        Args:
            view: ByteView over the whole file

        Raises:
            NotAJpegError: If the data does not start with SOI
        """
        self.view = view
        if not self.is_jpeg(view):
            raise NotAJpegError()

    @classmethod
    def is_jpeg(cls, view: ByteView) -> bool:
        return len(view) >= 2 and view.read_u16(0, True) == cls.SOI

    def iter_segments(self) -> Iterator[SegmentHeader]:
        """
        Yield the header of each marker segment in file order.

        The walk ends at SOS or EOI, at the end of the buffer, or at the
        first malformed header. Each step moves forward by at least one
        byte, so the number of steps is capped by the buffer length.
        """
        view = self.view
        position = self.FIRST_MARKER_OFFSET

        for _ in range(len(view)):
            if position + 2 > len(view):
                logger.debug("Reached end of data at offset %d", position)
                return

            if view.read_u8(position) != 0xFF:
                logger.warning("Expected a marker at offset %d, found 0x%02x",
                               position, view.read_u8(position))
                return

            marker = view.read_u16(position, True)
            if marker == self.FILL:
                position += 1
                continue
            if marker in (self.SOS, self.EOI):
                logger.debug("Reached marker 0x%04x at offset %d", marker, position)
                return

            if position + 4 > len(view):
                logger.debug("Segment header at offset %d is truncated", position)
                return
            length = view.read_u16(position + self.SEGMENT_LENGTH_OFFSET, True)
            if length < 2:
                logger.warning("Segment 0x%04x at offset %d has invalid length %d",
                               marker, position, length)
                return

            logger.debug("Segment 0x%04x at offset %d, length %d", marker, position, length)
            yield SegmentHeader(position, marker, length)
            position += 2 + length

    def is_exif_segment(self, segment: SegmentHeader) -> bool:
        if segment.marker != self.APP1:
            return False
        id_offset = segment.offset + self.EXIF_ID_OFFSET
        if id_offset + len(self.EXIF_ID) > len(self.view):
            return False
        return self.view.read_bytes(id_offset, len(self.EXIF_ID)) == self.EXIF_ID

    def find_exif_segment(self) -> Optional[SegmentHeader]:
        """
        Find the first APP1 segment with an Exif identifier.

        Non-Exif APP1 segments (XMP) are skipped like any other segment.

        Returns:
            The Exif segment header, or None if the file has none
        """
        for segment in self.iter_segments():
            if self.is_exif_segment(segment):
                return segment

        logger.warning("APP1 not found")
        return None
