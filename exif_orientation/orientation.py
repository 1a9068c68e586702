# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exif orientation reader and writer

This module composes the segment scanner, TIFF header reader and IFD scanner
to read the Orientation tag (0x0112) of a JPEG file, and to overwrite it in
place. The file length never changes: an update rewrites the two value bytes
of the existing entry.

Copyright 2025 DNAi inc.

See http://www.cipa.jp/std/documents/j/DC-008-2012_J.pdf
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import NamedTuple, Optional, Union

from exif_orientation.byte_view import BufferLike, ByteView
from exif_orientation.exceptions import (
    ExifAbsentError,
    InvalidOrientationCodeError,
    MetadataNotFoundError,
    NotAJpegError,
    OrientationTagMissingError,
)
from exif_orientation.ifd import ExifTagType, IFDFieldScanner
from exif_orientation.jpeg_segments import JPEGSegmentScanner
from exif_orientation.tiff_header import TiffHeaderReader

logger = logging.getLogger(__name__)

ORIENTATION_TAG = 0x0112


class OrientationCode(IntEnum):
    """Exif Orientation values, plus unknown for "not found"."""
    original = 1
    flipped = 2
    deg180 = 3
    deg180_flipped = 4
    deg90_flipped = 5
    deg90 = 6
    deg270_flipped = 7
    deg270 = 8
    unknown = -1


class OrientationInfo(NamedTuple):
    """Clockwise rotation in degrees, and whether the image is mirrored."""
    rotation: int
    flipped: bool


_ORIENTATION_INFO = (
    None,
    OrientationInfo(0, False),    # 1 original
    OrientationInfo(0, True),     # 2 flipped
    OrientationInfo(180, False),  # 3 deg180
    OrientationInfo(180, True),   # 4 deg180_flipped
    OrientationInfo(90, True),    # 5 deg90_flipped
    OrientationInfo(90, False),   # 6 deg90
    OrientationInfo(270, True),   # 7 deg270_flipped
    OrientationInfo(270, False),  # 8 deg270
)

_ORIENTATION_DESCRIPTIONS = (
    None,
    'Horizontal (normal)',
    'Mirror horizontal',
    'Rotate 180',
    'Mirror vertical',
    'Mirror horizontal and rotate 270 CW',
    'Rotate 90 CW',
    'Mirror horizontal and rotate 90 CW',
    'Rotate 270 CW',
)

PathLike = Union[str, Path]


def _is_valid_code(code: int) -> bool:
    return isinstance(code, int) and not isinstance(code, bool) and 1 <= code <= 8


@dataclass(frozen=True)
class OrientationField:
    """Where the Orientation value lives, and how to read it."""
    value_offset: int
    big_endian: bool
    field_type: int


def get_orientation_info(code: int) -> Optional[OrientationInfo]:
    """
    Converts an orientation code to rotation and flip information.

    Returns None for OrientationCode.unknown and any value outside 1..8.
    """
    if not _is_valid_code(code):
        return None
    return _ORIENTATION_INFO[code]


def describe_orientation(code: int) -> str:
    """Standard Exif wording for an orientation code, e.g. 'Rotate 90 CW'."""
    if not _is_valid_code(code):
        return 'Unknown'
    return _ORIENTATION_DESCRIPTIONS[code]


def _locate(view: ByteView) -> OrientationField:
    scanner = JPEGSegmentScanner(view)
    segment = scanner.find_exif_segment()
    if segment is None:
        raise ExifAbsentError()

    header = TiffHeaderReader(view).read(segment.tiff_header_offset)
    entry = IFDFieldScanner(view, header.ifd_offset, header.big_endian).find_entry(ORIENTATION_TAG)
    if entry is None:
        raise OrientationTagMissingError()

    if entry.tag_type != ExifTagType.SHORT:
        logger.warning("Orientation entry has type %d, expected SHORT", entry.tag_type)

    return OrientationField(
        value_offset=entry.value_offset,
        big_endian=header.big_endian,
        field_type=entry.tag_type,
    )


def locate_orientation_field(data: BufferLike) -> OrientationField:
    """
    Find the byte offset and byte order of the Orientation value.

    Both the read and the update path go through this function, so they
    always agree on where the field lives.

    Args:
        data: Complete JPEG file data

    Returns:
        Location of the 2-byte Orientation value

    Raises:
        NotAJpegError: If the data does not start with the SOI marker
        ExifAbsentError: If no Exif APP1 segment precedes the image data
        OrientationTagMissingError: If IFD0 has no Orientation entry
        MalformedTiffHeaderError: If the TIFF header is invalid
        OutOfBoundsError: If the Exif structure is truncated
    """
    with ByteView(data) as view:
        return _locate(view)


def read_orientation_code(data: BufferLike) -> OrientationCode:
    """
    Read the Exif orientation of a JPEG file.

    If the input is not a JPEG file with Exif containing orientation
    information, returns OrientationCode.unknown. A corrupt Exif structure
    still raises.

    Args:
        data: Complete JPEG file data

    Raises:
        MalformedTiffHeaderError: If the TIFF header is invalid
        OutOfBoundsError: If the Exif structure is truncated
    """
    with ByteView(data) as view:
        try:
            field = _locate(view)
        except NotAJpegError:
            logger.warning("Data is not a JPEG file")
            return OrientationCode.unknown
        except ExifAbsentError:
            return OrientationCode.unknown
        except OrientationTagMissingError:
            logger.warning("Rotation information was not found")
            return OrientationCode.unknown

        value = view.read_u16(field.value_offset, field.big_endian)

    if not _is_valid_code(value):
        logger.warning("Orientation value %d is not a valid Exif orientation", value)
        return OrientationCode.unknown
    return OrientationCode(value)


def get_orientation(data: BufferLike) -> Optional[OrientationInfo]:
    """
    Read rotation and flip information from a JPEG file.

    Returns None when the orientation is unknown.
    """
    return get_orientation_info(read_orientation_code(data))


def update_orientation_code(data: BufferLike, code: int) -> None:
    """
    Overwrite the Exif orientation of a JPEG file in place.

    Args:
        data: Complete JPEG file data, as a writable buffer (bytearray,
              writable memoryview)
        code: New orientation, 1..8

    Raises:
        InvalidOrientationCodeError: If code is not one of 1..8
        NotAJpegError: If the data does not start with the SOI marker
        ExifAbsentError: If the file has no Exif data
        OrientationTagMissingError: If the Exif data has no Orientation entry
        ReadOnlyBufferError: If data is immutable
        MalformedTiffHeaderError: If the TIFF header is invalid
        OutOfBoundsError: If the Exif structure is truncated
    """
    if not _is_valid_code(code):
        raise InvalidOrientationCodeError(f"Invalid orientation code: {code!r}")

    with ByteView(data) as view:
        field = _locate(view)
        view.write_u16(field.value_offset, int(code), field.big_endian)
    logger.debug("Wrote orientation %d at offset %d", int(code), field.value_offset)


def read_orientation_code_from_file(file_path: PathLike) -> OrientationCode:
    """Read the orientation code of a JPEG file on disk."""
    with open(file_path, 'rb') as f:
        file_data = f.read()
    return read_orientation_code(file_data)


def get_orientation_from_file(file_path: PathLike) -> Optional[OrientationInfo]:
    """Read rotation and flip information of a JPEG file on disk."""
    return get_orientation_info(read_orientation_code_from_file(file_path))


def update_orientation_code_in_file(
    file_path: PathLike,
    code: int,
    output_path: Optional[PathLike] = None
) -> None:
    """
    Rewrite the orientation of a JPEG file on disk.

    Args:
        file_path: Source JPEG file
        code: New orientation, 1..8
        output_path: Where to write the result; defaults to file_path

    Raises:
        The same errors as update_orientation_code. Nothing is written if the
        update fails.
    """
    with open(file_path, 'rb') as f:
        file_data = bytearray(f.read())

    update_orientation_code(file_data, code)

    with open(output_path or file_path, 'wb') as f:
        f.write(file_data)


def has_orientation(data: BufferLike) -> bool:
    """Return True if data is a JPEG with an Exif Orientation entry."""
    try:
        locate_orientation_field(data)
    except (NotAJpegError, MetadataNotFoundError):
        return False
    return True
