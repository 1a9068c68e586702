# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
exif_orientation - Read and rewrite the Exif orientation of JPEG files

Reads the Orientation tag straight from the JPEG marker stream and the
embedded TIFF structure, without decoding pixel data. Updates rewrite the
two value bytes in place; the file length never changes.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from exif_orientation.exceptions import (
    ExifOrientationError,
    MetadataReadError,
    MetadataWriteError,
    MalformedTiffHeaderError,
    OutOfBoundsError,
    ReadOnlyBufferError,
    InvalidOrientationCodeError,
    NotAJpegError,
    MetadataNotFoundError,
    ExifAbsentError,
    OrientationTagMissingError,
)
from exif_orientation.orientation import (
    OrientationCode,
    OrientationInfo,
    OrientationField,
    read_orientation_code,
    get_orientation,
    get_orientation_info,
    update_orientation_code,
    locate_orientation_field,
    describe_orientation,
    has_orientation,
    read_orientation_code_from_file,
    get_orientation_from_file,
    update_orientation_code_in_file,
)

__all__ = [
    "ExifOrientationError",
    "MetadataReadError",
    "MetadataWriteError",
    "MalformedTiffHeaderError",
    "OutOfBoundsError",
    "ReadOnlyBufferError",
    "InvalidOrientationCodeError",
    "NotAJpegError",
    "MetadataNotFoundError",
    "ExifAbsentError",
    "OrientationTagMissingError",
    "OrientationCode",
    "OrientationInfo",
    "OrientationField",
    "read_orientation_code",
    "get_orientation",
    "get_orientation_info",
    "update_orientation_code",
    "locate_orientation_field",
    "describe_orientation",
    "has_orientation",
    "read_orientation_code_from_file",
    "get_orientation_from_file",
    "update_orientation_code_in_file",
]
