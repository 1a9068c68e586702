# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for exif_orientation

This module defines the errors raised while locating, reading and
rewriting the Exif Orientation field of a JPEG file.

Copyright 2025 DNAi inc.
"""


class ExifOrientationError(Exception):
    """
    Base exception for all exif_orientation errors.

    All exceptions raised by this package inherit from this class, allowing
    catch-all error handling around any read or update call.
    """
    default_message = ""

    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message. Falls back to the class's
                     fixed message when empty.
        """
        self.message = message or self.default_message
        super().__init__(self.message)


class MetadataReadError(ExifOrientationError):
    """
    Raised when the Exif structure cannot be parsed.

    Read errors are never recovered: they mean the file is truncated or
    its metadata is corrupt, not merely that metadata is absent.
    """
    pass


class MalformedTiffHeaderError(MetadataReadError):
    """
    Raised when the TIFF header inside the Exif segment is invalid.

    This exception is raised when:
    - The byte order mark is neither "II" nor "MM"
    - The magic number is not 42 in the declared byte order
    - The first IFD offset points back into the header
    """
    pass


class OutOfBoundsError(MetadataReadError):
    """
    Raised when an offset computed from the file lies outside the buffer.
    """

    def __init__(self, offset: int, width: int, length: int):
        self.offset = offset
        self.width = width
        self.length = length
        super().__init__(
            f"Access of {width} byte(s) at offset {offset} is outside "
            f"buffer of length {length}"
        )


class MetadataWriteError(ExifOrientationError):
    """
    Raised when the orientation value cannot be written.
    """
    pass


class ReadOnlyBufferError(MetadataWriteError):
    """Raised when an update is attempted on an immutable buffer."""
    default_message = "The buffer you are trying to update is read-only"


class InvalidOrientationCodeError(MetadataWriteError, ValueError):
    """
    Raised when a value outside the eight Exif orientation codes is
    passed to an update.
    """
    pass


class NotAJpegError(ExifOrientationError):
    """
    Raised when the data does not start with the JPEG SOI marker.

    Read paths recover this and report an unknown orientation.
    """
    default_message = "The File you are trying to update is not a jpeg"


class MetadataNotFoundError(ExifOrientationError):
    """
    Raised when a JPEG is well formed but lacks the requested metadata.

    Read paths recover these and report an unknown orientation.
    """
    pass


class ExifAbsentError(MetadataNotFoundError):
    """Raised when no APP1 segment carries an Exif identifier."""
    default_message = "The File you are trying to update has no exif data"


class OrientationTagMissingError(MetadataNotFoundError):
    """Raised when IFD0 of the Exif data has no Orientation entry."""
    default_message = "The File you are trying to update has no orientation tag"
