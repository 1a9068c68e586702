"""
Synthetic JPEG files for tests.

Each builder returns the bytes of a small but structurally complete JPEG:
SOI, APPn/DQT segments, a short scan and EOI. Pixel data is never decoded,
so the scan is a handful of placeholder bytes.
"""

import struct
from typing import Optional

SOI = b'\xff\xd8'
EOI = b'\xff\xd9'

JFIF_PAYLOAD = b'JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'
XMP_PAYLOAD = (
    b'http://ns.adobe.com/xap/1.0/\x00'
    b'<x:xmpmeta xmlns:x="adobe:ns:meta/"><tiff:Orientation>6</tiff:Orientation></x:xmpmeta>'
)

IMAGE_WIDTH = 0x0100
IMAGE_HEIGHT = 0x0101
ORIENTATION = 0x0112
SHORT = 3
LONG = 4


def segment(marker: int, payload: bytes) -> bytes:
    """Marker, big-endian length (payload + 2) and payload."""
    return struct.pack('>HH', marker, len(payload) + 2) + payload


def scan() -> bytes:
    """SOS header, a few entropy-coded bytes (with a stuffed 0xFF00) and EOI."""
    return segment(0xFFDA, b'\x01\x01\x00\x00\x3f\x00') + b'\x12\x34\xff\x00\x56\x78' + EOI


def ifd_entry(tag: int, tag_type: int, value: int, big_endian: bool) -> bytes:
    e = '>' if big_endian else '<'
    if tag_type == SHORT:
        return struct.pack(f'{e}HHIHH', tag, tag_type, 1, value, 0)
    return struct.pack(f'{e}HHII', tag, tag_type, 1, value)


def exif_payload(
    orientation: Optional[int] = 1,
    big_endian: bool = True,
    ifd_distance: int = 8,
) -> bytes:
    """
    "Exif\\0\\0" followed by a TIFF header and IFD0.

    IFD0 holds ImageWidth, Orientation (unless orientation is None) and
    ImageHeight, so the orientation entry is never the first one.
    """
    e = '>' if big_endian else '<'
    entries = [ifd_entry(IMAGE_WIDTH, LONG, 640, big_endian)]
    if orientation is not None:
        entries.append(ifd_entry(ORIENTATION, SHORT, orientation, big_endian))
    entries.append(ifd_entry(IMAGE_HEIGHT, LONG, 480, big_endian))

    ifd = struct.pack(f'{e}H', len(entries)) + b''.join(entries) + struct.pack(f'{e}I', 0)
    header = (b'MM' if big_endian else b'II') + struct.pack(f'{e}HI', 42, ifd_distance)
    padding = b'\x00' * (ifd_distance - 8)
    return b'Exif\x00\x00' + header + padding + ifd


def build_jpeg(*segments: bytes) -> bytes:
    return SOI + b''.join(segments) + segment(0xFFDB, bytes(65)) + scan()


def jpeg_with_exif(orientation: Optional[int] = 1, big_endian: bool = True, **kwargs) -> bytes:
    """JFIF APP0 followed by an Exif APP1, the usual camera layout."""
    return build_jpeg(
        segment(0xFFE0, JFIF_PAYLOAD),
        segment(0xFFE1, exif_payload(orientation, big_endian, **kwargs)),
    )


def jpeg_without_exif() -> bytes:
    return build_jpeg(segment(0xFFE0, JFIF_PAYLOAD))


def jpeg_with_xmp_before_exif(orientation: int = 6, big_endian: bool = True) -> bytes:
    return build_jpeg(
        segment(0xFFE1, XMP_PAYLOAD),
        segment(0xFFE1, exif_payload(orientation, big_endian)),
    )


PNG_HEADER = b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x02\x00\x00\x00'
