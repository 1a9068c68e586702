"""
Tests for ByteView bounds-checked access.
"""

import pytest

from exif_orientation.byte_view import ByteView
from exif_orientation.exceptions import OutOfBoundsError, ReadOnlyBufferError


class TestByteViewReads:
    """Tests for integer reads."""

    def test_read_u16_both_byte_orders(self):
        """Test that the same bytes read differently per byte order."""
        view = ByteView(b'\x12\x34')

        assert view.read_u16(0, True) == 0x1234
        assert view.read_u16(0, False) == 0x3412

    def test_read_u32_both_byte_orders(self):
        """Test 32-bit reads at a non-zero offset."""
        view = ByteView(b'\x00\x00\x00\x00\x08\x00')

        assert view.read_u32(2, True) == 0x00000800
        assert view.read_u32(2, False) == 0x00080000

    def test_read_u8_and_bytes(self):
        """Test single byte and slice reads."""
        view = ByteView(b'Exif\x00\x00')

        assert view.read_u8(0) == ord('E')
        assert view.read_bytes(0, 4) == b'Exif'

    def test_length(self):
        """Test len() reports the buffer length."""
        assert len(ByteView(bytearray(10))) == 10
        assert len(ByteView(b'')) == 0

    def test_memoryview_input(self):
        """Test that a memoryview slice is read relative to its own start."""
        view = ByteView(memoryview(b'\xff\xff\x00\x2a')[2:])

        assert len(view) == 2
        assert view.read_u16(0, True) == 0x002A


class TestByteViewBounds:
    """Tests that every access is checked against the buffer length."""

    @pytest.mark.parametrize("offset", [-1, 3, 4, 100])
    def test_read_u16_out_of_bounds(self, offset):
        """Test reads that overrun or precede the buffer."""
        view = ByteView(b'\x00\x01\x02\x03')

        with pytest.raises(OutOfBoundsError):
            view.read_u16(offset, True)

    def test_read_u32_at_last_valid_offset(self):
        """Test that a read ending exactly at the buffer end succeeds."""
        view = ByteView(b'\x00\x00\x00\x00\x01')

        assert view.read_u32(1, True) == 1
        with pytest.raises(OutOfBoundsError):
            view.read_u32(2, True)

    def test_empty_buffer(self):
        """Test that an empty buffer rejects every read."""
        view = ByteView(b'')

        with pytest.raises(OutOfBoundsError):
            view.read_u8(0)

    def test_error_carries_access_details(self):
        """Test the offset, width and length recorded on the error."""
        view = ByteView(b'\x00\x00\x00')

        with pytest.raises(OutOfBoundsError) as exc_info:
            view.read_u32(1, False)

        assert exc_info.value.offset == 1
        assert exc_info.value.width == 4
        assert exc_info.value.length == 3


class TestByteViewWrites:
    """Tests for 16-bit writes."""

    def test_write_u16_updates_buffer_in_place(self):
        """Test that writes go through to the caller's bytearray."""
        data = bytearray(4)
        view = ByteView(data)

        view.write_u16(1, 0x0106, True)
        assert data == bytearray(b'\x00\x01\x06\x00')

        view.write_u16(1, 0x0106, False)
        assert data == bytearray(b'\x00\x06\x01\x00')

    def test_write_out_of_bounds_leaves_buffer_unchanged(self):
        """Test that a write straddling the end is rejected."""
        data = bytearray(b'\xaa\xbb\xcc')
        view = ByteView(data)

        with pytest.raises(OutOfBoundsError):
            view.write_u16(2, 1, True)
        assert data == bytearray(b'\xaa\xbb\xcc')

    @pytest.mark.parametrize("value", [-1, 0x10000])
    def test_write_rejects_values_outside_16_bits(self, value):
        """Test that values are never truncated."""
        view = ByteView(bytearray(2))

        with pytest.raises(ValueError):
            view.write_u16(0, value, True)

    def test_write_to_bytes_raises(self):
        """Test that immutable buffers cannot be written."""
        view = ByteView(b'\x00\x00')

        assert view.readonly
        with pytest.raises(ReadOnlyBufferError):
            view.write_u16(0, 1, True)

    def test_context_manager_releases_view(self):
        """Test that a bytearray can be resized after the view is closed."""
        data = bytearray(2)
        with ByteView(data) as view:
            view.write_u16(0, 0xFFD8, True)

        data.extend(b'\xff\xd9')
        assert data == bytearray(b'\xff\xd8\xff\xd9')
