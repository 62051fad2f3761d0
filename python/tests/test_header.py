import io
import struct

import pytest

from ktx_py import (
    Endianness,
    GLFormat,
    GLType,
    InvalidEndianness,
    InvalidIdentifier,
    KtxHeader,
    UnexpectedEndOfData,
    read_header,
)
from ktx_py.constants import KTX_IDENTIFIER, HEADER_SIZE
from ktx_py.header import pack_header


def raw_header(order="<", fields=None):
    fields = fields or [GLType.UNSIGNED_BYTE, 1, GLFormat.RGBA, 0x8058, GLFormat.RGBA,
                        64, 32, 0, 0, 1, 7, 0]
    marker = Endianness.LITTLE if order == "<" else Endianness.BIG
    return KTX_IDENTIFIER + struct.pack("<I", marker) + struct.pack(order + "12I", *fields)


# ----------------------------------------------------------------------------
# Parsing
# ----------------------------------------------------------------------------
@pytest.mark.parametrize("order", ["<", ">"])
def test_read_header(order):
    stream = io.BytesIO(raw_header(order) + b"rest")

    header = read_header(stream)

    assert stream.tell() == HEADER_SIZE
    assert header.byte_order == order
    assert header.gl_type == GLType.UNSIGNED_BYTE
    assert header.gl_format == GLFormat.RGBA
    assert header.gl_internal_format == 0x8058
    assert (header.pixel_width, header.pixel_height, header.pixel_depth) == (64, 32, 0)
    assert header.face_count == 1
    assert header.mipmap_level_count == 7
    assert header.bytes_of_key_value_data == 0


def test_big_endian_marker_bytes():
    # A big-endian writer stores 0x04030201 as 04 03 02 01
    data = raw_header(">")
    assert data[12:16] == b"\x04\x03\x02\x01"
    assert KtxHeader.from_bytes(data).should_swap_endianness


def test_little_endian_does_not_swap():
    assert not KtxHeader.from_bytes(raw_header("<")).should_swap_endianness


def test_level_count_floor():
    assert KtxHeader(mipmap_level_count=0).level_count == 1
    assert KtxHeader(mipmap_level_count=9).level_count == 9


# ----------------------------------------------------------------------------
# Failures
# ----------------------------------------------------------------------------
def test_bad_identifier():
    data = b"\x89PNG\r\n\x1a\n\x00\x00\x00\x00" + raw_header()[12:]
    with pytest.raises(InvalidIdentifier):
        KtxHeader.from_bytes(data)


def test_bad_endianness_marker():
    data = KTX_IDENTIFIER + b"\x00\x00\x00\x00" + bytes(48)
    with pytest.raises(InvalidEndianness) as excinfo:
        KtxHeader.from_bytes(data)
    assert excinfo.value.value == 0


def test_short_header():
    with pytest.raises(UnexpectedEndOfData):
        KtxHeader.from_bytes(raw_header()[:40])


def test_unknown_marker_has_no_byte_order():
    header = KtxHeader(declared_endianness=0x11223344)
    with pytest.raises(InvalidEndianness):
        header.byte_order
    with pytest.raises(InvalidEndianness):
        header.should_swap_endianness


# ----------------------------------------------------------------------------
# Serialization
# ----------------------------------------------------------------------------
@pytest.mark.parametrize("endianness", [Endianness.LITTLE, Endianness.BIG])
def test_pack_header(endianness):
    header = KtxHeader(
        declared_endianness=endianness,
        gl_type=GLType.UNSIGNED_BYTE,
        gl_format=GLFormat.RGB,
        pixel_width=5,
        pixel_height=3,
        mipmap_level_count=3,
        bytes_of_key_value_data=16,
    )
    packed = pack_header(header)
    assert len(packed) == HEADER_SIZE
    assert KtxHeader.from_bytes(packed) == header
