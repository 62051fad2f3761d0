# ktx_py/header.py
#
# KTX 1.1 fixed header:
#
#   u8[12] identifier
#   u32    endianness
#   u32    glType, glTypeSize, glFormat, glInternalFormat, glBaseInternalFormat
#   u32    pixelWidth, pixelHeight, pixelDepth
#   u32    numberOfArrayElements, numberOfFaces, numberOfMipmapLevels
#   u32    bytesOfKeyValueData

import struct
from dataclasses import dataclass
from typing import BinaryIO

from .constants import KTX_IDENTIFIER, HEADER_SIZE, Endianness
from .errors import InvalidEndianness, InvalidIdentifier
from .stream import open_source, read_exact

_FIELD_COUNT = 12


def byte_order_for(endianness: int) -> str:
    """struct prefix for a header endianness marker (read little-endian)."""
    if endianness == Endianness.LITTLE:
        return "<"
    if endianness == Endianness.BIG:
        return ">"
    raise InvalidEndianness(endianness)


@dataclass(frozen=True)
class KtxHeader:
    declared_endianness: int = Endianness.LITTLE
    gl_type: int = 0
    gl_type_size: int = 1
    gl_format: int = 0
    gl_internal_format: int = 0
    gl_base_internal_format: int = 0
    pixel_width: int = 1
    pixel_height: int = 0
    pixel_depth: int = 0
    array_element_count: int = 0
    face_count: int = 1
    mipmap_level_count: int = 1
    bytes_of_key_value_data: int = 0

    @property
    def byte_order(self) -> str:
        return byte_order_for(self.declared_endianness)

    @property
    def should_swap_endianness(self) -> bool:
        # Unknown markers raise here
        byte_order_for(self.declared_endianness)
        return self.declared_endianness != Endianness.EXPECTED

    @property
    def level_count(self) -> int:
        """Number of mip level records in the file; zero declared means one."""
        return max(self.mipmap_level_count, 1)

    @classmethod
    def from_bytes(cls, data: bytes) -> "KtxHeader":
        with open_source(data) as stream:
            return read_header(stream)


def read_header(stream: BinaryIO) -> KtxHeader:
    """
    Read the 64-byte header and leave the stream at the key/value data.
    """
    identifier = read_exact(stream, len(KTX_IDENTIFIER), "identifier")
    if identifier != KTX_IDENTIFIER:
        raise InvalidIdentifier(identifier)

    endianness, = struct.unpack("<I", read_exact(stream, 4, "endianness"))
    order = byte_order_for(endianness)

    raw = read_exact(stream, HEADER_SIZE - len(KTX_IDENTIFIER) - 4, "header")
    (gl_type, gl_type_size, gl_format, gl_internal_format, gl_base_internal_format,
     width, height, depth, array_elements, faces, levels, kv_bytes) = struct.unpack(
        f"{order}{_FIELD_COUNT}I", raw)

    return KtxHeader(
        declared_endianness=endianness,
        gl_type=gl_type,
        gl_type_size=gl_type_size,
        gl_format=gl_format,
        gl_internal_format=gl_internal_format,
        gl_base_internal_format=gl_base_internal_format,
        pixel_width=width,
        pixel_height=height,
        pixel_depth=depth,
        array_element_count=array_elements,
        face_count=faces,
        mipmap_level_count=levels,
        bytes_of_key_value_data=kv_bytes,
    )


def pack_header(header: KtxHeader) -> bytes:
    """Serialize a header in its own declared byte order."""
    order = header.byte_order
    return (
        KTX_IDENTIFIER
        + struct.pack("<I", header.declared_endianness)
        + struct.pack(
            f"{order}{_FIELD_COUNT}I",
            header.gl_type,
            header.gl_type_size,
            header.gl_format,
            header.gl_internal_format,
            header.gl_base_internal_format,
            header.pixel_width,
            header.pixel_height,
            header.pixel_depth,
            header.array_element_count,
            header.face_count,
            header.mipmap_level_count,
            header.bytes_of_key_value_data,
        )
    )


__all__ = ["KtxHeader", "read_header", "pack_header", "byte_order_for"]
