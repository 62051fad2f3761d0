"""
ktx_py
======
Reader for KTX 1.1 texture containers: header, key/value metadata and the
raw payload of every mip level.

Main entry points:
    - load_ktx / read_ktx_file : ktx_py.reader
    - decode / classify        : ktx_py.texture_data
    - pack_ktx / write_ktx_file: ktx_py.writer
    - constants                : ktx_py.constants
"""

from .constants import (
    Endianness,
    GLType,
    GLFormat,
    GLInternalFormat,
    TextureKind,
)
from .errors import KtxError, UnexpectedEndOfData, InvalidEndianness, InvalidIdentifier
from .header import KtxHeader, read_header
from .texture_data import DecodedTexture, classify, decode, swap_endian_u32, padding_for
from .reader import KtxTexture, load_ktx, read_ktx_file
from .writer import pack_ktx, write_ktx_file
from .pixels import level_image, level_size

# What the package publicly exposes
__all__ = [
    "Endianness",
    "GLType",
    "GLFormat",
    "GLInternalFormat",
    "TextureKind",
    "KtxError",
    "UnexpectedEndOfData",
    "InvalidEndianness",
    "InvalidIdentifier",
    "KtxHeader",
    "read_header",
    "DecodedTexture",
    "classify",
    "decode",
    "swap_endian_u32",
    "padding_for",
    "KtxTexture",
    "load_ktx",
    "read_ktx_file",
    "pack_ktx",
    "write_ktx_file",
    "level_image",
    "level_size",
]
