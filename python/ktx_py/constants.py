# ktx_py/constants.py

from enum import IntEnum

# ============================================================
# KTX 1.1 container
# ============================================================
KTX_IDENTIFIER = b"\xABKTX 11\xBB\r\n\x1A\n"

HEADER_SIZE = 64

# Records (key/value pairs, mip level images) are aligned to this
KTX_ALIGNMENT = 4


# ============================================================
# Endianness marker, as read little-endian from the header
# ============================================================
class Endianness:
    LITTLE = 0x04030201
    BIG = 0x01020304

    # What a reader on the expected byte order sees; anything else is swapped
    EXPECTED = LITTLE


# ============================================================
# OpenGL enums used by KTX headers (subset)
# glType / glFormat / glInternalFormat
# ============================================================
class GLType:
    COMPRESSED = 0  # glType == 0 means the payload is a compressed format

    BYTE = 0x1400
    UNSIGNED_BYTE = 0x1401
    SHORT = 0x1402
    UNSIGNED_SHORT = 0x1403
    INT = 0x1404
    UNSIGNED_INT = 0x1405
    FLOAT = 0x1406
    HALF_FLOAT = 0x140B


class GLFormat:
    RED = 0x1903
    ALPHA = 0x1906
    RGB = 0x1907
    RGBA = 0x1908
    LUMINANCE = 0x1909
    LUMINANCE_ALPHA = 0x190A
    RG = 0x8227
    BGRA = 0x80E1


class GLInternalFormat:
    RGB8 = 0x8051
    RGBA8 = 0x8058

    COMPRESSED_RGB_S3TC_DXT1 = 0x83F0
    COMPRESSED_RGBA_S3TC_DXT1 = 0x83F1
    COMPRESSED_RGBA_S3TC_DXT3 = 0x83F2
    COMPRESSED_RGBA_S3TC_DXT5 = 0x83F3
    ETC1_RGB8 = 0x8D64
    COMPRESSED_RGB8_ETC2 = 0x9274
    COMPRESSED_RGBA8_ETC2_EAC = 0x9278
    COMPRESSED_RGBA_ASTC_4x4 = 0x93B0
    COMPRESSED_RGBA_ASTC_8x8 = 0x93B7


# Channels per pixel for the uncompressed glFormat values
GL_FORMAT_CHANNELS = {
    GLFormat.RED: 1,
    GLFormat.ALPHA: 1,
    GLFormat.LUMINANCE: 1,
    GLFormat.RG: 2,
    GLFormat.LUMINANCE_ALPHA: 2,
    GLFormat.RGB: 3,
    GLFormat.RGBA: 4,
    GLFormat.BGRA: 4,
}


# ============================================================
# Basic texture shape, derived from header counts
# ============================================================
class TextureKind(IntEnum):
    ONE_D_NO_MIPMAPS = 0
    ONE_D_WITH_MIPMAPS = 1
    TWO_D_NO_MIPMAPS = 2
    TWO_D_WITH_MIPMAPS = 3
    THREE_D_NO_MIPMAPS = 4
    THREE_D_WITH_MIPMAPS = 5
    CUBE_MAP = 6
    TEXTURE_ARRAY = 7
    UNKNOWN = 8


__all__ = [
    "KTX_IDENTIFIER",
    "HEADER_SIZE",
    "KTX_ALIGNMENT",
    "Endianness",
    "GLType",
    "GLFormat",
    "GLInternalFormat",
    "GL_FORMAT_CHANNELS",
    "TextureKind",
]
