# ktx_py/texture_data.py
#
# Mip level payloads of a KTX 1.1 file. After the header and key/value
# data, each level is stored as:
#
#   u32                imageSize   (file's byte order)
#   u8[imageSize]      imageData
#   u8[pad]            padding     pad = (4 - imageSize % 4) % 4

import struct
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .constants import TextureKind, KTX_ALIGNMENT
from .header import KtxHeader
from .stream import open_source, read_exact, remaining_length, Source


# ---------------------------------------------------------------------------
# Shape classification
# ---------------------------------------------------------------------------
def _present(count: int) -> bool:
    # Header counts of 0 and 1 both mean "not used"
    return count not in (0, 1)


def classify(header: KtxHeader) -> TextureKind:
    has_mipmaps = header.mipmap_level_count > 1

    if _present(header.array_element_count):
        return TextureKind.TEXTURE_ARRAY

    if _present(header.face_count):
        return TextureKind.CUBE_MAP

    if _present(header.pixel_depth):
        return TextureKind.THREE_D_WITH_MIPMAPS if has_mipmaps else TextureKind.THREE_D_NO_MIPMAPS

    if _present(header.pixel_height):
        return TextureKind.TWO_D_WITH_MIPMAPS if has_mipmaps else TextureKind.TWO_D_NO_MIPMAPS

    return TextureKind.ONE_D_WITH_MIPMAPS if has_mipmaps else TextureKind.ONE_D_NO_MIPMAPS


# ---------------------------------------------------------------------------
# Byte fiddling
# ---------------------------------------------------------------------------
def swap_endian_u32(value: int) -> int:
    return (((value & 0x000000FF) << 24) |
            ((value & 0x0000FF00) << 8) |
            ((value & 0x00FF0000) >> 8) |
            ((value & 0xFF000000) >> 24))


def padding_for(length: int) -> int:
    return (KTX_ALIGNMENT - length % KTX_ALIGNMENT) % KTX_ALIGNMENT


# ---------------------------------------------------------------------------
# Decoded result
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class DecodedTexture:
    """
    Raw payload of every mip level, in file order (index 0 = first record).

    total_byte_length is the length of the source from where decoding
    started to its end, not the sum of the payloads; use
    payload_byte_length for that.
    """
    total_byte_length: int
    kind: TextureKind
    mip_levels: Tuple[bytes, ...]

    @property
    def level_count(self) -> int:
        return len(self.mip_levels)

    @property
    def payload_byte_length(self) -> int:
        return sum(len(level) for level in self.mip_levels)

    def level_array(self, level: int = 0, dtype=np.uint8) -> np.ndarray:
        """
        Read-only NumPy view of one level's bytes, reinterpreted as `dtype`.
        """
        return np.frombuffer(self.mip_levels[level], dtype=dtype)


# ---------------------------------------------------------------------------
# Level stream decoder
# ---------------------------------------------------------------------------
def decode(header: KtxHeader, source: Source) -> DecodedTexture:
    """
    Extract every mip level from `source`, which must be positioned at the
    first level's imageSize.

    `source` may be bytes or a readable, seekable binary stream. A stream
    is advanced past the last level's padding and is not closed.

    Raises UnexpectedEndOfData if the data runs out mid-record and
    InvalidEndianness if the header's byte-order marker is unknown.
    """
    kind = classify(header)
    should_swap = header.should_swap_endianness
    level_count = header.level_count

    levels = []
    with open_source(source) as stream:
        total_byte_length = remaining_length(stream)

        for i in range(level_count):
            image_size, = struct.unpack("<I", read_exact(stream, 4, f"level {i} imageSize"))
            if should_swap:
                image_size = swap_endian_u32(image_size)

            levels.append(read_exact(stream, image_size, f"level {i} imageData"))

            # Skip padding one byte at a time
            consumed = image_size
            while consumed % KTX_ALIGNMENT != 0:
                consumed += 1
                read_exact(stream, 1, f"level {i} padding")

    return DecodedTexture(
        total_byte_length=total_byte_length,
        kind=kind,
        mip_levels=tuple(levels),
    )


__all__ = [
    "DecodedTexture",
    "classify",
    "decode",
    "padding_for",
    "swap_endian_u32",
]
