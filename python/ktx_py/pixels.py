# ktx_py/pixels.py
#
# NumPy views of uncompressed 8-bit levels. KTX 1.1 stores rows with
# GL_UNPACK_ALIGNMENT 4, so each row may carry up to 3 bytes of padding.

import numpy as np

from .constants import GL_FORMAT_CHANNELS, GLType, TextureKind
from .header import KtxHeader
from .texture_data import padding_for

_IMAGE_KINDS = (
    TextureKind.ONE_D_NO_MIPMAPS,
    TextureKind.ONE_D_WITH_MIPMAPS,
    TextureKind.TWO_D_NO_MIPMAPS,
    TextureKind.TWO_D_WITH_MIPMAPS,
)


def level_size(header: KtxHeader, level: int):
    """(width, height) of a mip level; height is 1 for 1D textures."""
    w = max(1, header.pixel_width >> level)
    h = max(1, max(header.pixel_height, 1) >> level)
    return w, h


def is_uncompressed_8bit(header: KtxHeader) -> bool:
    return header.gl_type == GLType.UNSIGNED_BYTE and header.gl_format in GL_FORMAT_CHANNELS


def level_image(texture, level: int = 0) -> np.ndarray:
    """
    Return level `level` of a KtxTexture as an HxWxC uint8 array.
    Only 1D/2D GL_UNSIGNED_BYTE textures are supported.
    """
    header = texture.header
    if not is_uncompressed_8bit(header):
        raise ValueError(
            f"Unsupported format for level_image: glType=0x{header.gl_type:04X}, "
            f"glFormat=0x{header.gl_format:04X}"
        )
    if texture.kind not in _IMAGE_KINDS:
        raise ValueError(f"level_image only handles 1D/2D textures, got {texture.kind.name}")

    channels = GL_FORMAT_CHANNELS[header.gl_format]
    w, h = level_size(header, level)
    row_bytes = w * channels
    row_pitch = row_bytes + padding_for(row_bytes)

    data = texture.mip_levels[level]
    if len(data) < row_pitch * (h - 1) + row_bytes:
        raise ValueError(
            f"Level {level} holds {len(data)} bytes, too small for {w}x{h}x{channels}"
        )

    # The last row's padding may be missing; pad it back before reshaping
    pitched = np.zeros(row_pitch * h, dtype=np.uint8)
    usable = min(len(data), pitched.size)
    pitched[:usable] = np.frombuffer(data, dtype=np.uint8, count=usable)
    return pitched.reshape((h, row_pitch))[:, :row_bytes].reshape((h, w, channels))


__all__ = ["level_image", "level_size", "is_uncompressed_8bit"]
