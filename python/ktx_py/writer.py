# ktx_py/writer.py
#
# Minimal KTX 1.1 writer: header, optional key/value data, then one
# imageSize-prefixed, 4-byte padded record per mip level.
#
# Usage:
#     from ktx_py.writer import write_ktx_file
#     write_ktx_file("out.ktx", [level0, level1], pixel_width=4, pixel_height=4,
#                    gl_type=GLType.UNSIGNED_BYTE, gl_format=GLFormat.RGBA,
#                    gl_internal_format=GLInternalFormat.RGBA8)

import struct
from typing import Dict, Optional, Sequence

from .constants import Endianness, GLFormat, GLInternalFormat, GLType
from .header import KtxHeader, pack_header
from .metadata import pack_key_value_data
from .texture_data import padding_for


def pack_ktx(
    levels: Sequence[bytes],
    pixel_width: int,
    pixel_height: int = 0,
    pixel_depth: int = 0,
    array_element_count: int = 0,
    face_count: int = 1,
    gl_type: int = GLType.UNSIGNED_BYTE,
    gl_type_size: int = 1,
    gl_format: int = GLFormat.RGBA,
    gl_internal_format: int = GLInternalFormat.RGBA8,
    gl_base_internal_format: Optional[int] = None,
    key_values: Optional[Dict[str, bytes]] = None,
    big_endian: bool = False,
    mipmap_level_count: Optional[int] = None,
) -> bytes:
    """
    Build a KTX 1.1 file in memory.

    Parameters:
        levels              : One bytes-like payload per mip level, finest first
        pixel_*             : Texture dimensions (0 for unused height/depth)
        gl_*                : OpenGL type/format enums stored in the header
        key_values          : Optional key/value metadata (str -> bytes)
        big_endian          : Write every u32 after the identifier big-endian
        mipmap_level_count  : Value stored in the header; defaults to len(levels).
                              0 is allowed with exactly one level.

    Notes:
        - Levels are written verbatim; nothing checks they match the format.
        - Padding bytes are zero.
        - Each mip level is a single imageSize record, also for face_count=6
          or array_element_count>1. Cube and array output therefore is not a
          conformant KTX 1.1 cube map (which stores six padded faces per
          level); it matches what ktx_py.texture_data.decode() reads.
    """
    if not levels:
        raise ValueError("At least one mip level is required")

    if mipmap_level_count is None:
        mipmap_level_count = len(levels)
    if max(mipmap_level_count, 1) != len(levels):
        raise ValueError(
            f"mipmap_level_count {mipmap_level_count} does not match {len(levels)} levels"
        )

    order = ">" if big_endian else "<"
    kv_data = pack_key_value_data(key_values or {}, order)

    header = KtxHeader(
        declared_endianness=Endianness.BIG if big_endian else Endianness.LITTLE,
        gl_type=gl_type,
        gl_type_size=gl_type_size,
        gl_format=gl_format,
        gl_internal_format=gl_internal_format,
        gl_base_internal_format=gl_format if gl_base_internal_format is None else gl_base_internal_format,
        pixel_width=pixel_width,
        pixel_height=pixel_height,
        pixel_depth=pixel_depth,
        array_element_count=array_element_count,
        face_count=face_count,
        mipmap_level_count=mipmap_level_count,
        bytes_of_key_value_data=len(kv_data),
    )

    out = bytearray(pack_header(header))
    out += kv_data
    for level in levels:
        out += struct.pack(order + "I", len(level))
        out += bytes(level)
        out += b"\x00" * padding_for(len(level))
    return bytes(out)


def write_ktx_file(filename: str, levels: Sequence[bytes], pixel_width: int, **kwargs) -> None:
    """
    Write a KTX 1.1 file to disk. Keyword arguments are those of pack_ktx().
    """
    data = pack_ktx(levels, pixel_width, **kwargs)

    with open(filename, "wb") as f:
        f.write(data)

    print(f"[KTX Writer] Wrote: {filename} ({len(levels)} levels, {len(data)} bytes)")


__all__ = ["pack_ktx", "write_ktx_file"]
