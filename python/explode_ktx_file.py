#!/usr/bin/env python3
"""
explode_ktx_file.py
KTX 1.1 EXPLODER: header + key/value dump, raw level payloads, PNG output
for uncompressed 8-bit 1D/2D textures.

Usage:
    python3 explode_ktx_file.py input.ktx
    python3 explode_ktx_file.py input.ktx --info-only
    python3 explode_ktx_file.py input.ktx --out some_dir
"""

# Python Dependencies (beyond ktx_py):
#     numpy
#     pillow
#
# Install Python deps:
#     pip install numpy pillow

import os
import sys

from PIL import Image

from ktx_py import KtxError, read_ktx_file, level_image, level_size
from ktx_py.constants import Endianness, GLFormat
from ktx_py.pixels import is_uncompressed_8bit


# ============================================================================
# Pretty header
# ============================================================================
def print_header(title):
    print("\n" + "=" * 90)
    print(title)
    print("=" * 90)


# ============================================================================
# Top-level header dump
# ============================================================================
def dump_top_level(tex):
    h = tex.header
    print_header("TOP-LEVEL KTX METADATA")

    if h.declared_endianness == Endianness.LITTLE:
        order = "little"
    else:
        order = "big"

    print("Endianness               :", f"0x{h.declared_endianness:08X} ({order})")
    print("glType                   :", f"0x{h.gl_type:04X}")
    print("glTypeSize               :", h.gl_type_size)
    print("glFormat                 :", f"0x{h.gl_format:04X}")
    print("glInternalFormat         :", f"0x{h.gl_internal_format:04X}")
    print("glBaseInternalFormat     :", f"0x{h.gl_base_internal_format:04X}")
    print("Width                    :", h.pixel_width)
    print("Height                   :", h.pixel_height)
    print("Depth                    :", h.pixel_depth)
    print("Array elements           :", h.array_element_count)
    print("Faces                    :", h.face_count)
    print("Levels (declared)        :", h.mipmap_level_count)
    print("Levels (decoded)         :", tex.data.level_count)
    print("Texture kind             :", tex.kind.name)
    print("Total byte length        :", tex.data.total_byte_length)
    print("Payload byte length      :", tex.data.payload_byte_length)


# ============================================================================
# Key/value dump
# ============================================================================
def dump_key_values(tex):
    print_header("KEY/VALUE DATA")

    if not tex.metadata:
        print("(none)")
        return

    for key, value in tex.metadata.items():
        shown = value.rstrip(b"\x00")
        try:
            text = shown.decode("utf-8")
        except UnicodeDecodeError:
            text = shown.hex()
        print(f"  {key:<24}: {text}")


# ============================================================================
# Level dump
# ============================================================================
def dump_per_level_info(tex):
    print_header("PER-LEVEL METADATA")

    for level, payload in enumerate(tex.mip_levels):
        w, h = level_size(tex.header, level)
        print(f"Level={level}: {w}x{h}, {len(payload)} bytes")


# ============================================================================
# Write each level as .bin (and .png where possible)
# ============================================================================
def explode_levels(tex, out_dir="."):
    print_header("BEGIN EXPLODE LEVELS")

    os.makedirs(out_dir, exist_ok=True)
    can_png = is_uncompressed_8bit(tex.header)

    written = []
    for level, payload in enumerate(tex.mip_levels):
        bin_name = os.path.join(out_dir, f"level_{level}.bin")
        with open(bin_name, "wb") as f:
            f.write(payload)
        print("  BIN saved:", bin_name)
        written.append(bin_name)

        if not can_png:
            continue

        try:
            pixels = level_image(tex, level)
        except ValueError as e:
            print(f"  [Skip] Level {level} PNG: {e}")
            continue

        if tex.header.gl_format == GLFormat.BGRA:
            pixels = pixels[:, :, [2, 1, 0, 3]]
        elif pixels.shape[2] == 1:
            pixels = pixels[:, :, 0]
        png_name = os.path.join(out_dir, f"level_{level}.png")
        Image.fromarray(pixels).save(png_name)
        print("  PNG saved:", png_name)
        written.append(png_name)

    print_header("EXPLODE COMPLETE")
    return written


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: python explode_ktx_file.py input.ktx [--info-only] [--out DIR]")
        return 1

    info_only = "--info-only" in args

    out_dir = "."
    if "--out" in args:
        i = args.index("--out")
        if i + 1 >= len(args):
            print("Error: --out needs a directory.")
            return 1
        out_dir = args[i + 1]
        del args[i:i + 2]

    # Determine input filename
    input_file = None
    for a in args:
        if not a.startswith("--"):
            input_file = a
            break

    if input_file is None:
        print("Error: No input file provided.")
        return 1

    try:
        tex = read_ktx_file(input_file)
    except (OSError, KtxError) as e:
        print(f"Error: cannot read {input_file}: {e}")
        return 1

    dump_top_level(tex)
    dump_key_values(tex)
    dump_per_level_info(tex)

    if info_only:
        print_header("INFO-ONLY MODE  NO FILES WRITTEN")
        return 0

    explode_levels(tex, out_dir)
    print("Success")
    return 0


if __name__ == "__main__":
    sys.exit(main())
