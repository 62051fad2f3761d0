# ktx_py/metadata.py
#
# Key/value data follows the header. bytesOfKeyValueData covers a run of:
#
#   u32                keyAndValueByteSize
#   u8[size]           key (UTF-8, NUL terminated) followed by the value
#   u8[pad]            padding to a multiple of 4

import struct
from typing import BinaryIO, Dict

from .errors import KtxError
from .header import KtxHeader
from .stream import read_exact
from .texture_data import padding_for


def read_key_value_data(stream: BinaryIO, header: KtxHeader) -> Dict[str, bytes]:
    """
    Consume exactly header.bytes_of_key_value_data bytes and return the
    pairs in file order. Values are returned verbatim (including any
    trailing NUL the writer put there).
    """
    order = header.byte_order
    remaining = header.bytes_of_key_value_data
    pairs: Dict[str, bytes] = {}

    while remaining > 0:
        if remaining < 4:
            raise KtxError(f"Truncated key/value record: {remaining} bytes left in block")

        size, = struct.unpack(order + "I", read_exact(stream, 4, "keyAndValueByteSize"))
        record_len = 4 + size + padding_for(size)
        if record_len > remaining:
            raise KtxError(
                f"Key/value record of {size} bytes overruns the block ({remaining} bytes left)"
            )

        raw = read_exact(stream, size, "keyAndValue")
        read_exact(stream, padding_for(size), "keyAndValue padding")
        remaining -= record_len

        key, sep, value = raw.partition(b"\x00")
        if not sep:
            raise KtxError(f"Key/value record without NUL terminated key: {raw[:32]!r}")
        try:
            name = key.decode("utf-8")
        except UnicodeDecodeError as e:
            raise KtxError(f"Key/value record with a key that is not UTF-8: {key[:32]!r}") from e
        pairs[name] = value

    return pairs


def pack_key_value_data(pairs: Dict[str, bytes], byte_order: str = "<") -> bytes:
    out = bytearray()
    for key, value in pairs.items():
        raw = key.encode("utf-8") + b"\x00" + bytes(value)
        out += struct.pack(byte_order + "I", len(raw))
        out += raw
        out += b"\x00" * padding_for(len(raw))
    return bytes(out)


__all__ = ["read_key_value_data", "pack_key_value_data"]
