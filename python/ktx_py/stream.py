# ktx_py/stream.py
#
# Byte-source helpers shared by the header, metadata and level readers.

import io
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Union

from .errors import UnexpectedEndOfData

Source = Union[bytes, bytearray, memoryview, BinaryIO]


@contextmanager
def open_source(source: Source) -> Iterator[BinaryIO]:
    """
    Yield a readable binary stream for `source`.

    Bytes-like input is wrapped in a BytesIO owned (and closed) here.
    A caller's file object is yielded as-is and left open at whatever
    position reading stopped, whether the block exits normally or not.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        stream = io.BytesIO(bytes(source))
        try:
            yield stream
        finally:
            stream.close()
    else:
        yield source


def read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    """
    Read exactly `size` bytes. Raw streams may return short reads, so keep
    reading until the count is met or the stream reports end of data.
    """
    data = bytearray()
    while len(data) < size:
        chunk = stream.read(size - len(data))
        if not chunk:
            raise UnexpectedEndOfData(what, size, len(data))
        data += chunk
    return bytes(data)


def remaining_length(stream: BinaryIO) -> int:
    """Bytes between the current position and the end of a seekable stream."""
    pos = stream.tell()
    end = stream.seek(0, io.SEEK_END)
    stream.seek(pos, io.SEEK_SET)
    return end - pos


__all__ = ["Source", "open_source", "read_exact", "remaining_length"]
