# ktx_py/errors.py


class KtxError(Exception):
    """Base class for everything the KTX reader raises."""


class UnexpectedEndOfData(KtxError, EOFError):
    """
    The source ran out before a length prefix, payload or padding byte
    could be read. Nothing partial is returned when this is raised.
    """

    def __init__(self, what: str, expected: int, got: int):
        super().__init__(f"Unexpected end of data reading {what}: expected {expected} bytes, got {got}")
        self.what = what
        self.expected = expected
        self.got = got


class InvalidEndianness(KtxError, ValueError):
    def __init__(self, value: int):
        super().__init__(f"Invalid endianness marker 0x{value:08X}")
        self.value = value


class InvalidIdentifier(KtxError, ValueError):
    def __init__(self, identifier: bytes):
        super().__init__(f"Not a KTX 1.1 file (identifier {identifier!r})")
        self.identifier = identifier


__all__ = ["KtxError", "UnexpectedEndOfData", "InvalidEndianness", "InvalidIdentifier"]
