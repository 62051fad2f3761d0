# ktx_py/reader.py

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Tuple, Union

from .constants import TextureKind
from .header import KtxHeader, read_header
from .metadata import read_key_value_data
from .stream import open_source, Source
from .texture_data import DecodedTexture, decode


@dataclass(frozen=True)
class KtxTexture:
    header: KtxHeader
    data: DecodedTexture
    metadata: Dict[str, bytes] = field(default_factory=dict)

    @property
    def kind(self) -> TextureKind:
        return self.data.kind

    @property
    def mip_levels(self) -> Tuple[bytes, ...]:
        return self.data.mip_levels


def load_ktx(source: Source) -> KtxTexture:
    """
    Parse a complete KTX 1.1 file from bytes or a readable, seekable
    binary stream positioned at the identifier.
    """
    with open_source(source) as stream:
        header = read_header(stream)
        metadata = read_key_value_data(stream, header)
        data = decode(header, stream)
    return KtxTexture(header=header, data=data, metadata=metadata)


def read_ktx_file(path: Union[str, Path]) -> KtxTexture:
    with open(path, "rb") as f:
        return load_ktx(f)


__all__ = ["KtxTexture", "load_ktx", "read_ktx_file"]
