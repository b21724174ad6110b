"""txb-py: TXB texture decoder.

Core concept: a TXB stream is a fixed 128-byte header, a mip chain whose level
sizes are rederived from the declared data size, and optional TXI data.
"""

from __future__ import annotations

from .errors import (
    TruncatedReadError,
    TxbError,
    TxbFormatError,
    TxbReadError,
    UnknownEncodingError,
    UnsupportedEncodingError,
)
from .settings import TxbSettings
from .txb import DecodedTxb, MipMap, TextureImage, TxbFile, decode_txb, decode_txb_bytes, load_txb

__all__ = [
    "__version__",
    "DecodedTxb",
    "MipMap",
    "TextureImage",
    "TruncatedReadError",
    "TxbError",
    "TxbFile",
    "TxbFormatError",
    "TxbReadError",
    "TxbSettings",
    "UnknownEncodingError",
    "UnsupportedEncodingError",
    "decode_txb",
    "decode_txb_bytes",
    "load_txb",
]

__version__ = "0.1.0"
