"""TXB texture decoding.

A TXB file is a 128-byte header, the pixel data of a mip chain (raw BGRA or
DXT1/DXT5 blocks) and optional trailing TXI data.
"""

from __future__ import annotations

from .encodings import (
    ENCODING_BGRA,
    ENCODING_DXT1,
    ENCODING_DXT5,
    EncodingInfo,
    PixelFormat,
    StorageEncoding,
    lookup_encoding,
    supported_encodings,
)
from .header import HEADER_SIZE, TxbHeader, parse_txb_header, unpack_txb_header
from .mip_chain import MipPlan, plan_for_header, plan_mip_chain
from .texture import MipMap, TextureImage
from .txb_codec import DecodedTxb, decode_txb, decode_txb_bytes, load_txb, read_mip_maps, read_txi
from .files import TxbFile

__all__ = [
    "DecodedTxb",
    "ENCODING_BGRA",
    "ENCODING_DXT1",
    "ENCODING_DXT5",
    "EncodingInfo",
    "HEADER_SIZE",
    "MipMap",
    "MipPlan",
    "PixelFormat",
    "StorageEncoding",
    "TextureImage",
    "TxbFile",
    "TxbHeader",
    "decode_txb",
    "decode_txb_bytes",
    "load_txb",
    "lookup_encoding",
    "parse_txb_header",
    "plan_for_header",
    "plan_mip_chain",
    "read_mip_maps",
    "read_txi",
    "supported_encodings",
    "unpack_txb_header",
]
