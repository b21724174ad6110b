from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

from ..stream.reader import read_exact


HEADER_SIZE = 128

# data size, float, width, height, encoding, mip count, unknown u16, float, reserved
_HEADER_STRUCT = struct.Struct("<I4xHHBB2x4x108x")


@dataclass(frozen=True, slots=True)
class TxbHeader:
    data_size: int  # pixel bytes for the whole mip chain
    width: int
    height: int
    encoding: int
    mip_map_count: int

    @property
    def data_end(self) -> int:
        """Offset where the TXI data starts."""
        return HEADER_SIZE + self.data_size


def unpack_txb_header(raw: bytes) -> TxbHeader:
    if len(raw) < HEADER_SIZE:
        raise ValueError(f"TXB header needs {HEADER_SIZE} bytes, got {len(raw)}")

    data_size, width, height, encoding, mip_map_count = _HEADER_STRUCT.unpack_from(raw)
    return TxbHeader(
        data_size=int(data_size),
        width=int(width),
        height=int(height),
        encoding=int(encoding),
        mip_map_count=int(mip_map_count),
    )


def parse_txb_header(fp: BinaryIO) -> TxbHeader:
    return unpack_txb_header(read_exact(fp, HEADER_SIZE, what="TXB header"))
