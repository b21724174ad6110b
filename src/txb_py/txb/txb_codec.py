from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterable

from ..errors import TruncatedReadError, TxbFormatError, TxbReadError
from ..stream.reader import read_exact, stream_size
from .encodings import lookup_encoding
from .header import HEADER_SIZE, TxbHeader, parse_txb_header
from .mip_chain import MipPlan, plan_for_header
from .texture import MipMap, TextureImage


log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DecodedTxb:
    header: TxbHeader
    image: TextureImage
    txi: bytes  # trailing TXI data; may be empty

    @property
    def has_txi(self) -> bool:
        return len(self.txi) > 0

    def txi_stream(self) -> io.BytesIO | None:
        """Fresh stream over the TXI data, or None when there is none."""

        if not self.txi:
            return None
        return io.BytesIO(self.txi)


def read_mip_maps(fp: BinaryIO, plans: Iterable[MipPlan]) -> tuple[MipMap, ...]:
    mip_maps: list[MipMap] = []
    for level, plan in enumerate(plans):
        data = read_exact(fp, plan.size, what=f"mip level {level} ({plan.width}x{plan.height})")
        mip_maps.append(MipMap(width=plan.width, height=plan.height, size=plan.size, data=data))
    return tuple(mip_maps)


def read_txi(fp: BinaryIO, header: TxbHeader, *, strict_boundary: bool = True) -> bytes:
    """Read everything after the declared pixel data as TXI data.

    The boundary is `128 + data_size` from the header, which can lie past the
    last planned mip level when the chain stopped early.
    """

    try:
        end = stream_size(fp)
    except OSError as e:
        raise TruncatedReadError("TXI data") from e

    start = header.data_end
    if end < start:
        if strict_boundary:
            raise TruncatedReadError("TXB pixel data", expected=header.data_size, actual=max(end - HEADER_SIZE, 0))
        log.warning("TXB stream ends at %d, before the declared data end %d; no TXI data", end, start)
        return b""

    try:
        fp.seek(start, io.SEEK_SET)
    except OSError as e:
        raise TruncatedReadError("TXI data") from e

    txi = read_exact(fp, end - start, what="TXI data")
    log.debug("read %d bytes of TXI data", len(txi))
    return txi


def _decode(fp: BinaryIO, *, strict_boundary: bool) -> DecodedTxb:
    header = parse_txb_header(fp)
    info = lookup_encoding(
        header.encoding,
        width=header.width,
        height=header.height,
        mip_map_count=header.mip_map_count,
        data_size=header.data_size,
    )
    log.debug(
        "TXB header: %dx%d, encoding 0x%02X, %d mip maps, %d data bytes",
        header.width,
        header.height,
        header.encoding,
        header.mip_map_count,
        header.data_size,
    )

    plans = plan_for_header(header, info)
    mip_maps = read_mip_maps(fp, plans)
    txi = read_txi(fp, header, strict_boundary=strict_boundary)

    image = TextureImage(
        compressed=info.compressed,
        has_alpha=info.has_alpha,
        format=info.format,
        format_raw=info.format_raw,
        mip_maps=mip_maps,
    )
    return DecodedTxb(header=header, image=image, txi=txi)


def decode_txb(fp: BinaryIO, *, name: str | None = None, strict_boundary: bool = True) -> DecodedTxb:
    """Decode a TXB stream positioned at offset 0.

    The stream is owned by this call and closed before it returns, on
    success and on failure. Format and I/O failures are raised as
    `TxbReadError` with the specific error as its cause.
    """

    try:
        try:
            return _decode(fp, strict_boundary=strict_boundary)
        except (TxbFormatError, OSError) as e:
            raise TxbReadError(e, name=name) from e
    finally:
        fp.close()


def decode_txb_bytes(data: bytes, *, name: str | None = None, strict_boundary: bool = True) -> DecodedTxb:
    return decode_txb(io.BytesIO(bytes(data)), name=name, strict_boundary=strict_boundary)


def load_txb(path: str | Path, *, strict_boundary: bool = True) -> DecodedTxb:
    p = Path(path)
    try:
        fp = p.open("rb")
    except OSError as e:
        raise TxbReadError(e, name=str(p)) from e
    return decode_txb(fp, name=str(p), strict_boundary=strict_boundary)
