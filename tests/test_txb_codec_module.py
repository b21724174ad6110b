from __future__ import annotations

import io
import struct

import pytest

from txb_py import (
    TruncatedReadError,
    TxbReadError,
    UnknownEncodingError,
    UnsupportedEncodingError,
    decode_txb,
    decode_txb_bytes,
)
from txb_py.txb import PixelFormat, StorageEncoding


def _txb_bytes(
    *,
    encoding: int,
    width: int,
    height: int,
    mip_map_count: int,
    data_size: int,
    pixel_data: bytes | None = None,
    txi: bytes = b"",
) -> bytes:
    header = struct.pack("<IfHHBBHf", data_size, 1.0, width, height, encoding, mip_map_count, 0x0101, 0.0)
    header += b"\x00" * 108
    assert len(header) == 128
    if pixel_data is None:
        pixel_data = bytes(i & 0xFF for i in range(data_size))
    return header + pixel_data + txi


class _CountingStream(io.BytesIO):
    def __init__(self, data: bytes):
        super().__init__(data)
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()


def test_decode_single_bgra_level() -> None:
    pixels = bytes(range(64))
    decoded = decode_txb_bytes(
        _txb_bytes(encoding=0x04, width=4, height=4, mip_map_count=1, data_size=64, pixel_data=pixels)
    )

    image = decoded.image
    assert image.compressed is False
    assert image.has_alpha is True
    assert image.format is PixelFormat.BGRA
    assert image.format_raw is StorageEncoding.RGBA8
    assert image.mip_map_count == 1
    mip = image.mip_maps[0]
    assert (mip.width, mip.height, mip.size) == (4, 4, 64)
    assert mip.data == pixels
    assert decoded.txi == b""
    assert decoded.txi_stream() is None


def test_decode_dxt1_two_levels() -> None:
    pixels = b"A" * 32 + b"B" * 8
    decoded = decode_txb_bytes(
        _txb_bytes(encoding=0x0A, width=8, height=8, mip_map_count=2, data_size=40, pixel_data=pixels, txi=b"mipmap 1\n")
    )

    image = decoded.image
    assert image.compressed is True
    assert image.has_alpha is False
    assert image.format is PixelFormat.BGR
    assert image.format_raw is StorageEncoding.DXT1
    assert [(m.width, m.height, m.size) for m in image.mip_maps] == [(8, 8, 32), (4, 4, 8)]
    assert image.mip_maps[0].data == b"A" * 32
    assert image.mip_maps[1].data == b"B" * 8
    assert decoded.txi == b"mipmap 1\n"


def test_decode_early_termination_reads_txi_from_declared_end() -> None:
    # Level 1 needs 8 bytes but only 3 are left; the 3 bytes are skipped, not TXI.
    decoded = decode_txb_bytes(
        _txb_bytes(encoding=0x0A, width=8, height=8, mip_map_count=2, data_size=35, txi=b"blending additive\n")
    )

    assert [(m.width, m.height, m.size) for m in decoded.image.mip_maps] == [(8, 8, 32)]
    assert decoded.image.data_size == 32
    assert decoded.txi == b"blending additive\n"


def test_decode_dxt5_format() -> None:
    decoded = decode_txb_bytes(_txb_bytes(encoding=0x0C, width=4, height=4, mip_map_count=3, data_size=48))
    image = decoded.image
    assert (image.compressed, image.has_alpha) == (True, True)
    assert image.format is PixelFormat.BGRA
    assert image.format_raw is StorageEncoding.DXT5
    assert [(m.width, m.height, m.size) for m in image.mip_maps] == [(4, 4, 16), (2, 2, 16), (1, 1, 16)]


def test_decode_unsupported_encoding() -> None:
    with pytest.raises(TxbReadError) as ei:
        decode_txb_bytes(_txb_bytes(encoding=0x09, width=4, height=4, mip_map_count=1, data_size=16))

    assert isinstance(ei.value.cause, UnsupportedEncodingError)
    assert isinstance(ei.value.__cause__, UnsupportedEncodingError)
    assert str(ei.value).startswith("failed reading TXB file")


def test_decode_unknown_encoding_carries_fields() -> None:
    with pytest.raises(TxbReadError) as ei:
        decode_txb_bytes(
            _txb_bytes(encoding=0xFF, width=8, height=16, mip_map_count=2, data_size=40),
            name="test.txb",
        )

    cause = ei.value.cause
    assert isinstance(cause, UnknownEncodingError)
    assert cause.encoding == 0xFF
    assert (cause.width, cause.height, cause.mip_map_count, cause.data_size) == (8, 16, 2, 40)
    assert ei.value.name == "test.txb"
    assert str(ei.value) == "failed reading TXB file 'test.txb': Unknown TXB encoding 0xFF (8x16, 2, 40)"


def test_decode_zero_data_size_keeps_txi() -> None:
    decoded = decode_txb_bytes(
        _txb_bytes(encoding=0x04, width=4, height=4, mip_map_count=1, data_size=0, txi=b"0123456789")
    )
    assert decoded.image.mip_maps == ()
    assert decoded.image.width == 0
    assert len(decoded.txi) == 10
    stream = decoded.txi_stream()
    assert stream is not None
    assert stream.read() == b"0123456789"


def test_decode_truncated_pixel_data() -> None:
    raw = _txb_bytes(encoding=0x0A, width=8, height=8, mip_map_count=2, data_size=40)
    with pytest.raises(TxbReadError) as ei:
        decode_txb_bytes(raw[:128 + 20])

    cause = ei.value.cause
    assert isinstance(cause, TruncatedReadError)
    assert (cause.expected, cause.actual) == (32, 20)


def test_decode_truncated_header() -> None:
    with pytest.raises(TxbReadError) as ei:
        decode_txb_bytes(b"\x00" * 64)
    assert isinstance(ei.value.cause, TruncatedReadError)


def test_decode_short_declared_region_strict_and_lenient() -> None:
    # Chain stops after 32 bytes but the stream ends before the declared 35.
    raw = _txb_bytes(encoding=0x0A, width=8, height=8, mip_map_count=2, data_size=35)[: 128 + 33]

    with pytest.raises(TxbReadError) as ei:
        decode_txb_bytes(raw)
    assert isinstance(ei.value.cause, TruncatedReadError)

    decoded = decode_txb_bytes(raw, strict_boundary=False)
    assert decoded.image.mip_map_count == 1
    assert decoded.txi == b""


def test_decode_closes_stream_once_on_success_and_failure() -> None:
    ok = _CountingStream(_txb_bytes(encoding=0x04, width=4, height=4, mip_map_count=1, data_size=64))
    decode_txb(ok)
    assert ok.close_calls == 1

    bad = _CountingStream(_txb_bytes(encoding=0x09, width=4, height=4, mip_map_count=1, data_size=64))
    with pytest.raises(TxbReadError):
        decode_txb(bad)
    assert bad.close_calls == 1


def test_decode_same_buffer_twice_is_identical() -> None:
    raw = _txb_bytes(encoding=0x0C, width=16, height=16, mip_map_count=5, data_size=400, txi=b"proceduretype cycle\n")

    first = decode_txb_bytes(raw)
    second = decode_txb_bytes(raw)

    assert first == second
    assert first.image.mip_map_count == 5
