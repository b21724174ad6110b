from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..errors import UnknownEncodingError, UnsupportedEncodingError


ENCODING_BGRA = 0x04
ENCODING_DXT1 = 0x0A
ENCODING_DXT5 = 0x0C

# Some 8bpp compression; no minimum data size (2x2 and 1x1 mip maps are exactly that big).
# The pixel layout is not plain grayscale, paletted, RGB2222 or RGB332.
ENCODING_UNSUPPORTED_8BPP = 0x09


class PixelFormat(Enum):
    """Logical channel layout, independent of how the bytes are stored."""

    BGR = "bgr"
    BGRA = "bgra"


class StorageEncoding(Enum):
    """Concrete on-disk pixel encoding."""

    RGBA8 = "rgba8"
    DXT1 = "dxt1"
    DXT5 = "dxt5"


@dataclass(frozen=True, slots=True)
class EncodingInfo:
    encoding: int
    compressed: bool
    has_alpha: bool
    format: PixelFormat
    format_raw: StorageEncoding
    min_size: int  # smallest level size in bytes (one pixel / one block)
    density: tuple[int, int]  # bytes per pixel as (numerator, denominator)

    def level_size(self, width: int, height: int) -> int:
        """Byte estimate for a full level of `width` x `height` pixels.

        Computed in 32-bit unsigned arithmetic, wrapping like the encoder does.
        """

        num, den = self.density
        return ((int(width) * int(height) * num) & 0xFFFFFFFF) // den


_ENCODINGS: Mapping[int, EncodingInfo] = MappingProxyType(
    {
        ENCODING_BGRA: EncodingInfo(
            encoding=ENCODING_BGRA,
            compressed=False,
            has_alpha=True,
            format=PixelFormat.BGRA,
            format_raw=StorageEncoding.RGBA8,
            min_size=4,
            density=(4, 1),
        ),
        ENCODING_DXT1: EncodingInfo(
            encoding=ENCODING_DXT1,
            compressed=True,
            has_alpha=False,
            format=PixelFormat.BGR,
            format_raw=StorageEncoding.DXT1,
            min_size=8,
            density=(1, 2),
        ),
        ENCODING_DXT5: EncodingInfo(
            encoding=ENCODING_DXT5,
            compressed=True,
            has_alpha=True,
            format=PixelFormat.BGRA,
            format_raw=StorageEncoding.DXT5,
            min_size=16,
            density=(1, 1),
        ),
    }
)


def supported_encodings() -> Mapping[int, EncodingInfo]:
    return _ENCODINGS


def lookup_encoding(encoding: int, *, width: int, height: int, mip_map_count: int, data_size: int) -> EncodingInfo:
    """Resolve a header encoding byte.

    Raises `UnsupportedEncodingError` for the known-but-unimplemented 0x09 and
    `UnknownEncodingError` for anything else not in the table.
    """

    info = _ENCODINGS.get(int(encoding))
    if info is not None:
        return info

    fields = dict(
        encoding=encoding,
        width=width,
        height=height,
        mip_map_count=mip_map_count,
        data_size=data_size,
    )
    if encoding == ENCODING_UNSUPPORTED_8BPP:
        raise UnsupportedEncodingError(f"Unsupported TXB encoding 0x{encoding:02X}", **fields)
    raise UnknownEncodingError(
        f"Unknown TXB encoding 0x{encoding:02X} ({width}x{height}, {mip_map_count}, {data_size})",
        **fields,
    )
