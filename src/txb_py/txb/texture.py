from __future__ import annotations

from dataclasses import dataclass

from .encodings import PixelFormat, StorageEncoding


@dataclass(frozen=True, slots=True)
class MipMap:
    width: int
    height: int
    size: int  # byte size of `data`
    data: bytes


@dataclass(frozen=True, slots=True)
class TextureImage:
    """Decoded texture: format description plus its mip chain.

    `mip_maps[0]` is full resolution; each following level is the next lower
    one. The chain may be shorter than the header's mip map count.
    """

    compressed: bool
    has_alpha: bool
    format: PixelFormat
    format_raw: StorageEncoding
    mip_maps: tuple[MipMap, ...]

    @property
    def mip_map_count(self) -> int:
        return len(self.mip_maps)

    @property
    def width(self) -> int:
        return self.mip_maps[0].width if self.mip_maps else 0

    @property
    def height(self) -> int:
        return self.mip_maps[0].height if self.mip_maps else 0

    @property
    def data_size(self) -> int:
        return sum(m.size for m in self.mip_maps)

    def mip_map(self, level: int) -> MipMap:
        if level < 0 or level >= len(self.mip_maps):
            raise IndexError(f"mip level {level} out of range (have {len(self.mip_maps)})")
        return self.mip_maps[level]
