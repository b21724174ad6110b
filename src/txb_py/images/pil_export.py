from __future__ import annotations

from ..txb.encodings import StorageEncoding
from ..txb.texture import MipMap, TextureImage


# Pillow "bcn" decoder variants
_BCN_VARIANTS: dict[StorageEncoding, int] = {
    StorageEncoding.DXT1: 1,
    StorageEncoding.DXT5: 3,
}


def mip_map_to_pil(mip_map: MipMap, format_raw: StorageEncoding):
    """Load one mip level into an RGBA `PIL.Image` for inspection."""

    try:
        from PIL import Image  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("Pillow is required for image export. Install `txb-py[image]`.") from e

    size = (int(mip_map.width), int(mip_map.height))

    if format_raw is StorageEncoding.RGBA8:
        expected = size[0] * size[1] * 4
        if len(mip_map.data) < expected:
            raise ValueError("pixel buffer size mismatch")
        # Raw TXB pixels are stored B, G, R, A.
        return Image.frombytes("RGBA", size, mip_map.data[:expected], "raw", "BGRA")

    variant = _BCN_VARIANTS.get(format_raw)
    if variant is None:
        raise ValueError(f"no image export for {format_raw.name}")
    return Image.frombytes("RGBA", size, mip_map.data, "bcn", variant)


def mip_to_pil(image: TextureImage, level: int = 0):
    return mip_map_to_pil(image.mip_map(level), image.format_raw)
