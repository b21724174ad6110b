from __future__ import annotations

from .pil_export import mip_map_to_pil, mip_to_pil

__all__ = [
    "mip_map_to_pil",
    "mip_to_pil",
]
