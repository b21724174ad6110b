from __future__ import annotations

import logging
from dataclasses import dataclass

from .encodings import EncodingInfo
from .header import TxbHeader


log = logging.getLogger(__name__)

_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


@dataclass(frozen=True, slots=True)
class MipPlan:
    width: int
    height: int
    size: int


def plan_mip_chain(
    width: int,
    height: int,
    data_size: int,
    mip_map_count: int,
    *,
    level_size: int,
    min_size: int,
) -> list[MipPlan]:
    """Derive the mip levels stored in a TXB data block.

    TXB has no per-level size table, so every level size is rederived the
    way the encoder computed it: `level_size` is the level-0 estimate, each
    level quarters it and `min_size` is a floor. Planning stops early (not
    an error) when a level is non-square below 4 pixels or when the
    remaining `data_size` cannot hold the next level.
    """

    width &= _U16
    height &= _U16
    estimate = level_size & _U32
    remaining = data_size & _U32
    min_size &= _U32

    plans: list[MipPlan] = []
    for _ in range(mip_map_count & 0xFF):
        level_width = max(width, 1)
        level_height = max(height, 1)

        # Checked on the running (unclamped) dimensions.
        if (width < 4 or height < 4) and width != height:
            log.debug("mip chain stops at %d levels: non-square level %dx%d below block size", len(plans), width, height)
            break

        size = max(estimate, min_size)
        if remaining < size:
            log.debug("mip chain stops at %d levels: data size exhausted (%d < %d)", len(plans), remaining, size)
            break

        remaining -= size
        plans.append(MipPlan(width=level_width, height=level_height, size=size))

        width >>= 1
        height >>= 1
        estimate >>= 2

        if width < 1 and height < 1:
            break

    return plans


def plan_for_header(header: TxbHeader, info: EncodingInfo) -> list[MipPlan]:
    return plan_mip_chain(
        header.width,
        header.height,
        header.data_size,
        header.mip_map_count,
        level_size=info.level_size(header.width, header.height),
        min_size=info.min_size,
    )
