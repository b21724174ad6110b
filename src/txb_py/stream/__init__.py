from __future__ import annotations

from .reader import read_exact, stream_size

__all__ = [
    "read_exact",
    "stream_size",
]
