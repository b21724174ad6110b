from __future__ import annotations

import io
from typing import BinaryIO

from ..errors import TruncatedReadError


def read_exact(fp: BinaryIO, size: int, *, what: str) -> bytes:
    """Read exactly `size` bytes or raise `TruncatedReadError`.

    `OSError` from the underlying stream is reported the same way, chained.
    """

    if size < 0:
        raise ValueError("size must be >= 0")
    if size == 0:
        return b""

    try:
        data = fp.read(size)
    except OSError as e:
        raise TruncatedReadError(what) from e

    if data is None:
        data = b""
    if len(data) != size:
        raise TruncatedReadError(what, expected=size, actual=len(data))
    return bytes(data)


def stream_size(fp: BinaryIO) -> int:
    """Return the total stream length, leaving the position unchanged."""

    pos = fp.tell()
    try:
        return fp.seek(0, io.SEEK_END)
    finally:
        fp.seek(pos, io.SEEK_SET)

