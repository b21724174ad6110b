from __future__ import annotations


class TxbError(Exception):
    """Base exception for txb-py."""


class TxbFormatError(TxbError):
    """Raised when a TXB stream is malformed or uses an unsupported layout."""


class _EncodingError(TxbFormatError):
    def __init__(self, message: str, *, encoding: int, width: int, height: int, mip_map_count: int, data_size: int):
        super().__init__(message)
        self.encoding = int(encoding)
        self.width = int(width)
        self.height = int(height)
        self.mip_map_count = int(mip_map_count)
        self.data_size = int(data_size)


class UnknownEncodingError(_EncodingError):
    """Raised when the header's encoding byte is not a known TXB encoding."""


class UnsupportedEncodingError(_EncodingError):
    """Raised for an encoding byte that is recognized but not implemented."""


class TruncatedReadError(TxbFormatError):
    """Raised when the stream delivers fewer bytes than a read required."""

    def __init__(self, what: str, *, expected: int | None = None, actual: int | None = None):
        if expected is None:
            message = f"{what}: read error"
        else:
            message = f"{what}: expected {expected} bytes, got {actual}"
        super().__init__(message)
        self.what = what
        self.expected = expected
        self.actual = actual


class TxbReadError(TxbError):
    """Top-level failure of a TXB decode; `cause` holds the specific error."""

    def __init__(self, cause: BaseException, *, name: str | None = None):
        if name:
            message = f"failed reading TXB file '{name}': {cause}"
        else:
            message = f"failed reading TXB file: {cause}"
        super().__init__(message)
        self.cause = cause
        self.name = name
