from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True, slots=True)
class TxbSettings:
    """Simple settings for tool authors.

    Design goals:
    - No required dependencies.
    - Works with plain environment variables (CI-friendly).
    - Optionally supports `.env` if `python-dotenv` is installed.

    Recognized env vars:
    - `TXB_OUTPUT_DIR`: default output directory for image exports.
    - `TXB_TEMP_DIR`: scratch directory for tools.
    - `TXB_STRICT_BOUNDARY`: set to `0`/`false`/`no`/`off` to accept streams
      that end before the declared pixel data does (the TXI data is then empty).

    `TXB_TEMP_DIR` can include the placeholder `{output_dir}`.
    """

    output_dir: Path | None = None
    temp_dir: Path | None = None
    strict_boundary: bool = True

    @staticmethod
    def _expand_placeholders(value: str, *, output_dir: Path | None) -> str:
        if output_dir is not None:
            value = value.replace("{output_dir}", str(output_dir))
        return value

    @classmethod
    def load(cls, *, dotenv_path: str | Path | None = None) -> "TxbSettings":
        """Load settings from env vars (and optionally a `.env`).

        If `python-dotenv` is available, this will load the `.env` file into the
        environment first.
        """

        if dotenv_path is None:
            dotenv_path = ".env"

        try:
            from dotenv import load_dotenv  # type: ignore

            load_dotenv(dotenv_path=dotenv_path, override=False)
        except Exception:
            # No dependency or no file; env-only is still fine.
            pass

        raw_out = os.getenv("TXB_OUTPUT_DIR")
        output_dir = Path(raw_out).expanduser() if raw_out else None

        raw_tmp = os.getenv("TXB_TEMP_DIR")
        if raw_tmp:
            raw_tmp = cls._expand_placeholders(raw_tmp, output_dir=output_dir)
        temp_dir = Path(raw_tmp).expanduser() if raw_tmp else None

        raw_strict = os.getenv("TXB_STRICT_BOUNDARY")
        strict = True
        if raw_strict is not None and raw_strict.strip().lower() in _FALSE_VALUES:
            strict = False

        return cls(output_dir=output_dir, temp_dir=temp_dir, strict_boundary=strict)
