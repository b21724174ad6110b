from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..settings import TxbSettings
from .texture import TextureImage
from .txb_codec import DecodedTxb, load_txb


@dataclass(slots=True)
class TxbFile:
    """Path-based access to a single `.txb` texture."""

    path: Path
    settings: TxbSettings = field(default_factory=TxbSettings)

    @classmethod
    def from_path(cls, path: str | Path, settings: TxbSettings | None = None) -> "TxbFile":
        return cls(path=Path(path), settings=settings if settings is not None else TxbSettings())

    def decode(self) -> DecodedTxb:
        return load_txb(self.path, strict_boundary=self.settings.strict_boundary)

    def image(self) -> TextureImage:
        return self.decode().image

    def txi(self) -> bytes:
        return self.decode().txi

    def export_mip(self, level: int = 0, out_path: str | Path | None = None) -> Path:
        """Write mip level `level` as an image file (PNG unless `out_path` says otherwise)."""

        from ..images.pil_export import mip_to_pil

        if out_path is None:
            if self.settings.output_dir is None:
                raise ValueError("no out_path given and no output_dir configured (TXB_OUTPUT_DIR)")
            out_path = self.settings.output_dir / f"{self.path.stem}_mip{level}.png"

        out = Path(out_path)
        img = mip_to_pil(self.image(), level)
        out.parent.mkdir(parents=True, exist_ok=True)
        img.save(out)
        return out
