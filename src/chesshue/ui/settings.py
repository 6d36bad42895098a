"""AppSettings — user-configurable viewer settings."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chesshue.visual.palette import DEFAULT_PALETTE_ID
from chesshue.visual.snapshot import DEFAULT_PIECE_OPACITY, InteractionSnapshot


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Palette
    palette_id: str = DEFAULT_PALETTE_ID

    # Board
    dark_mode: bool = False
    piece_opacity: float = DEFAULT_PIECE_OPACITY  # 0.0–1.0
    show_coordinates: bool = True

    @classmethod
    def from_snapshot(cls, snapshot: InteractionSnapshot) -> AppSettings:
        return cls(
            palette_id=snapshot.palette_id,
            dark_mode=snapshot.dark_mode,
            piece_opacity=snapshot.piece_opacity,
        )

    def apply_to_snapshot(self, snapshot: InteractionSnapshot) -> InteractionSnapshot:
        """Copy of *snapshot* carrying these settings."""
        return replace(
            snapshot,
            palette_id=self.palette_id,
            dark_mode=self.dark_mode,
            piece_opacity=self.piece_opacity,
        )
