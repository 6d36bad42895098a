"""Plain-data interaction snapshot for saving and permalinks.

``to_dict`` output holds only ``str``/``bool``/``int``/``float``/``list``
/``dict`` values, so any JSON layer can store it without knowing about
chesshue types.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from chesshue.core.piece import PieceClass
from chesshue.visual.highlight import MAX_LOCKED_PIECES
from chesshue.visual.palette import DEFAULT_PALETTE_ID

_LOGGER = logging.getLogger(__name__)

DEFAULT_PIECE_OPACITY = 0.7


@dataclass(slots=True, frozen=True)
class InteractionSnapshot:
    palette_id: str = DEFAULT_PALETTE_ID
    locked_pieces: tuple[PieceClass, ...] = field(default_factory=tuple)
    compare_mode: bool = False
    dark_mode: bool = False
    current_move: int = 0
    piece_opacity: float = DEFAULT_PIECE_OPACITY

    def to_dict(self) -> dict[str, Any]:
        return {
            "paletteId": self.palette_id,
            "lockedPieces": [piece.to_dict() for piece in self.locked_pieces],
            "compareMode": self.compare_mode,
            "darkMode": self.dark_mode,
            "currentMove": self.current_move,
            "pieceOpacity": self.piece_opacity,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> InteractionSnapshot:
        """Rehydrate leniently: bad fields fall back to their defaults."""
        default = cls()

        palette_id = data.get("paletteId", default.palette_id)
        if not isinstance(palette_id, str) or not palette_id:
            _LOGGER.warning("Snapshot paletteId %r invalid, using default", palette_id)
            palette_id = default.palette_id

        return cls(
            palette_id=palette_id,
            locked_pieces=_read_locks(data.get("lockedPieces", ())),
            compare_mode=_read_bool(data, "compareMode", default.compare_mode),
            dark_mode=_read_bool(data, "darkMode", default.dark_mode),
            current_move=max(0, _read_int(data, "currentMove", default.current_move)),
            piece_opacity=min(
                1.0, max(0.0, _read_float(data, "pieceOpacity", default.piece_opacity))
            ),
        )


# ── Field readers ────────────────────────────────────────────────────────────


def _read_bool(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if isinstance(value, bool):
        return value
    _LOGGER.warning("Snapshot field %s=%r is not a boolean", key, value)
    return default


def _read_int(data: Mapping[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    _LOGGER.warning("Snapshot field %s=%r is not an integer", key, value)
    return default


def _read_float(data: Mapping[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    _LOGGER.warning("Snapshot field %s=%r is not a number", key, value)
    return default


def _read_locks(raw: object) -> tuple[PieceClass, ...]:
    if not isinstance(raw, (list, tuple)):
        _LOGGER.warning("Snapshot lockedPieces %r is not a list", raw)
        return ()
    locks: list[PieceClass] = []
    for entry in raw:
        try:
            piece = PieceClass.from_dict(entry)
        except (TypeError, ValueError) as exc:
            _LOGGER.warning("Dropping snapshot lock %r: %s", entry, exc)
            continue
        if piece in locks:
            locks.remove(piece)
        locks.append(piece)
    return tuple(locks[-MAX_LOCKED_PIECES:])
