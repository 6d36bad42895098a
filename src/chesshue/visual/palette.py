"""Palette resolver: piece class → display color.

Visit data never stores colors; every color is looked up here at render
time, so switching palette only swaps the lookup table.
"""

from __future__ import annotations

import colorsys
import logging
import random
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from chesshue.core.enums import Color, PieceType
from chesshue.core.piece import ALL_PIECE_CLASSES, PIECE_TYPE_ORDER, PieceClass

_LOGGER = logging.getLogger(__name__)

FALLBACK_COLOR = "#808080"
DEFAULT_PALETTE_ID = "modern"
CUSTOM_PALETTE_ID = "custom"

_HEX_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and _HEX_RE.match(value) is not None


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Convert HSL (degrees, percent, percent) to ``#RRGGBB``."""
    r, g, b = colorsys.hls_to_rgb(
        (hue % 360) / 360.0, lightness / 100.0, saturation / 100.0
    )
    return "#{:02X}{:02X}{:02X}".format(
        round(r * 255), round(g * 255), round(b * 255)
    )


@dataclass(frozen=True, slots=True)
class Palette:
    """Named mapping of the 12 piece classes to hex colors.

    Custom palettes may leave slots unset; those resolve to
    :data:`FALLBACK_COLOR`.
    """

    id: str
    name: str
    colors: dict[PieceClass, str] = field(default_factory=dict)

    def resolve(self, piece_type: PieceType, color: Color) -> str:
        return self.colors.get(PieceClass(piece_type, color), FALLBACK_COLOR)

    def color_of(self, piece_class: PieceClass) -> str:
        return self.resolve(piece_class.piece_type, piece_class.color)

    def with_color(self, piece_class: PieceClass, hex_color: str) -> Palette:
        """Copy as a custom palette with one slot replaced."""
        if not is_hex_color(hex_color):
            raise ValueError(f"Invalid hex color: {hex_color!r}")
        colors = dict(self.colors)
        colors[piece_class] = hex_color.upper()
        return Palette(CUSTOM_PALETTE_ID, "Custom", colors)

    def side_map(self, color: Color) -> dict[str, str]:
        """Plain ``{piece letter: hex}`` table for one side."""
        return {pt.value: self.resolve(pt, color) for pt in PIECE_TYPE_ORDER}


def _palette(palette_id: str, name: str, white: str, black: str) -> Palette:
    """Build a catalog palette from space-separated K Q R B N P hex lists."""
    colors: dict[PieceClass, str] = {}
    for side, hexes in ((Color.WHITE, white), (Color.BLACK, black)):
        pairs = zip(PIECE_TYPE_ORDER, hexes.split(), strict=True)
        for piece_type, hex_color in pairs:
            colors[PieceClass(piece_type, side)] = hex_color
    return Palette(palette_id, name, colors)


# ── Catalog ──────────────────────────────────────────────────────────────────
#                     K       Q       R       B       N       P

_CATALOG: tuple[Palette, ...] = (
    _palette(
        "hotCold",
        "Hot & Cold",
        "#8B0000 #DC143C #FF4500 #FF8C00 #FFA500 #FFD700",
        "#000080 #0000CD #1E90FF #00BFFF #40E0D0 #87CEEB",
    ),
    _palette(
        "medieval",
        "Medieval",
        "#8B4513 #B22222 #DAA520 #6B8E23 #CD853F #F5DEB3",
        "#2F4F4F #483D8B #556B2F #708090 #4B0082 #696969",
    ),
    _palette(
        "egyptian",
        "Egyptian",
        "#D4AF37 #C19A6B #E2725B #40826D #F4C430 #EDC9AF",
        "#1C39BB #0F52BA #2E5894 #8B4000 #5D3A1A #3B2F2F",
    ),
    _palette(
        "roman",
        "Roman Empire",
        "#7B1E1E #9B111E #C9A227 #E5D3B3 #B87333 #F3E5AB",
        "#36013F #4B0082 #5B3256 #2C1608 #3D2B1F #6F4E37",
    ),
    _palette(
        "modern",
        "Modern",
        "#F59E0B #EF4444 #EC4899 #8B5CF6 #10B981 #FBBF24",
        "#1E3A8A #3B82F6 #06B6D4 #6366F1 #14B8A6 #64748B",
    ),
    _palette(
        "greyscale",
        "Greyscale",
        "#FFFFFF #E0E0E0 #C8C8C8 #B0B0B0 #989898 #F0F0F0",
        "#000000 #202020 #383838 #505050 #686868 #7A7A7A",
    ),
    _palette(
        "japanese",
        "Japanese",
        "#BC002D #E95464 #F8B4C4 #D9A62E #F7C242 #FFF1E6",
        "#1B1B3A #2E4057 #264653 #5B6B5D #3A5F0B #4A4A4A",
    ),
    _palette(
        "nordic",
        "Nordic",
        "#E8F1F2 #B3D9E0 #8FBCBB #88C0D0 #D8DEE9 #ECEFF4",
        "#2E3440 #3B4252 #434C5E #4C566A #5E81AC #81A1C1",
    ),
    _palette(
        "artdeco",
        "Art Deco",
        "#D4AF37 #F2E3BC #C0C0C0 #B8860B #E6BE8A #FFF8DC",
        "#0B0B0B #1A237E #004D40 #311B92 #3E2723 #263238",
    ),
    _palette(
        "tropical",
        "Tropical",
        "#FF6F61 #FFB347 #FFD166 #06D6A0 #F78FB3 #FFE66D",
        "#073B4C #118AB2 #0B6E4F #2A9D8F #264653 #1D3557",
    ),
    _palette(
        "cyberpunk",
        "Cyberpunk",
        "#FF00FF #FF2079 #FCEE0C #00FFFF #FF6EC7 #F8F8FF",
        "#0D0221 #261447 #2DE2E6 #541388 #791E94 #3D0066",
    ),
    _palette(
        "autumn",
        "Autumn",
        "#B7410E #D2691E #E3A857 #C04000 #FF7518 #F4A460",
        "#3B1F0B #5C4033 #6B4226 #4B5320 #8B4513 #654321",
    ),
    _palette(
        "ocean",
        "Ocean",
        "#E0FFFF #7FFFD4 #AFEEEE #40E0D0 #B0E0E6 #F0FFFF",
        "#000080 #003366 #004F6D #006994 #1B4F72 #2E8B57",
    ),
    _palette(
        "desert",
        "Desert",
        "#EDC9AF #E97451 #C2B280 #D2B48C #F4A460 #FAEBD7",
        "#5C4033 #7B3F00 #8B5A2B #6F4E37 #704214 #826644",
    ),
    _palette(
        "cosmic",
        "Cosmic",
        "#E6E6FA #DA70D6 #FFD700 #FF69B4 #ADD8E6 #F8F8FF",
        "#0B0C10 #1F1147 #2C003E #191970 #301934 #4B0082",
    ),
    _palette(
        "vintage",
        "Vintage",
        "#C08081 #E0B0A0 #D8BFD8 #BC8F8F #F5DEB3 #FAF0E6",
        "#4A3728 #5D4E60 #3E4A3D #6B4F4F #556B2F #704241",
    ),
)

PALETTES: dict[str, Palette] = {palette.id: palette for palette in _CATALOG}
OFFICIAL_PALETTE_IDS: tuple[str, ...] = tuple(PALETTES)


def get_palette(palette_id: str) -> Palette:
    """Catalog lookup; unknown ids fall back to the default palette."""
    palette = PALETTES.get(palette_id)
    if palette is None:
        _LOGGER.warning(
            "Unknown palette %r, using %r", palette_id, DEFAULT_PALETTE_ID
        )
        return PALETTES[DEFAULT_PALETTE_ID]
    return palette


def palette_display_name(palette_id: str) -> str:
    if palette_id == CUSTOM_PALETTE_ID:
        return "Custom"
    palette = PALETTES.get(palette_id)
    return palette.name if palette is not None else palette_id


def random_custom_palette(rng: random.Random | None = None) -> Palette:
    """Custom palette with random HSL colors (S 50–90 %, L 35–65 %)."""
    rng = rng or random.Random()
    colors = {
        piece_class: hsl_to_hex(
            rng.uniform(0, 360), rng.uniform(50, 90), rng.uniform(35, 65)
        )
        for piece_class in ALL_PIECE_CLASSES
    }
    return Palette(CUSTOM_PALETTE_ID, "Custom", colors)


# ── Active palette ───────────────────────────────────────────────────────────

PaletteCallback = Callable[[Palette], None]


class PaletteContext:
    """The single active palette, owned by the composition root.

    Single writer, last write wins. Listeners are notified after every
    change so views can re-render with the new lookup table.
    """

    __slots__ = ("_active", "_custom", "on_changed", "__weakref__")

    def __init__(
        self,
        palette_id: str = DEFAULT_PALETTE_ID,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self._custom = random_custom_palette(rng)
        self._active = self._lookup(palette_id)
        self.on_changed: list[PaletteCallback] = []

    @property
    def active(self) -> Palette:
        return self._active

    @property
    def custom(self) -> Palette:
        return self._custom

    def resolve(self, piece_type: PieceType, color: Color) -> str:
        return self._active.resolve(piece_type, color)

    def select(self, palette_id: str) -> Palette:
        """Activate a catalog palette, or the custom one for ``"custom"``."""
        self._set_active(self._lookup(palette_id))
        return self._active

    def set_custom_color(self, piece_class: PieceClass, hex_color: str) -> Palette:
        """Edit one custom slot and activate the custom palette.

        Invalid colors are logged and ignored.
        """
        try:
            self._custom = self._custom.with_color(piece_class, hex_color)
        except ValueError as exc:
            _LOGGER.warning("Ignoring custom palette edit: %s", exc)
        self._set_active(self._custom)
        return self._active

    def randomize_custom(self, rng: random.Random | None = None) -> Palette:
        self._custom = random_custom_palette(rng)
        self._set_active(self._custom)
        return self._active

    # ── Internal helpers ─────────────────────────────────────────────────

    def _lookup(self, palette_id: str) -> Palette:
        if palette_id == CUSTOM_PALETTE_ID:
            return self._custom
        return get_palette(palette_id)

    def _set_active(self, palette: Palette) -> None:
        self._active = palette
        for callback in list(self.on_changed):
            callback(palette)
