"""Default shift colors and the text color readable on top of them."""

from shiftcal.services.shift_cycle import Shift

DEFAULT_SHIFT_COLORS: dict[str, dict[str, str]] = {
    Shift.EARLY.value: {"light": "#fecaca", "dark": "#7f1d1d"},
    Shift.MIDDAY.value: {"light": "#bfdbfe", "dark": "#1e3a8a"},
    Shift.NIGHT.value: {"light": "#e9d5ff", "dark": "#581c87"},
    Shift.OFF.value: {"light": "#dcfce7", "dark": "#14532d"},
}

LUMINANCE_THRESHOLD = 186


def text_color_for_background(bg_color: str) -> str:
    """Return ``"black"`` or ``"white"``, whichever contrasts better with ``bg_color``."""
    color = bg_color.lstrip("#")[:6]
    r, g, b = (int(color[i:i + 2], 16) for i in (0, 2, 4))
    luminance = r * 0.299 + g * 0.587 + b * 0.114
    return "black" if luminance > LUMINANCE_THRESHOLD else "white"


def merge_with_defaults(colors: dict | None) -> dict[str, dict[str, str]]:
    """Fill shifts or themes missing from stored colors with the defaults."""
    merged = {shift: dict(pair) for shift, pair in DEFAULT_SHIFT_COLORS.items()}
    for shift, pair in (colors or {}).items():
        if shift in merged and isinstance(pair, dict):
            merged[shift].update({k: v for k, v in pair.items() if k in ("light", "dark")})
    return merged
