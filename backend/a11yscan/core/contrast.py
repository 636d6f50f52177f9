"""
WCAG 2.x contrast math: hex color -> relative luminance -> contrast ratio.
"""
import re
from typing import Tuple

from a11yscan.core.exceptions import ValidationError
from a11yscan.models.schemas import ContrastResult

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

_HEX_RE = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def normalize_hex(value: str) -> str:
    """Return `value` as '#rrggbb' (lowercase). Accepts 3 or 6 digits, with or without '#'."""
    if not isinstance(value, str):
        raise ValidationError(f"Invalid hex color: {value!r}", field="color", value=repr(value))
    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if not _HEX_RE.match(digits):
        raise ValidationError(f"Invalid hex color: {value!r}", field="color", value=value)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return "#" + digits.lower()


def _rgb(value: str) -> Tuple[float, float, float]:
    digits = normalize_hex(value)[1:]
    return (
        int(digits[0:2], 16) / 255,
        int(digits[2:4], 16) / 255,
        int(digits[4:6], 16) / 255,
    )


def _linear(channel: float) -> float:
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(value: str) -> float:
    r, g, b = (_linear(c) for c in _rgb(value))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(color_a: str, color_b: str) -> float:
    l1 = relative_luminance(color_a)
    l2 = relative_luminance(color_b)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def recommendation(ratio: float) -> str:
    if ratio >= 7:
        return "Excellent! Passes WCAG AAA for all text sizes."
    if ratio >= 4.5:
        return "Good. Passes WCAG AA for normal text and AAA for large text."
    if ratio >= 3:
        return "Acceptable for large text only. Fails for normal text."
    return "Poor contrast. Does not meet WCAG requirements. Consider using different colors."


def check_contrast(foreground: str, background: str) -> ContrastResult:
    fg = normalize_hex(foreground)
    bg = normalize_hex(background)
    ratio = contrast_ratio(fg, bg)
    # thresholds apply to the unrounded ratio
    return ContrastResult(
        foreground=fg,
        background=bg,
        ratio=round(ratio, 2),
        wcag_aa_normal=ratio >= AA_NORMAL,
        wcag_aa_large=ratio >= AA_LARGE,
        wcag_aaa_normal=ratio >= AAA_NORMAL,
        wcag_aaa_large=ratio >= AAA_LARGE,
        recommendation=recommendation(ratio),
    )
