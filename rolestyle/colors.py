"""Color parsing for role attributes.

Two independent parsers:
- parse_hex_rgb: a plain hex RGB triple, used for chat colors. Lenient about
  short forms (3-digit, 2-digit grey, 1-digit grey).
- parse_rich_color: the structured name color syntax. A single stop is a
  solid color; stops joined by ">" form a gradient; stops joined by "|" form
  a cycle.

Both raise ColorParseError on malformed input. Callers decide whether the
failure is worth logging.
"""
from __future__ import annotations

from typing import List

from .types import RGB, RichColor

MAX_STOPS = 16
_HEX_DIGITS = set("0123456789abcdefABCDEF")


class ColorParseError(ValueError):
    """Raised when a color string cannot be parsed."""

    def __init__(self, spec: str, reason: str) -> None:
        super().__init__(f"{reason}: {spec!r}")
        self.spec = spec
        self.reason = reason


def _strip_hash(text: str) -> str:
    text = text.strip()
    return text[1:] if text.startswith("#") else text


def _is_hex(text: str) -> bool:
    return bool(text) and all(c in _HEX_DIGITS for c in text)


def parse_hex_rgb(text: str) -> RGB:
    """Parse "#RRGGBB", "#RGB", "#GG" or "#G" (the "#" is optional)."""
    digits = _strip_hash(text)
    if not _is_hex(digits):
        raise ColorParseError(text, "invalid hex color")

    n = len(digits)
    if n == 6:
        return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    if n == 3:
        r, g, b = (int(c * 2, 16) for c in digits)
        return RGB(r, g, b)
    if n == 2:
        grey = int(digits, 16)
        return RGB(grey, grey, grey)
    if n == 1:
        grey = int(digits * 2, 16)
        return RGB(grey, grey, grey)
    raise ColorParseError(text, "invalid hex color length")


def _parse_stop(spec: str, stop: str) -> RGB:
    digits = _strip_hash(stop)
    if not digits:
        raise ColorParseError(spec, "empty color stop")
    if len(digits) != 6 or not _is_hex(digits):
        raise ColorParseError(spec, f"invalid color stop {stop.strip()!r}")
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def parse_rich_color(text: str) -> RichColor:
    """Parse a name color spec into a RichColor.

    Examples:
        "#ff0000"            -> solid red
        "#ff0000 > #0000ff"  -> red-to-blue gradient
        "#ff0000|#00ff00"    -> red/green cycle
    """
    if not text or not text.strip():
        raise ColorParseError(text, "empty color")

    has_gradient = ">" in text
    has_cycle = "|" in text
    if has_gradient and has_cycle:
        raise ColorParseError(text, "cannot mix gradient and cycle separators")

    if has_gradient:
        kind, parts = "gradient", text.split(">")
    elif has_cycle:
        kind, parts = "cycle", text.split("|")
    else:
        kind, parts = "solid", [text]

    if len(parts) > MAX_STOPS:
        raise ColorParseError(text, f"too many color stops (max {MAX_STOPS})")

    stops: List[RGB] = [_parse_stop(text, p) for p in parts]
    return RichColor(kind=kind, stops=tuple(stops))
