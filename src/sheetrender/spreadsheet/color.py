"""
Hex color conversion for the Sheets API Color type.
"""

import logging
from typing import Dict

logger = logging.getLogger(__name__)


def _parse_channel(pair: str, hex_color: str) -> float:
    try:
        return int(pair, 16) / 255
    except ValueError:
        logger.warning("Unparseable channel %r in color %r, using 0.0", pair, hex_color)
        return 0.0


def hex_to_rgb_color(hex_color: str) -> Dict[str, float]:
    """Convert a hex color string to a Sheets Color object (0-1 range).

    Accepts 6-digit ("#0f172a") and 3-digit shorthand ("#fff") forms, with or
    without the leading "#". Parsing is best-effort: a channel that is not
    valid hex becomes 0.0 instead of raising.

    Args:
        hex_color: Hex color string

    Returns:
        Dictionary with "red", "green" and "blue" fractions
    """
    clean = hex_color.strip()
    if clean.startswith("#"):
        clean = clean[1:]
    if len(clean) == 3:
        clean = "".join(ch * 2 for ch in clean)

    return {
        "red": _parse_channel(clean[0:2], hex_color),
        "green": _parse_channel(clean[2:4], hex_color),
        "blue": _parse_channel(clean[4:6], hex_color),
    }
