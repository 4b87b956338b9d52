"""
Fantasy roster positions.

Position order used for sorting and the ideal depth a franchise carries
at each position when projecting roster needs.
"""

from typing import Dict, Tuple

POSITION_ORDER: Tuple[str, ...] = ("QB", "RB", "WR", "TE", "PK", "DEF")

# Target depth chart size per position for a full roster
IDEAL_POSITION_DEPTH: Dict[str, int] = {
    "QB": 2,
    "RB": 6,
    "WR": 8,
    "TE": 3,
    "PK": 1,
    "DEF": 1,
}


def normalize_roster_position(position: str) -> str:
    """
    Normalize a feed position code to the roster format.

    "qb" → "QB", " wr " → "WR", "K" → "PK"
    """
    if not position:
        return ""
    code = position.strip().upper()
    return "PK" if code == "K" else code
