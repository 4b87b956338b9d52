"""
Roster status normalization and cap inclusion.

Provider feeds tag players with free-form status strings ("ROSTER",
"TAXI_SQUAD", "INJURED_RESERVE", "IR", display tags like "practice", ...).
normalize_status() maps all of them onto three canonical categories at the
ingestion boundary; get_cap_percent() resolves how much of a salary counts
against the cap for a category in the current or a future season.

Neither function raises: unrecognized input falls back to ACTIVE / 100%.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union


class RosterStatus(Enum):
    """Canonical roster categories for cap purposes."""
    ACTIVE = "ACTIVE"
    PRACTICE = "PRACTICE"    # Taxi squad
    INJURED = "INJURED"      # Injured reserve


@dataclass(frozen=True)
class CapInclusion:
    """Fraction of salary counted against the cap (1.0 = 100%)."""
    current: float
    future: float


CAP_INCLUSION: Dict[RosterStatus, CapInclusion] = {
    RosterStatus.ACTIVE: CapInclusion(current=1.0, future=1.0),
    RosterStatus.PRACTICE: CapInclusion(current=0.5, future=1.0),
    RosterStatus.INJURED: CapInclusion(current=1.0, future=1.0),
}

DEFAULT_CAP_INCLUSION = CapInclusion(current=1.0, future=1.0)

DEFAULT_RAW_STATUS = "ROSTER"


def normalize_status(status: Any = DEFAULT_RAW_STATUS) -> RosterStatus:
    """
    Normalize a raw roster status tag to a RosterStatus.

    Rules (case-insensitive, first match wins):
    - Already a RosterStatus or a canonical name ("practice") → that category
    - Contains "TAXI" → PRACTICE
    - Contains "INJURED" or equals "IR" → INJURED
    - Anything else (including None / non-strings) → ACTIVE

    Args:
        status: Raw status from the roster feed (default "ROSTER")

    Returns:
        Canonical RosterStatus
    """
    if isinstance(status, RosterStatus):
        return status

    if not isinstance(status, str):
        status = DEFAULT_RAW_STATUS

    normalized = status.strip().upper()

    if normalized in RosterStatus.__members__:
        return RosterStatus[normalized]
    if "TAXI" in normalized:
        return RosterStatus.PRACTICE
    if "INJURED" in normalized or normalized == "IR":
        return RosterStatus.INJURED
    return RosterStatus.ACTIVE


def get_cap_inclusion(tag: Union[RosterStatus, str, None] = RosterStatus.ACTIVE) -> CapInclusion:
    """
    Look up the inclusion row for a category.

    Only canonical categories are looked up; raw feed tags are not
    re-normalized here, so an unrecognized tag gets the 100%/100% default.
    """
    if isinstance(tag, RosterStatus):
        return CAP_INCLUSION[tag]
    if isinstance(tag, str):
        member = RosterStatus.__members__.get(tag.strip().upper())
        if member is not None:
            return CAP_INCLUSION[member]
    return DEFAULT_CAP_INCLUSION


def get_cap_percent(
    tag: Union[RosterStatus, str, None] = RosterStatus.ACTIVE,
    is_current: bool = True
) -> float:
    """
    Get cap inclusion percentage for a roster category.

    Args:
        tag: RosterStatus or category name (ACTIVE, PRACTICE, INJURED)
        is_current: True for the current season, False for future seasons

    Returns:
        Inclusion fraction (0.5 = 50%, 1.0 = 100%)

    Examples:
        - PRACTICE, current season → 0.5
        - PRACTICE, future season → 1.0
        - "UNKNOWN_TAG" → 1.0
    """
    inclusion = get_cap_inclusion(tag)
    return inclusion.current if is_current else inclusion.future
