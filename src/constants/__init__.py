"""
Constants package for the league cap engine

Contains roster status categories, cap inclusion rules and roster positions.
"""

from .roster_status import (
    RosterStatus, CapInclusion, CAP_INCLUSION, DEFAULT_CAP_INCLUSION,
    normalize_status, get_cap_inclusion, get_cap_percent
)
from .positions import POSITION_ORDER, IDEAL_POSITION_DEPTH, normalize_roster_position

__all__ = [
    'RosterStatus',
    'CapInclusion',
    'CAP_INCLUSION',
    'DEFAULT_CAP_INCLUSION',
    'normalize_status',
    'get_cap_inclusion',
    'get_cap_percent',
    'POSITION_ORDER',
    'IDEAL_POSITION_DEPTH',
    'normalize_roster_position',
]
