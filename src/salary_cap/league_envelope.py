"""
League Free-Agent Envelope

Estimates how much the league as a whole can spend per open roster slot in
free agency: every franchise's projected cap space (after holding back a
per-team reserve) divided by every franchise's unfilled active roster spots.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional
import logging

from config.cap_settings import DEFAULT_CAP_SETTINGS

from .models import FranchiseCapSituation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeagueFAEnvelope:
    """
    League-wide free agent spending envelope.

    Attributes:
        total_teams: Number of franchises (1 for an empty league)
        reserve_per_team: Cap held back per franchise
        total_reserve: reserve_per_team × total_teams
        available_cap: Σ max(0, projected cap space - reserve)
        open_slots: Σ max(0, target active - roster size)
        cap_per_open_slot: available_cap / open_slots, 0 when no slots are open
    """

    total_teams: int
    reserve_per_team: float
    total_reserve: float
    available_cap: float
    open_slots: int
    cap_per_open_slot: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "total_teams": self.total_teams,
            "reserve_per_team": self.reserve_per_team,
            "total_reserve": self.total_reserve,
            "available_cap": self.available_cap,
            "open_slots": self.open_slots,
            "cap_per_open_slot": self.cap_per_open_slot,
        }


def compute_league_fa_envelope(
    teams: Optional[Iterable[Any]] = None,
    target_active: Optional[int] = None,
    reserve_per_team: Optional[float] = None
) -> LeagueFAEnvelope:
    """
    Compute the league-wide free agent spending envelope.

    Args:
        teams: Franchise cap situations (FranchiseCapSituation,
            TeamCapSituation or dicts with projectedCapSpace / rosterSize)
        target_active: Target active roster size (default 22)
        reserve_per_team: Cap held back per team for the draft and in-season
            moves (default $5M)

    Returns:
        LeagueFAEnvelope

    Example:
        Two teams with $15M and $3M projected space and 18 / 22 players:
        available_cap = $10M + $0, open_slots = 4 + 0,
        cap_per_open_slot = $2.5M
    """
    if target_active is None:
        target_active = DEFAULT_CAP_SETTINGS.target_active_count
    if reserve_per_team is None:
        reserve_per_team = DEFAULT_CAP_SETTINGS.fa_reserve_per_team

    situations = [FranchiseCapSituation.coerce(team) for team in (teams or [])]

    total_teams = len(situations) or 1
    total_reserve = reserve_per_team * total_teams

    available_cap = sum(
        max(0, team.projected_cap_space - reserve_per_team) for team in situations
    )
    open_slots = sum(
        max(0, target_active - team.roster_size) for team in situations
    )

    cap_per_open_slot = available_cap / open_slots if open_slots > 0 else 0

    logger.debug(
        f"FA envelope: teams={len(situations)}, available_cap={available_cap}, "
        f"open_slots={open_slots}"
    )

    return LeagueFAEnvelope(
        total_teams=total_teams,
        reserve_per_team=reserve_per_team,
        total_reserve=total_reserve,
        available_cap=available_cap,
        open_slots=open_slots,
        cap_per_open_slot=cap_per_open_slot,
    )
