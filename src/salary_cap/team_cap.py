"""
Team Cap Projector

Projects each franchise's cap situation into the next league year, ahead of
the free agent auction:
- Contracts in their final year expire at the rollover
- Remaining contracts lose a year and escalate 10%
- Dead money and a franchise tag are charged against the new cap
- The team must still fill its roster to the minimum at the league minimum

The resulting TeamCapSituation carries projected_cap_space and roster_size,
so a list of them feeds compute_league_fa_envelope() directly.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional
import logging

from config.cap_settings import CapSettings, DEFAULT_CAP_SETTINGS
from constants.positions import IDEAL_POSITION_DEPTH, POSITION_ORDER, normalize_roster_position

from .cap_calculator import CapCalculator
from .models import CapPlayer, FranchiseId

PRIORITY_ORDER = {"critical": 0, "high": 1, "medium": 2, "low": 3}


@dataclass(frozen=True)
class PositionalNeed:
    """Depth shortfall at one position."""
    position: str
    priority: str
    current_depth: int
    target_acquisitions: int


@dataclass
class TeamCapSituation:
    """
    Projected next-season cap situation for one franchise.

    Attributes:
        franchise_id: Franchise identifier
        team_name: Display name
        projected_cap_space: Cap left after committed salaries, dead money and tag
        committed_salaries: Next-season cap hits of players under contract
        dead_money: Dead money charged next season
        roster_size: Players under contract (+1 for a tagged player)
        expiring_contracts: Players whose contracts expire at the rollover
        total_expiring_value: Salary coming off the books
        franchise_tag_commitment: Salary of a franchise-tagged player
        estimated_minimum_roster_spend: Cost of filling the roster at the league minimum
        discretionary_spending: Cap space beyond the minimum roster spend (never negative)
        positional_needs: Depth shortfalls, most urgent first
    """

    franchise_id: FranchiseId
    team_name: str
    projected_cap_space: float
    committed_salaries: int
    dead_money: float
    roster_size: int
    expiring_contracts: List[CapPlayer] = field(default_factory=list)
    total_expiring_value: float = 0.0
    franchise_tag_commitment: float = 0.0
    estimated_minimum_roster_spend: int = 0
    discretionary_spending: float = 0.0
    positional_needs: List[PositionalNeed] = field(default_factory=list)


@dataclass
class LeagueCapProjection:
    """League-wide roll-up of team cap situations."""
    team_situations: List[TeamCapSituation]
    total_available_cap: float
    average_cap_per_team: float


class TeamCapProjector:
    """
    Projects franchise cap space into the next league year.

    Key Rules:
    - Contracts with one year remaining expire
    - Remaining cap hits escalate one year (taxi squad at 50%)
    - Minimum roster must be filled at the league minimum salary
    """

    def __init__(self, settings: Optional[CapSettings] = None):
        """
        Initialize Team Cap Projector.

        Args:
            settings: League cap settings (defaults to the standard league)
        """
        self.settings = settings or DEFAULT_CAP_SETTINGS
        self.calculator = CapCalculator(self.settings)
        self.logger = logging.getLogger(__name__)

    def project_team(
        self,
        franchise_id: str,
        team_name: str,
        players: Optional[Iterable[Any]] = None,
        dead_money: float = 0,
        franchise_tag_salary: float = 0
    ) -> TeamCapSituation:
        """
        Project one franchise's cap situation for the next league year.

        Args:
            franchise_id: Franchise to project
            team_name: Display name
            players: League or team roster (unowned players and other franchises are ignored)
            dead_money: Dead money charged next season
            franchise_tag_salary: Salary of a franchise-tagged player (0 = no tag)

        Returns:
            TeamCapSituation
        """
        roster = [CapPlayer.coerce(p) for p in (players or [])]
        team_players = [p for p in roster if p.franchise_id == str(franchise_id)]

        expiring = self.calculator.identify_expiring_contracts(team_players)
        total_expiring_value = sum(p.salary for p in expiring)

        under_contract = [p for p in team_players if p.contract_years > 1]
        committed_salaries = sum(
            self.calculator.calculate_next_season_cap_hit(p.salary, p.contract_years, p.status)
            for p in under_contract
        )

        total_committed = committed_salaries + dead_money + franchise_tag_salary
        projected_cap_space = self.settings.salary_cap - total_committed

        has_tag = franchise_tag_salary > 0
        roster_size = len(under_contract) + (1 if has_tag else 0)
        spots_to_fill = max(0, self.settings.min_roster_size - roster_size)
        minimum_roster_spend = spots_to_fill * self.settings.league_minimum
        discretionary = max(0, projected_cap_space - minimum_roster_spend)

        self.logger.debug(
            f"Projected {franchise_id}: committed={committed_salaries}, "
            f"dead_money={dead_money}, space={projected_cap_space}"
        )

        return TeamCapSituation(
            franchise_id=FranchiseId(str(franchise_id)),
            team_name=team_name,
            projected_cap_space=projected_cap_space,
            committed_salaries=committed_salaries,
            dead_money=dead_money,
            roster_size=roster_size,
            expiring_contracts=expiring,
            total_expiring_value=total_expiring_value,
            franchise_tag_commitment=franchise_tag_salary,
            estimated_minimum_roster_spend=minimum_roster_spend,
            discretionary_spending=discretionary,
            positional_needs=self.analyze_positional_needs(under_contract),
        )

    def analyze_positional_needs(
        self,
        players_under_contract: Iterable[CapPlayer]
    ) -> List[PositionalNeed]:
        """
        Compare depth at each position with the ideal depth chart.

        Priority by deficit: 3+ critical, 2 high, 1 medium, otherwise low.

        Returns:
            One PositionalNeed per position, most urgent first
        """
        counts: Dict[str, int] = {position: 0 for position in POSITION_ORDER}
        for player in players_under_contract:
            position = normalize_roster_position(player.position or "")
            if position in counts:
                counts[position] += 1

        needs = []
        for position in POSITION_ORDER:
            current_depth = counts[position]
            deficit = IDEAL_POSITION_DEPTH[position] - current_depth

            if deficit >= 3:
                priority = "critical"
            elif deficit >= 2:
                priority = "high"
            elif deficit >= 1:
                priority = "medium"
            else:
                priority = "low"

            needs.append(PositionalNeed(
                position=position,
                priority=priority,
                current_depth=current_depth,
                target_acquisitions=max(0, deficit),
            ))

        return sorted(needs, key=lambda need: PRIORITY_ORDER[need.priority])

    def project_league(
        self,
        players: Optional[Iterable[Any]],
        teams: Iterable[Mapping[str, Any]],
        dead_money_by_team: Optional[Mapping[str, float]] = None
    ) -> LeagueCapProjection:
        """
        Project every franchise and roll up league-wide discretionary cap.

        Args:
            players: All rostered players in the league (with franchise IDs)
            teams: Dicts with franchise_id / franchiseId and name
            dead_money_by_team: Franchise ID → dead money next season

        Returns:
            LeagueCapProjection
        """
        roster = [CapPlayer.coerce(p) for p in (players or [])]
        dead_money_by_team = dead_money_by_team or {}

        situations = []
        for team in teams:
            franchise_id = str(team.get("franchise_id") or team.get("franchiseId") or "")
            situations.append(self.project_team(
                franchise_id,
                team.get("name", ""),
                roster,
                dead_money=dead_money_by_team.get(franchise_id, 0),
            ))

        total_available_cap = sum(s.discretionary_spending for s in situations)
        average = total_available_cap / len(situations) if situations else 0

        return LeagueCapProjection(
            team_situations=situations,
            total_available_cap=total_available_cap,
            average_cap_per_team=average,
        )
