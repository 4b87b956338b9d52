"""
Salary Cap Calculator

Core mathematical operations for league salary cap calculations including:
- Multi-year cap charges (10% annual escalation, status-based inclusion)
- Contract escalation schedules
- Next-season cap hits across the league-year rollover
- Contract-length metadata
- Cap space and effective cap space

All calculations are pure: they read their arguments and the (immutable)
league settings, and never raise for malformed roster data.
"""

from typing import Any, Iterable, List, Optional
import logging

from config.cap_settings import CapSettings, DEFAULT_CAP_SETTINGS
from constants.roster_status import RosterStatus, get_cap_percent, normalize_status

from .dead_money import DeadMoneyAmortizer
from .models import (
    CapPlayer,
    CapSpaceSummary,
    ContractSchedule,
    ContractYear,
    ContractYearsMeta,
)
from .numeric import parse_int, parse_number
from .salary_years import YearlyAmounts


def _coerce_players(players: Optional[Iterable[Any]]) -> List[CapPlayer]:
    return [CapPlayer.coerce(p) for p in (players or [])]


class CapCalculator:
    """
    Core salary cap calculation engine.

    Key Rules:
    - Salaries escalate 10% per forward year, always from the base salary
    - A contract with N years remaining counts in window years 0..N-1
    - Taxi squad players count 50% in the current season, 100% in future seasons
    - Injured reserve counts 100%
    """

    def __init__(self, settings: Optional[CapSettings] = None):
        """
        Initialize Cap Calculator.

        Args:
            settings: League cap settings (defaults to the standard league)
        """
        self.settings = settings or DEFAULT_CAP_SETTINGS
        self.logger = logging.getLogger(__name__)

    # ========================================================================
    # ESCALATION
    # ========================================================================

    def calculate_escalated_salary(
        self,
        base_salary: float,
        years_from_now: int
    ) -> int:
        """
        Calculate salary after annual escalation.

        Args:
            base_salary: Salary in the current season
            years_from_now: Number of forward years

        Returns:
            Escalated salary rounded to the dollar

        Examples:
            - $10M, 1 year → $11,000,000
            - $10M, 3 years → $13,310,000
        """
        return round(
            parse_number(base_salary) * self.settings.escalation_multiplier ** years_from_now
        )

    def generate_contract_schedule(
        self,
        player_id: str,
        base_salary: int,
        contract_years: int,
        start_year: int
    ) -> ContractSchedule:
        """
        Generate full contract escalation schedule.

        In this league the cap hit of a season equals its salary.

        Args:
            player_id: Player ID
            base_salary: Salary in start_year
            contract_years: Number of seasons
            start_year: First season of the schedule

        Returns:
            ContractSchedule with one entry per season
        """
        yearly_schedule = []
        total_value = 0

        for i in range(max(contract_years, 0)):
            salary = self.calculate_escalated_salary(base_salary, i)
            total_value += salary
            yearly_schedule.append(
                ContractYear(year=start_year + i, salary=salary, cap_hit=salary)
            )

        average_annual_value = round(total_value / contract_years) if contract_years > 0 else 0

        return ContractSchedule(
            player_id=player_id,
            base_year=start_year,
            base_salary=base_salary,
            contract_years=contract_years,
            yearly_schedule=yearly_schedule,
            total_contract_value=total_value,
            average_annual_value=average_annual_value,
        )

    # ========================================================================
    # CAP CHARGES
    # ========================================================================

    def calculate_cap_charges(
        self,
        players: Optional[Iterable[Any]] = None
    ) -> YearlyAmounts:
        """
        Calculate roster cap charges for each salary year.

        Args:
            players: Roster players (CapPlayer or provider dicts)

        Returns:
            YearlyAmounts with the total charge for each window year

        Formula:
            charge[i] = Σ salary × 1.10^i × inclusion(status, i == 0)
                        over players with contract_years > i
        """
        roster = _coerce_players(players)
        multiplier = self.settings.escalation_multiplier
        year_count = self.settings.salary_year_count

        charges = []
        for index in range(year_count):
            is_current = index == 0
            total = 0.0
            for player in roster:
                if player.contract_years <= index:
                    continue
                percent = get_cap_percent(player.status, is_current)
                salary_for_year = player.salary * multiplier ** index
                total += parse_number(salary_for_year * percent)
            charges.append(total)

        return YearlyAmounts(charges, length=year_count)

    def calculate_next_season_cap_hit(
        self,
        current_salary: float,
        contract_years_remaining: int,
        status: Any = RosterStatus.ACTIVE
    ) -> int:
        """
        Calculate a player's cap hit for the next league year.

        Contracts lose a year at the league-year rollover and the salary
        escalates once. The inclusion percentage is the status' current-season
        rate, since next season becomes the current season.

        Args:
            current_salary: This season's salary
            contract_years_remaining: Years remaining this season
            status: Raw status tag or RosterStatus

        Returns:
            Cap hit in dollars, 0 if the contract expires at rollover
        """
        years_remaining_next = parse_int(contract_years_remaining) - 1
        if years_remaining_next <= 0:
            return 0

        escalated_salary = self.calculate_escalated_salary(current_salary, 1)
        percent = get_cap_percent(normalize_status(status), is_current=True)
        return round(escalated_salary * percent)

    def identify_expiring_contracts(
        self,
        players: Optional[Iterable[Any]] = None
    ) -> List[CapPlayer]:
        """
        Identify players in the final year of their contract.

        Args:
            players: Roster players (CapPlayer or provider dicts)

        Returns:
            Players with exactly one contract year remaining
        """
        return [p for p in _coerce_players(players) if p.contract_years == 1]

    # ========================================================================
    # CONTRACT METADATA
    # ========================================================================

    def calculate_contract_years_meta(
        self,
        players: Optional[Iterable[Any]] = None
    ) -> ContractYearsMeta:
        """
        Summarize contract lengths for a roster.

        Args:
            players: Roster players (CapPlayer or provider dicts)

        Returns:
            ContractYearsMeta with total (non-negative) contract years and
            the longest single contract (0 for an empty roster)
        """
        roster = _coerce_players(players)
        contract_years_total = sum(max(p.contract_years, 0) for p in roster)
        longest_contract = max((p.contract_years for p in roster), default=0)
        return ContractYearsMeta(
            contract_years_total=contract_years_total,
            longest_contract=max(longest_contract, 0),
        )

    # ========================================================================
    # CAP SPACE
    # ========================================================================

    def calculate_cap_space(
        self,
        cap_charges: float,
        dead_money: float = 0,
        cap_limit: Optional[float] = None
    ) -> float:
        """
        Calculate available cap space.

        Args:
            cap_charges: Total cap charges for the season
            dead_money: Dead money for the season
            cap_limit: Salary cap limit (default: league cap)

        Returns:
            cap_limit - cap_charges - dead_money (negative = over the cap)
        """
        if cap_limit is None:
            cap_limit = self.settings.salary_cap
        return cap_limit - cap_charges - dead_money

    def calculate_effective_cap_space(
        self,
        cap_space: float,
        reserve: Optional[float] = None
    ) -> float:
        """
        Calculate cap space left after holding back the rookie reserve.

        Args:
            cap_space: Available cap space
            reserve: Amount held for rookies (default: league rookie reserve)

        Returns:
            cap_space - reserve (not clamped)
        """
        if reserve is None:
            reserve = self.settings.rookie_reserve
        return cap_space - reserve

    def summarize_cap_space(
        self,
        players: Optional[Iterable[Any]] = None,
        adjustments: Optional[Iterable[Any]] = None,
        franchise_id: Optional[str] = None,
        year_index: int = 0
    ) -> CapSpaceSummary:
        """
        Combine roster charges and dead money into one season's cap position.

        Args:
            players: Roster players (CapPlayer or provider dicts)
            adjustments: Dead money adjustments
            franchise_id: Restrict dead money to this franchise
            year_index: Window index to summarize (0 = current season)

        Returns:
            CapSpaceSummary for the requested year

        Raises:
            IndexError: If year_index is outside the salary-year window
        """
        charges = self.calculate_cap_charges(players)
        dead_money = DeadMoneyAmortizer(self.settings).aggregate_dead_money(
            adjustments, franchise_id
        )

        cap_space = self.calculate_cap_space(charges[year_index], dead_money[year_index])
        return CapSpaceSummary(
            year_index=year_index,
            cap_charges=charges[year_index],
            dead_money=dead_money[year_index],
            cap_space=cap_space,
            effective_cap_space=self.calculate_effective_cap_space(cap_space),
        )
