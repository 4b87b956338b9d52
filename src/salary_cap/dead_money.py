"""
Dead Money Amortizer

Spreads waiver and release penalties across the salary-year window.

Waiver rules:
- A waived contract with years remaining charges 50% of its salary in the
  season it was waived
- The following season gets a share that depends on how many years were
  left: 1 → 0%, 2 → 15%, 3 → 25%, 4 → 35%, 5 → 45%
- Nothing is charged beyond the following season

Adjustments without years remaining are carryovers (already-decided
penalties) and hit their season in full.
"""

from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional
import logging

from config.cap_settings import CapSettings, DEFAULT_CAP_SETTINGS

from .models import DeadMoneyAdjustment, FranchiseId
from .salary_years import YearlyAmounts


class DeadMoneyAmortizer:
    """
    Aggregates dead money adjustments into per-year amounts.

    Accumulation happens in a pre-zeroed window, so the order of the
    adjustments never changes the result. Penalties that would land outside
    the window are dropped.
    """

    def __init__(self, settings: Optional[CapSettings] = None):
        """
        Initialize Dead Money Amortizer.

        Args:
            settings: League cap settings (defaults to the standard league)
        """
        self.settings = settings or DEFAULT_CAP_SETTINGS
        self.logger = logging.getLogger(__name__)

    def calculate_waiver_penalty(self, salary: float, years_remaining: float) -> tuple:
        """
        Split a waived salary into current-year and next-year penalties.

        Args:
            salary: Salary of the waived contract
            years_remaining: Contract years left when waived

        Returns:
            Tuple of (current_year_penalty, next_year_penalty)

        Example:
            $1M with 3 years remaining → ($500,000, $250,000)
        """
        current_penalty = self.settings.waiver_current_percent * salary
        future_percent = self.settings.dead_money_future_percent.get(years_remaining)
        next_year_penalty = future_percent * salary if future_percent is not None else 0.0
        return (current_penalty, next_year_penalty)

    def aggregate_dead_money(
        self,
        adjustments: Optional[Iterable[Any]] = None,
        franchise_id: Optional[str] = None
    ) -> YearlyAmounts:
        """
        Aggregate dead money charges across salary years.

        Args:
            adjustments: DeadMoneyAdjustment records or provider dicts
            franchise_id: Only include adjustments for this franchise (optional)

        Returns:
            YearlyAmounts with the dead money charged in each window year
        """
        year_count = self.settings.salary_year_count
        totals: List[float] = [0.0] * year_count

        for record in adjustments or []:
            adjustment = DeadMoneyAdjustment.coerce(record)
            if franchise_id and adjustment.franchise_id != franchise_id:
                continue

            base_offset = adjustment.year_offset
            if adjustment.is_waiver_penalty:
                current_penalty, next_year_penalty = self.calculate_waiver_penalty(
                    adjustment.salary, adjustment.years_remaining
                )
            else:
                # Carryover hits 100% in its season
                current_penalty, next_year_penalty = adjustment.salary, 0.0

            self._add(totals, base_offset, current_penalty, adjustment)
            if next_year_penalty > 0:
                self._add(totals, base_offset + 1, next_year_penalty, adjustment)

        return YearlyAmounts(totals, length=year_count)

    def _add(
        self,
        totals: List[float],
        offset: float,
        amount: float,
        adjustment: DeadMoneyAdjustment
    ) -> None:
        """Add amount at offset; out-of-window or fractional offsets are dropped."""
        if offset != int(offset) or not 0 <= offset < len(totals):
            self.logger.debug(
                f"Dropping dead money outside salary window: offset={offset}, "
                f"amount={amount}, franchise={adjustment.franchise_id}"
            )
            return
        totals[int(offset)] += amount

    def dead_money_totals_by_franchise(
        self,
        adjustments: Optional[Iterable[Any]] = None
    ) -> Dict[FranchiseId, float]:
        """
        Total dead money amount owed by each franchise.

        Sums the raw adjustment amounts, without the waiver split or the
        salary-year window. Adjustments without a franchise are skipped.

        Args:
            adjustments: DeadMoneyAdjustment records or provider dicts

        Returns:
            Dict mapping franchise ID → total dead money
        """
        totals: Dict[FranchiseId, float] = defaultdict(float)
        for record in adjustments or []:
            adjustment = DeadMoneyAdjustment.coerce(record)
            if adjustment.franchise_id is None:
                continue
            totals[adjustment.franchise_id] += adjustment.salary
        return dict(totals)
