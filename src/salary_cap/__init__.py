"""
Fantasy League Salary Cap Engine

Salary cap and dead money projection for a salary-cap fantasy football
league: multi-year cap charges, waiver penalty amortization, cap space,
next-season team projections and the league-wide free agent envelope.

Core Components:
- CapCalculator: Cap charges, escalation schedules, contract metadata, cap space
- DeadMoneyAmortizer: Waiver/release penalties across the salary-year window
- TeamCapProjector: Next league year cap situation per franchise
- compute_league_fa_envelope: League-wide cap per open roster slot
- YearlyAmounts: Fixed-length per-salary-year amounts
"""

from .cap_calculator import CapCalculator
from .dead_money import DeadMoneyAmortizer
from .league_envelope import LeagueFAEnvelope, compute_league_fa_envelope
from .models import (
    CapPlayer,
    CapSpaceSummary,
    ContractSchedule,
    ContractYearsMeta,
    DeadMoneyAdjustment,
    FranchiseCapSituation,
    FranchiseId,
)
from .numeric import parse_number
from .salary_years import SALARY_YEAR_COUNT, YearlyAmounts, salary_year_labels
from .team_cap import LeagueCapProjection, TeamCapProjector, TeamCapSituation

__version__ = "1.0.0"

__all__ = [
    "CapCalculator",
    "DeadMoneyAmortizer",
    "TeamCapProjector",
    "TeamCapSituation",
    "LeagueCapProjection",
    "LeagueFAEnvelope",
    "compute_league_fa_envelope",
    "CapPlayer",
    "CapSpaceSummary",
    "ContractSchedule",
    "ContractYearsMeta",
    "DeadMoneyAdjustment",
    "FranchiseCapSituation",
    "FranchiseId",
    "parse_number",
    "SALARY_YEAR_COUNT",
    "YearlyAmounts",
    "salary_year_labels",
]
