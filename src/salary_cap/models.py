"""
Data models for the salary cap engine.

Provides dataclasses for:
- CapPlayer: Cap-relevant view of a rostered player
- DeadMoneyAdjustment: One waived/released contract's remaining obligation
- FranchiseCapSituation: Projected cap space + roster size for the FA envelope
- ContractYearsMeta: Contract-length summary for a roster
- ContractSchedule: Year-by-year escalated salaries for one contract
- CapSpaceSummary: Charges, dead money and cap space for one salary year

Provider records arrive as loosely-typed dicts with camelCase keys and
string-encoded numbers. The from_dict() constructors are the ingestion
boundary: they coerce numbers, normalize status tags and never raise for
malformed values.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, NewType, Optional

from constants.roster_status import RosterStatus, normalize_status

from .numeric import is_finite_number, parse_int, parse_number

FranchiseId = NewType("FranchiseId", str)


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    """Value of the first key that is present and not None."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _franchise_id(value: Any) -> Optional[FranchiseId]:
    if value is None or value == "":
        return None
    return FranchiseId(str(value))


@dataclass(frozen=True)
class CapPlayer:
    """
    Cap-relevant view of a rostered player.

    Attributes:
        salary: Current base salary (non-negative)
        contract_years: Contract years remaining including the current season
        status: Canonical roster category
        player_id: Provider player ID
        name: Display name
        position: Roster position code (QB, RB, ...)
        franchise_id: Owning franchise
        age: Player age in years
    """

    salary: float = 0.0
    contract_years: int = 0
    status: RosterStatus = RosterStatus.ACTIVE
    player_id: Optional[str] = None
    name: Optional[str] = None
    position: Optional[str] = None
    franchise_id: Optional[FranchiseId] = None
    age: Optional[int] = None

    def __post_init__(self):
        # Directly constructed players get the same coercion as feed records
        object.__setattr__(self, "salary", parse_number(self.salary))
        object.__setattr__(self, "contract_years", parse_int(self.contract_years))
        object.__setattr__(self, "status", normalize_status(self.status))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CapPlayer":
        """
        Create from a provider roster record.

        Accepted keys: salary, contractYears / contract_years / contractYear,
        statusTag / displayTag / status, id / player_id, name, position,
        franchiseId / franchise_id, age.
        """
        player_id = _first_present(data, "player_id", "id")
        age = _first_present(data, "age")
        return cls(
            salary=parse_number(data.get("salary")),
            contract_years=parse_int(
                _first_present(data, "contract_years", "contractYears", "contractYear")
            ),
            status=normalize_status(
                _first_present(data, "status_tag", "statusTag", "displayTag", "status")
            ),
            player_id=str(player_id) if player_id is not None else None,
            name=data.get("name"),
            position=data.get("position"),
            franchise_id=_franchise_id(_first_present(data, "franchise_id", "franchiseId")),
            age=parse_int(age) if age is not None else None,
        )

    @classmethod
    def coerce(cls, record: Any) -> "CapPlayer":
        """Return record unchanged if already a CapPlayer, else parse it."""
        if isinstance(record, cls):
            return record
        if isinstance(record, Mapping):
            return cls.from_dict(record)
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "player_id": self.player_id,
            "name": self.name,
            "position": self.position,
            "franchise_id": self.franchise_id,
            "salary": self.salary,
            "contract_years": self.contract_years,
            "status": self.status.value,
            "age": self.age,
        }


@dataclass(frozen=True)
class DeadMoneyAdjustment:
    """
    Remaining financial obligation of a waived or released contract.

    Attributes:
        salary: Salary the penalty is computed from
        year_offset: Window index where the penalty begins (0 = current season)
        years_remaining: Contract years left when waived. None means the
            amount is a carryover that hits in full at year_offset
        franchise_id: Franchise charged with the dead money
        description: Free-form note from the provider feed
    """

    salary: float = 0.0
    year_offset: float = 0
    years_remaining: Optional[float] = None
    franchise_id: Optional[FranchiseId] = None
    description: str = ""

    @property
    def is_waiver_penalty(self) -> bool:
        """True when the penalty is split by years remaining."""
        return self.years_remaining is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeadMoneyAdjustment":
        """
        Create from a provider salary-adjustment record.

        - salary: `salary`, falling back to `amount` when salary is empty/zero
        - year_offset: first present of `yearOffset` / `seasonOffset`, default 0
        - years_remaining: kept only when it is a finite int/float; anything
          else (numeric strings included) means "carryover"
        """
        salary = (
            parse_number(_first_present(data, "salary"))
            or parse_number(_first_present(data, "amount"))
        )
        year_offset = parse_number(
            _first_present(data, "year_offset", "yearOffset", "seasonOffset")
        )
        raw_years = _first_present(data, "years_remaining", "yearsRemaining")
        return cls(
            salary=salary,
            year_offset=year_offset,
            years_remaining=_finite_or_none(raw_years),
            franchise_id=_franchise_id(_first_present(data, "franchise_id", "franchiseId")),
            description=str(data.get("description") or ""),
        )

    @classmethod
    def coerce(cls, record: Any) -> "DeadMoneyAdjustment":
        """Return record unchanged if already a DeadMoneyAdjustment, else parse it."""
        if isinstance(record, cls):
            return record
        if isinstance(record, Mapping):
            return cls.from_dict(record)
        return cls()


def _finite_or_none(value: Any) -> Optional[float]:
    # Only real numbers mark a waiver split; numeric strings are carryovers
    return float(value) if is_finite_number(value) else None


@dataclass(frozen=True)
class FranchiseCapSituation:
    """
    Per-franchise input to the league free-agent envelope.

    Attributes:
        franchise_id: Franchise identifier
        projected_cap_space: Cap space for the projection year
        roster_size: Players on the active roster
    """

    franchise_id: Optional[FranchiseId] = None
    projected_cap_space: float = 0.0
    roster_size: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FranchiseCapSituation":
        """Create from dictionary (camelCase or snake_case keys, missing → 0)."""
        return cls(
            franchise_id=_franchise_id(_first_present(data, "franchise_id", "franchiseId")),
            projected_cap_space=parse_number(
                _first_present(data, "projected_cap_space", "projectedCapSpace")
            ),
            roster_size=parse_int(_first_present(data, "roster_size", "rosterSize")),
        )

    @classmethod
    def coerce(cls, record: Any) -> "FranchiseCapSituation":
        """Accept a FranchiseCapSituation, anything exposing the same attributes, or a dict."""
        if isinstance(record, cls):
            return record
        if isinstance(record, Mapping):
            return cls.from_dict(record)
        return cls(
            franchise_id=getattr(record, "franchise_id", None),
            projected_cap_space=parse_number(getattr(record, "projected_cap_space", 0)),
            roster_size=parse_int(getattr(record, "roster_size", 0)),
        )


@dataclass(frozen=True)
class ContractYearsMeta:
    """Contract-length summary for a roster."""
    contract_years_total: int = 0
    longest_contract: int = 0


@dataclass(frozen=True)
class ContractYear:
    """One season of a contract schedule."""
    year: int
    salary: int
    cap_hit: int


@dataclass
class ContractSchedule:
    """
    Full escalation schedule for one contract.

    Attributes:
        player_id: Player the contract belongs to
        base_year: First season of the schedule
        base_salary: Salary in the first season
        contract_years: Number of seasons
        yearly_schedule: One ContractYear per season
        total_contract_value: Sum of escalated salaries
        average_annual_value: total_contract_value / contract_years (rounded)
    """

    player_id: str
    base_year: int
    base_salary: int
    contract_years: int
    yearly_schedule: List[ContractYear] = field(default_factory=list)
    total_contract_value: int = 0
    average_annual_value: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "player_id": self.player_id,
            "base_year": self.base_year,
            "base_salary": self.base_salary,
            "contract_years": self.contract_years,
            "yearly_schedule": [
                {"year": y.year, "salary": y.salary, "cap_hit": y.cap_hit}
                for y in self.yearly_schedule
            ],
            "total_contract_value": self.total_contract_value,
            "average_annual_value": self.average_annual_value,
        }


@dataclass(frozen=True)
class CapSpaceSummary:
    """
    Cap position of one franchise for one salary year.

    Attributes:
        year_index: Window index (0 = current season)
        cap_charges: Player cap charges for the year
        dead_money: Dead money for the year
        cap_space: cap_limit - cap_charges - dead_money (may be negative)
        effective_cap_space: cap_space - rookie reserve (may be negative)
    """

    year_index: int
    cap_charges: float
    dead_money: float
    cap_space: float
    effective_cap_space: float

    @property
    def is_over_cap(self) -> bool:
        return self.cap_space < 0
