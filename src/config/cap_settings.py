"""
League Cap Settings

Centralized configuration for the cap engine: cap limit, roster sizes,
reserves, the salary-year window length, the escalation rate and the waiver
penalty schedule.

Defaults live in the class so the engine works without any file; a league
can override them with a JSON file (see league_cap_settings.json next to
this module).

Usage Example:
    from config.cap_settings import load_cap_settings

    settings = load_cap_settings()                     # bundled defaults
    settings = load_cap_settings("my_league.json")     # league overrides
    calculator = CapCalculator(settings)
"""

import json
import logging
import os
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


DEFAULT_SETTINGS_FILE = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "league_cap_settings.json"
)

logger = logging.getLogger(__name__)


def _default_future_percent() -> Dict[int, float]:
    # Share of a waived salary charged the following season, keyed by years remaining
    return {1: 0.0, 2: 0.15, 3: 0.25, 4: 0.35, 5: 0.45}


@dataclass(frozen=True)
class CapSettings:
    """
    League salary cap configuration.

    Attributes:
        salary_cap: Cap limit per franchise per season
        roster_limit: Maximum roster size (active + taxi + IR)
        target_active_count: Active roster size teams fill to
        min_roster_size: Minimum roster a team must carry into a new league year
        league_minimum: Minimum salary for a signed player
        rookie_reserve: Cap held back for the rookie draft
        fa_reserve_per_team: Cap held back per team when sizing the FA market
        salary_year_count: Length of the salary-year window
        annual_escalation: Salary increase per forward year (0.10 = 10%)
        waiver_current_percent: Share of a waived salary charged immediately
        dead_money_future_percent: Years remaining → share charged next season
    """

    salary_cap: int = 45_000_000
    roster_limit: int = 28
    target_active_count: int = 22
    min_roster_size: int = 20
    league_minimum: int = 425_000
    rookie_reserve: int = 5_000_000
    fa_reserve_per_team: int = 5_000_000
    salary_year_count: int = 5
    annual_escalation: float = 0.10
    waiver_current_percent: float = 0.5
    dead_money_future_percent: Mapping[int, float] = field(
        default_factory=_default_future_percent, hash=False
    )

    def __post_init__(self):
        # Read-only copy with int keys
        schedule = MappingProxyType({
            int(years): float(pct)
            for years, pct in self.dead_money_future_percent.items()
        })
        object.__setattr__(self, "dead_money_future_percent", schedule)

    @property
    def escalation_multiplier(self) -> float:
        """Year-over-year salary multiplier (1.10 for 10%)."""
        return 1.0 + self.annual_escalation

    def validate(self) -> bool:
        """
        Sanity-check the configuration.

        The calculators never call this; callers that accept league-supplied
        settings should.
        """
        if self.salary_cap <= 0:
            return False
        if self.salary_year_count < 1:
            return False
        if self.target_active_count < 0 or self.target_active_count > self.roster_limit:
            return False
        if self.min_roster_size < 0 or self.min_roster_size > self.roster_limit:
            return False
        if self.annual_escalation < 0:
            return False
        if not 0.0 <= self.waiver_current_percent <= 1.0:
            return False
        if any(not 0.0 <= pct <= 1.0 for pct in self.dead_money_future_percent.values()):
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["dead_money_future_percent"] = {
            str(years): pct for years, pct in self.dead_money_future_percent.items()
        }
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CapSettings":
        """
        Create from dictionary, falling back to defaults for missing keys.

        Raises:
            ValueError: If data contains keys that are not settings
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown cap settings: {sorted(unknown)}")

        return cls(**data)


DEFAULT_CAP_SETTINGS = CapSettings()


class CapSettingsLoader:
    """Loads and caches cap settings from a JSON file."""

    def __init__(self, settings_path: Optional[str] = None):
        """
        Initialize settings loader.

        Args:
            settings_path: Path to a JSON settings file.
                           Defaults to the bundled league_cap_settings.json
        """
        self.settings_path = os.path.abspath(settings_path or DEFAULT_SETTINGS_FILE)
        self._settings_cache: Optional[CapSettings] = None

    def _load_json_file(self) -> Dict[str, Any]:
        """Load and parse the JSON settings file"""
        if not os.path.exists(self.settings_path):
            raise FileNotFoundError(f"Cap settings file not found: {self.settings_path}")
        try:
            with open(self.settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {self.settings_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Cap settings must be a JSON object: {self.settings_path}")
        return data

    def load_settings(self, force_reload: bool = False) -> CapSettings:
        """
        Load cap settings.

        Args:
            force_reload: If True, re-read the file even if cached

        Returns:
            CapSettings instance
        """
        if self._settings_cache is not None and not force_reload:
            return self._settings_cache

        settings = CapSettings.from_dict(self._load_json_file())
        if not settings.validate():
            logger.warning(f"Cap settings in {self.settings_path} failed sanity checks")

        self._settings_cache = settings
        return settings


def load_cap_settings(settings_path: Optional[str] = None) -> CapSettings:
    """Load cap settings from a JSON file (bundled defaults when no path given)."""
    return CapSettingsLoader(settings_path).load_settings()
