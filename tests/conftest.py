"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- Cap engine instances (calculator, dead money amortizer, team projector)
- Sample rosters and dead money adjustments
"""

import sys
from pathlib import Path
import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"


def pytest_configure(config):
    """Put src/ at the front of sys.path so engine packages import without installation."""
    if str(src_path) in sys.path:
        sys.path.remove(str(src_path))
    sys.path.insert(0, str(src_path))


# ============================================================================
# CAP ENGINE FIXTURES
# ============================================================================

@pytest.fixture
def cap_settings():
    """Standard league settings."""
    from config.cap_settings import CapSettings
    return CapSettings()


@pytest.fixture
def cap_calculator(cap_settings):
    """
    Provides CapCalculator instance with standard league settings.
    """
    from salary_cap.cap_calculator import CapCalculator
    return CapCalculator(cap_settings)


@pytest.fixture
def dead_money_amortizer(cap_settings):
    """
    Provides DeadMoneyAmortizer instance with standard league settings.
    """
    from salary_cap.dead_money import DeadMoneyAmortizer
    return DeadMoneyAmortizer(cap_settings)


@pytest.fixture
def team_cap_projector(cap_settings):
    """
    Provides TeamCapProjector instance with standard league settings.
    """
    from salary_cap.team_cap import TeamCapProjector
    return TeamCapProjector(cap_settings)


# ============================================================================
# TEST DATA FIXTURES
# ============================================================================

@pytest.fixture
def test_franchise_id():
    """Standard franchise ID for testing."""
    return "0001"


@pytest.fixture
def sample_roster(test_franchise_id):
    """
    Sample provider roster records (camelCase keys, mixed value types).

    Returns:
        List of roster dicts as delivered by the roster feed
    """
    return [
        {
            'id': '13604',
            'name': 'Starter QB',
            'position': 'QB',
            'salary': 8_000_000,
            'contractYears': 3,
            'status': 'ROSTER',
            'franchiseId': test_franchise_id,
        },
        {
            'id': '14802',
            'name': 'Taxi WR',
            'position': 'WR',
            'salary': '1000000',
            'contractYears': '2',
            'status': 'TAXI_SQUAD',
            'franchiseId': test_franchise_id,
        },
        {
            'id': '12625',
            'name': 'Injured RB',
            'position': 'RB',
            'salary': 4_000_000,
            'contractYears': 1,
            'status': 'INJURED_RESERVE',
            'franchiseId': test_franchise_id,
        },
    ]


@pytest.fixture
def sample_adjustments(test_franchise_id):
    """
    Sample dead money adjustments for two franchises.

    Returns:
        List of salary-adjustment dicts
    """
    return [
        {
            'franchiseId': test_franchise_id,
            'salary': 1_000_000,
            'yearsRemaining': 3,
            'yearOffset': 0,
        },
        {
            'franchiseId': test_franchise_id,
            'amount': 300_000,
            'seasonOffset': 2,
        },
        {
            'franchiseId': '0002',
            'salary': 2_000_000,
            'yearsRemaining': 2,
        },
    ]
