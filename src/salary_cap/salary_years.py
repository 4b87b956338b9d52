"""
Salary-Year Window

All multi-year cap figures are indexed by position relative to the current
season (index 0 = current season, index 4 = four seasons out), never by the
season label itself. This keeps the window reusable across league years.

YearlyAmounts is the fixed-size container for those figures: it is created
with exactly one slot per window year and cannot grow or be modified.
"""

from typing import Iterable, List, Sequence

# Current season + 4 future seasons
SALARY_YEAR_COUNT = 5


class YearlyAmounts(tuple):
    """
    Immutable, fixed-length sequence of monetary amounts, one per salary year.

    Behaves like a tuple (indexing, iteration, len, equality with other
    tuples) and adds a few window-aware helpers.

    Example:
        >>> charges = YearlyAmounts([100.0, 110.0, 0.0, 0.0, 0.0])
        >>> charges.current
        100.0
        >>> charges.total()
        210.0
    """

    def __new__(cls, values: Iterable[float], length: int = SALARY_YEAR_COUNT):
        amounts = tuple(float(v) for v in values)
        if len(amounts) != length:
            raise ValueError(
                f"YearlyAmounts requires exactly {length} values, got {len(amounts)}"
            )
        return super().__new__(cls, amounts)

    @classmethod
    def zeros(cls, length: int = SALARY_YEAR_COUNT) -> "YearlyAmounts":
        """Create an all-zero window."""
        return cls([0.0] * length, length=length)

    @property
    def current(self) -> float:
        """Amount for the current season (index 0)."""
        return self[0]

    @property
    def future(self) -> "tuple":
        """Amounts for future seasons (index 1 onward)."""
        return tuple(self[1:])

    def total(self) -> float:
        """Sum across the whole window."""
        return sum(self)

    def as_list(self) -> List[float]:
        """Plain list copy, for JSON serialization."""
        return list(self)

    def __repr__(self) -> str:
        return f"YearlyAmounts({list(self)!r})"


def salary_year_labels(
    current_season: int,
    length: int = SALARY_YEAR_COUNT
) -> List[int]:
    """
    Season labels matching each window index.

    Args:
        current_season: Season year at index 0 (e.g., 2025)
        length: Window length

    Returns:
        List of season years, e.g. [2025, 2026, 2027, 2028, 2029]
    """
    return [current_season + offset for offset in range(length)]


def label_amounts(
    amounts: Sequence[float],
    current_season: int
) -> dict:
    """
    Map window amounts onto their season labels for display collaborators.

    Args:
        amounts: Window amounts (YearlyAmounts or any sequence)
        current_season: Season year at index 0

    Returns:
        Dict of season year → amount
    """
    labels = salary_year_labels(current_season, len(amounts))
    return dict(zip(labels, amounts))
