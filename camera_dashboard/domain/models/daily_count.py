# Standard library imports
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyCount:
    """Cumulative number of cameras created on or before ``date``."""
    date: date
    count: int
