"""birthday_insights: age statistics, horoscopes and "on this day" facts for a birthdate.

Public API
----------
compute_age
    Calendar-aware age breakdown between a birth instant and a reference instant.
ordinal_label
    English ordinal label with thousands separators ("12,345th").
elapsed_totals
    Whole hours, minutes and seconds lived.
AgeTicker
    Recomputes an age breakdown on a fixed interval against a live clock.
gather_insights
    Horoscope, famous people and historical events for a date, fetched in parallel.
create_agent
    Factory function that builds and returns a configured ``strands.Agent``.

Example
-------
>>> import datetime
>>> from birthday_insights import compute_age
>>> compute_age(datetime.date(2000, 2, 29), datetime.date(2001, 2, 28)).years
1
"""

from birthday_insights.age import (
    AgeBreakdown,
    InvalidRangeError,
    compute_age,
    elapsed_totals,
    ordinal_label,
)
from birthday_insights.agent import create_agent
from birthday_insights.insights import BirthdayInsights, gather_insights
from birthday_insights.ticker import AgeTicker

__all__: list[str] = [
    "AgeBreakdown",
    "AgeTicker",
    "BirthdayInsights",
    "InvalidRangeError",
    "compute_age",
    "create_agent",
    "elapsed_totals",
    "gather_insights",
    "ordinal_label",
]
