"""Calendar-aware age arithmetic.

``compute_age`` decomposes the span between a birth instant and a reference
instant into whole years, months and days.  Anchors are advanced with
``dateutil.relativedelta``, which clamps to the last valid day of the month
(Feb 29 + 1 year is Feb 28, Jan 31 + 1 month is the end of February), so
``birth + relativedelta(years=y, months=m, days=d)`` lands exactly on the
reference date.
"""

import datetime
import logging
from dataclasses import dataclass

from dateutil.relativedelta import relativedelta

logger: logging.Logger = logging.getLogger(__name__)

_ORDINAL_SUFFIXES: tuple[str, ...] = ("th", "st", "nd", "rd")


class InvalidRangeError(ValueError):
    """Raised when the reference instant precedes the birth instant."""


@dataclass(frozen=True)
class AgeBreakdown:
    """Elapsed time between a birth instant and a reference instant.

    Attributes:
        years: Full anniversary-respecting years elapsed.
        months: Full months beyond the last completed year (0-11).
        days: Full days beyond the last completed month (0-30).
        total_months: Full calendar months elapsed since birth.
        total_days: Full 24-hour days elapsed since birth.
        day_of_life: Ordinal day of life, counting the birth day as day 1.
    """

    years: int
    months: int
    days: int
    total_months: int
    total_days: int
    day_of_life: int


@dataclass(frozen=True)
class ElapsedTotals:
    """Whole hours, minutes and seconds lived up to a reference instant."""

    hours: int
    minutes: int
    seconds: int


def _align(
    birth: datetime.date, reference: datetime.date | None
) -> tuple[datetime.date, datetime.date]:
    """Default *reference* to now and coerce a date/datetime pair to one type."""
    if reference is None:
        if isinstance(birth, datetime.datetime):
            reference = datetime.datetime.now(birth.tzinfo)
        else:
            reference = datetime.date.today()

    birth_is_dt = isinstance(birth, datetime.datetime)
    if birth_is_dt != isinstance(reference, datetime.datetime):
        if not birth_is_dt:
            birth = datetime.datetime.combine(birth, datetime.time(), reference.tzinfo)
        else:
            reference = datetime.datetime.combine(reference, datetime.time(), birth.tzinfo)

    if reference < birth:
        raise InvalidRangeError(
            f"reference {reference.isoformat()} precedes birth {birth.isoformat()}."
        )
    return birth, reference


def compute_age(
    birth: datetime.date, reference: datetime.date | None = None
) -> AgeBreakdown:
    """Compute the age breakdown of *birth* as of *reference*.

    Args:
        birth: Birth date or datetime.
        reference: The instant to measure up to.  Defaults to now.

    Returns:
        An immutable ``AgeBreakdown``.

    Raises:
        InvalidRangeError: If *reference* is earlier than *birth*.
    """
    birth, reference = _align(birth, reference)

    delta = relativedelta(reference, birth)
    total_days = (reference - birth) // datetime.timedelta(days=1)

    breakdown = AgeBreakdown(
        years=delta.years,
        months=delta.months,
        days=delta.days,
        total_months=delta.years * 12 + delta.months,
        total_days=total_days,
        day_of_life=total_days + 1,
    )
    logger.debug(
        "compute_age: %dy %dm %dd, %d total days",
        breakdown.years,
        breakdown.months,
        breakdown.days,
        breakdown.total_days,
    )
    return breakdown


def elapsed_totals(
    birth: datetime.date, reference: datetime.date | None = None
) -> ElapsedTotals:
    """Return the whole hours, minutes and seconds between *birth* and *reference*."""
    birth, reference = _align(birth, reference)
    seconds = int((reference - birth).total_seconds())
    return ElapsedTotals(hours=seconds // 3600, minutes=seconds // 60, seconds=seconds)


def ordinal_label(day_number: int) -> str:
    """Format *day_number* with thousands separators and an English ordinal suffix.

    >>> ordinal_label(21)
    '21st'
    >>> ordinal_label(1000)
    '1,000th'
    """
    last_two = abs(day_number) % 100
    last = abs(day_number) % 10
    if 11 <= last_two <= 13 or last >= len(_ORDINAL_SUFFIXES):
        suffix = "th"
    else:
        suffix = _ORDINAL_SUFFIXES[last]
    return f"{day_number:,}{suffix}"
