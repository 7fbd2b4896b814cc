"""Strands tools exposing the birthday insights to the agent.

Each function is decorated with ``@tool`` so the Strands framework can
expose it to the language model.  Input validation is performed before any
computation so that the model receives a clear error message rather than a
cryptic Python traceback.
"""

import dataclasses
import datetime
import functools
import logging

from strands import tool

from birthday_insights.age import compute_age, elapsed_totals, ordinal_label
from birthday_insights.config import settings
from birthday_insights.insights import BirthdayInsights, gather_insights
from birthday_insights.onthisday import OnThisDayClient
from birthday_insights.pagination import Page, paginate
from birthday_insights.zodiac import get_horoscope as lookup_horoscope

logger: logging.Logger = logging.getLogger(__name__)

_MAX_DATE_LEN = 10
_MIN_DATE = datetime.date(1900, 1, 1)


def _parse_birth_date(value: str, name: str = "birth_date") -> datetime.date:
    """Validate a user-supplied ISO birth date and return it as a ``date``.

    Raises:
        ValueError: If *value* is not a string, is too long, is not a valid
            ISO date, predates 1900-01-01 or lies in the future.
    """
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string.")
    if len(value) > _MAX_DATE_LEN:
        raise ValueError(f"{name} exceeds maximum length of {_MAX_DATE_LEN}.")

    # log input lengths, not raw values
    logger.debug("Parsing %d-char %s", len(value), name)

    try:
        parsed = datetime.date.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(f"{name} is not a valid ISO date (YYYY-MM-DD).") from exc

    if parsed < _MIN_DATE:
        raise ValueError(f"{name} must not be earlier than {_MIN_DATE.isoformat()}.")
    if parsed > datetime.date.today():
        raise ValueError(f"{name} must not be in the future.")
    return parsed


@functools.lru_cache(maxsize=1)
def _client() -> OnThisDayClient:
    return OnThisDayClient()


@functools.lru_cache(maxsize=32)
def _insights(birth: datetime.date, today: datetime.date) -> BirthdayInsights:
    """Insights for *birth*, fetched once per day so paging reuses one download."""
    return gather_insights(birth, client=_client())


def _page_payload(result: Page, key: str) -> dict:
    return {
        key: [dataclasses.asdict(item) for item in result.items],
        "page": result.page,
        "total_pages": result.total_pages,
        "total_items": result.total_items,
        "has_next": result.has_next,
    }


@tool
def get_current_date() -> str:
    """Get today's date in YYYY-MM-DD format.

    Use this tool to retrieve the current date when you need to know how old
    someone is or whether a birthdate lies in the future.

    Returns:
        Today's date as a string in YYYY-MM-DD format.
    """
    today = datetime.date.today().isoformat()
    logger.debug("get_current_date called, returning %s", today)
    return today


@tool
def calculate_age(birth_date: str) -> dict:
    """Calculate a person's exact age from their birthdate.

    Use this tool whenever the user asks how old they are, how many days,
    months or years they have lived, or which day of their life today is.

    Args:
        birth_date: The birthdate in YYYY-MM-DD format.  Must not be in the
            future.

    Returns:
        A dict with years, months, days, total_months, total_days,
        day_of_life, day_of_life_label (e.g. "12,345th") and the hours,
        minutes and seconds lived so far.

    Raises:
        ValueError: If birth_date is not a valid past ISO date.
    """
    birth = _parse_birth_date(birth_date)
    breakdown = compute_age(birth, datetime.date.today())
    result = dataclasses.asdict(breakdown)
    result["day_of_life_label"] = ordinal_label(breakdown.day_of_life)
    result.update(dataclasses.asdict(elapsed_totals(birth, datetime.datetime.now())))
    logger.debug("calculate_age result: %d total days", breakdown.total_days)
    return result


@tool
def get_horoscope(birth_date: str) -> dict:
    """Get the zodiac sign and horoscope for a birthdate.

    Use this tool when the user asks about their star sign, horoscope,
    personality traits, lucky numbers or lucky color.

    Args:
        birth_date: The birthdate in YYYY-MM-DD format.

    Returns:
        A dict with sign, horoscope, traits, lucky_numbers and lucky_color.
    """
    birth = _parse_birth_date(birth_date)
    horoscope = lookup_horoscope(birth)
    logger.debug("get_horoscope resolved sign %s", horoscope.sign)
    return dataclasses.asdict(horoscope)


@tool
def get_famous_people(birth_date: str, page: int = 1) -> dict:
    """List famous people who were born or died on the same month and day.

    Use this tool when the user asks who shares their birthday or which
    notable people were born or died on that day.  Results are paginated;
    request the next page while has_next is true.

    Args:
        birth_date: The birthdate in YYYY-MM-DD format.
        page: 1-based page number.

    Returns:
        A dict with a "people" list (name, year, description, kind of
        "birth" or "death", image_url, wikipedia_url) and paging fields.
    """
    birth = _parse_birth_date(birth_date)
    people = _insights(birth, datetime.date.today()).famous_people
    return _page_payload(paginate(people, page, settings.page_size), "people")


@tool
def get_historical_events(birth_date: str, page: int = 1) -> dict:
    """List historical events that happened on the same month and day.

    Use this tool when the user asks what happened in history on their
    birthday.  Results are paginated; request the next page while has_next
    is true.

    Args:
        birth_date: The birthdate in YYYY-MM-DD format.
        page: 1-based page number.

    Returns:
        A dict with an "events" list (year, event, description, image_url,
        wikipedia_url) and paging fields.
    """
    birth = _parse_birth_date(birth_date)
    events = _insights(birth, datetime.date.today()).historical_events
    return _page_payload(paginate(events, page, settings.page_size), "events")
