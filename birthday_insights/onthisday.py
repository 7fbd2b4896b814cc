"""Client for the Wikipedia "on this day" feed.

Births, deaths and events for a calendar day are fetched from
``{base_url}/{kind}/{MM}/{DD}``.  When the feed is unreachable or answers
with an error status the client logs a warning and returns a small built-in
data set instead, shuffled deterministically per calendar day so repeated
lookups of the same day agree.
"""

import datetime
import logging
import random
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Literal

import requests

from birthday_insights.config import settings

logger: logging.Logger = logging.getLogger(__name__)

_EVENT_SEPARATOR = " – "
_FALLBACK_PEOPLE_LIMIT = 6
_FALLBACK_EVENTS_LIMIT = 5


class OnThisDayError(Exception):
    """The feed returned an unusable response."""


@dataclass(frozen=True)
class WikipediaUrl:
    desktop: str
    mobile: str


@dataclass(frozen=True)
class FamousPerson:
    name: str
    year: int | None
    description: str
    kind: Literal["birth", "death"]
    image_url: str | None = None
    wikipedia_url: WikipediaUrl | None = None


@dataclass(frozen=True)
class HistoricalEvent:
    year: int | None
    event: str
    description: str
    image_url: str | None = None
    wikipedia_url: WikipediaUrl | None = None


FALLBACK_PEOPLE: tuple[FamousPerson, ...] = (
    FamousPerson("Albert Einstein", 1879, "Theoretical physicist, developed theory of relativity", "birth"),
    FamousPerson("Leonardo da Vinci", 1452, "Renaissance artist and inventor", "birth"),
    FamousPerson("Marie Curie", 1867, "First woman to win Nobel Prize", "birth"),
    FamousPerson("William Shakespeare", 1564, "English playwright and poet", "birth"),
    FamousPerson("Nelson Mandela", 1918, "Anti-apartheid leader and former president", "birth"),
    FamousPerson("John F. Kennedy", 1963, "35th President of the United States", "death"),
    FamousPerson("Princess Diana", 1997, "Princess of Wales, humanitarian", "death"),
    FamousPerson("Martin Luther King Jr.", 1968, "Civil rights leader and activist", "death"),
    FamousPerson("Frida Kahlo", 1907, "Mexican artist known for self-portraits", "birth"),
    FamousPerson("Stephen Hawking", 1942, "Theoretical physicist and cosmologist", "birth"),
)

FALLBACK_EVENTS: tuple[HistoricalEvent, ...] = (
    HistoricalEvent(1969, "Apollo 11 Moon Landing", "First humans landed on the moon"),
    HistoricalEvent(1989, "Fall of Berlin Wall", "Symbol of Cold War division comes down"),
    HistoricalEvent(1776, "Declaration of Independence", "American colonies declare independence"),
    HistoricalEvent(1945, "End of World War II", "Japan surrenders, ending WWII"),
    HistoricalEvent(1963, "March on Washington", "Historic civil rights demonstration"),
)


def _day_seed(date: datetime.date) -> int:
    return date.month * 31 + date.day


def _shuffled(items: tuple, date: datetime.date, limit: int) -> list:
    shuffled = list(items)
    random.Random(_day_seed(date)).shuffle(shuffled)
    return shuffled[:limit]


def _image_url(pages: list[dict[str, Any]]) -> str | None:
    for page in pages:
        if not isinstance(page, dict):
            continue
        source = (page.get("originalimage") or {}).get("source") or (
            page.get("thumbnail") or {}
        ).get("source")
        if source:
            return source
    return None


def _wikipedia_url(pages: list[dict[str, Any]]) -> WikipediaUrl | None:
    if not pages or not isinstance(pages[0], dict):
        return None
    content_urls = pages[0].get("content_urls")
    if not content_urls:
        return None
    return WikipediaUrl(
        desktop=(content_urls.get("desktop") or {}).get("page", ""),
        mobile=(content_urls.get("mobile") or {}).get("page", ""),
    )


def _records(entries: list[Any]) -> list[dict[str, Any]]:
    return [e for e in entries if isinstance(e, dict)]


def parse_person(entry: dict[str, Any], kind: Literal["birth", "death"]) -> FamousPerson:
    """Build a ``FamousPerson`` from one feed entry.

    The name is the text before the first comma and the description the
    text after it.
    """
    parts = (entry.get("text") or "").split(",")
    description = parts[1].strip() if len(parts) > 1 else ""
    pages = entry.get("pages") or []
    return FamousPerson(
        name=parts[0],
        year=entry.get("year"),
        description=description or "Famous person",
        kind=kind,
        image_url=_image_url(pages),
        wikipedia_url=_wikipedia_url(pages),
    )


def parse_event(entry: dict[str, Any]) -> HistoricalEvent:
    """Build a ``HistoricalEvent`` from one feed entry."""
    text = entry.get("text") or ""
    parts = text.split(_EVENT_SEPARATOR)
    title = parts[0]
    description = parts[1] if len(parts) > 1 else ""
    pages = entry.get("pages") or []
    return HistoricalEvent(
        year=entry.get("year"),
        event=title or text,
        description=description or text,
        image_url=_image_url(pages),
        wikipedia_url=_wikipedia_url(pages),
    )


class OnThisDayClient:
    """Fetch famous people and historical events for a calendar day."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or settings.wikipedia_feed_url).rstrip("/")
        self.timeout = settings.request_timeout if timeout is None else timeout
        self.session = session or requests.Session()
        self.headers = {
            "User-Agent": user_agent or settings.user_agent,
            "Accept": "application/json",
        }

    def _feed(self, kind: str, date: datetime.date) -> list[Any]:
        url = f"{self.base_url}/{kind}/{date.month:02d}/{date.day:02d}"
        response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        if not response.ok:
            raise OnThisDayError(f"{kind} feed returned HTTP {response.status_code}.")
        try:
            payload = response.json()
        except ValueError as exc:
            raise OnThisDayError(f"{kind} feed returned invalid JSON.") from exc

        entries = payload.get(kind) if isinstance(payload, dict) else None
        if not isinstance(entries, list):
            return []
        logger.debug("Fetched %d %s for %02d-%02d", len(entries), kind, date.month, date.day)
        return entries

    def fetch_famous_people(self, date: datetime.date) -> list[FamousPerson]:
        """Return the people born or died on *date*'s month and day.

        Births come first, then deaths, in feed order.  Falls back to the
        built-in list on any network or response error.
        """
        try:
            with ThreadPoolExecutor(max_workers=2) as pool:
                births = pool.submit(self._feed, "births", date)
                deaths = pool.submit(self._feed, "deaths", date)
                birth_entries = births.result()
                death_entries = deaths.result()
        except (requests.RequestException, OnThisDayError) as exc:
            logger.warning("Famous people lookup failed, using fallback data: %s", exc)
            return _shuffled(FALLBACK_PEOPLE, date, _FALLBACK_PEOPLE_LIMIT)

        return [parse_person(e, "birth") for e in _records(birth_entries)] + [
            parse_person(e, "death") for e in _records(death_entries)
        ]

    def fetch_historical_events(self, date: datetime.date) -> list[HistoricalEvent]:
        """Return every event recorded for *date*'s month and day."""
        try:
            entries = self._feed("events", date)
        except (requests.RequestException, OnThisDayError) as exc:
            logger.warning("Historical events lookup failed, using fallback data: %s", exc)
            return _shuffled(FALLBACK_EVENTS, date, _FALLBACK_EVENTS_LIMIT)

        return [parse_event(e) for e in _records(entries)]
