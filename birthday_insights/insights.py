"""Gather everything shown for a selected birthday in one call."""

import datetime
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from birthday_insights.onthisday import FamousPerson, HistoricalEvent, OnThisDayClient
from birthday_insights.zodiac import Horoscope, get_horoscope

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BirthdayInsights:
    date: datetime.date
    horoscope: Horoscope
    famous_people: list[FamousPerson]
    historical_events: list[HistoricalEvent]


def gather_insights(
    date: datetime.date, client: OnThisDayClient | None = None
) -> BirthdayInsights:
    """Fetch the horoscope, famous people and historical events for *date* in parallel."""
    client = client or OnThisDayClient()
    with ThreadPoolExecutor(max_workers=3) as pool:
        horoscope = pool.submit(get_horoscope, date)
        people = pool.submit(client.fetch_famous_people, date)
        events = pool.submit(client.fetch_historical_events, date)
        insights = BirthdayInsights(
            date=date,
            horoscope=horoscope.result(),
            famous_people=people.result(),
            historical_events=events.result(),
        )
    logger.info(
        "Gathered insights: sign=%s people=%d events=%d",
        insights.horoscope.sign,
        len(insights.famous_people),
        len(insights.historical_events),
    )
    return insights
