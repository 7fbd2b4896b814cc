"""Zodiac sign lookup and the static horoscope table."""

import datetime
from dataclasses import dataclass

# (sign, start month, start day, end month, end day); Capricorn wraps the year.
_SIGN_RANGES: tuple[tuple[str, int, int, int, int], ...] = (
    ("Capricorn", 12, 22, 1, 19),
    ("Aquarius", 1, 20, 2, 18),
    ("Pisces", 2, 19, 3, 20),
    ("Aries", 3, 21, 4, 19),
    ("Taurus", 4, 20, 5, 20),
    ("Gemini", 5, 21, 6, 20),
    ("Cancer", 6, 21, 7, 22),
    ("Leo", 7, 23, 8, 22),
    ("Virgo", 8, 23, 9, 22),
    ("Libra", 9, 23, 10, 22),
    ("Scorpio", 10, 23, 11, 21),
    ("Sagittarius", 11, 22, 12, 21),
)

UNKNOWN_SIGN: str = "Unknown"


@dataclass(frozen=True)
class Horoscope:
    sign: str
    horoscope: str
    traits: tuple[str, ...]
    lucky_numbers: tuple[int, ...]
    lucky_color: str


_HOROSCOPES: dict[str, Horoscope] = {
    "Aries": Horoscope(
        "Aries",
        "Today brings new opportunities for leadership and innovation. "
        "Your natural enthusiasm will inspire others around you.",
        ("Leadership", "Enthusiasm", "Courage", "Independence"),
        (1, 8, 17),
        "Red",
    ),
    "Taurus": Horoscope(
        "Taurus",
        "Focus on stability and practical matters today. "
        "Your patience and determination will lead to lasting success.",
        ("Reliability", "Patience", "Practicality", "Determination"),
        (2, 6, 20),
        "Green",
    ),
    "Gemini": Horoscope(
        "Gemini",
        "Communication and learning are highlighted today. "
        "Embrace new ideas and social connections.",
        ("Adaptability", "Communication", "Curiosity", "Wit"),
        (3, 12, 21),
        "Yellow",
    ),
    "Cancer": Horoscope(
        "Cancer",
        "Emotional intuition guides you today. "
        "Trust your feelings and nurture important relationships.",
        ("Empathy", "Intuition", "Loyalty", "Creativity"),
        (4, 7, 22),
        "Silver",
    ),
    "Leo": Horoscope(
        "Leo",
        "Your natural charisma shines bright today. "
        "Take center stage and inspire others with your confidence.",
        ("Confidence", "Generosity", "Leadership", "Creativity"),
        (5, 19, 23),
        "Gold",
    ),
    "Virgo": Horoscope(
        "Virgo",
        "Attention to detail and organization will serve you well today. "
        "Perfect timing for important projects.",
        ("Perfectionism", "Analytical", "Helpful", "Organized"),
        (6, 15, 24),
        "Navy Blue",
    ),
    "Libra": Horoscope(
        "Libra",
        "Balance and harmony are key today. "
        "Your diplomatic nature will help resolve conflicts peacefully.",
        ("Balance", "Diplomacy", "Fairness", "Charm"),
        (7, 16, 25),
        "Pink",
    ),
    "Scorpio": Horoscope(
        "Scorpio",
        "Deep transformation and powerful insights await you today. "
        "Trust your instincts completely.",
        ("Intensity", "Passion", "Intuition", "Determination"),
        (8, 18, 26),
        "Deep Red",
    ),
    "Sagittarius": Horoscope(
        "Sagittarius",
        "Adventure and expansion call to you today. "
        "Embrace new philosophies and broaden your horizons.",
        ("Adventure", "Optimism", "Freedom", "Wisdom"),
        (9, 14, 27),
        "Purple",
    ),
    "Capricorn": Horoscope(
        "Capricorn",
        "Discipline and ambition drive you toward success today. "
        "Your hard work will soon pay off.",
        ("Ambition", "Discipline", "Responsibility", "Patience"),
        (10, 13, 28),
        "Brown",
    ),
    "Aquarius": Horoscope(
        "Aquarius",
        "Innovation and humanitarian causes inspire you today. "
        "Your unique vision can change the world.",
        ("Innovation", "Independence", "Humanitarian", "Originality"),
        (11, 22, 29),
        "Electric Blue",
    ),
    "Pisces": Horoscope(
        "Pisces",
        "Compassion and creativity flow through you today. "
        "Trust your artistic and spiritual instincts.",
        ("Compassion", "Intuition", "Creativity", "Spirituality"),
        (12, 24, 30),
        "Sea Green",
    ),
}


def get_zodiac_sign(month: int, day: int) -> str:
    """Return the tropical zodiac sign for *month*/*day*, or ``"Unknown"``."""
    try:
        datetime.date(2000, month, day)
    except ValueError:
        return UNKNOWN_SIGN

    for sign, start_month, start_day, end_month, end_day in _SIGN_RANGES:
        if (month == start_month and day >= start_day) or (
            month == end_month and day <= end_day
        ):
            return sign
    return UNKNOWN_SIGN


def get_horoscope(date: datetime.date) -> Horoscope:
    """Look up the horoscope entry for the sign *date* falls under."""
    return _HOROSCOPES[get_zodiac_sign(date.month, date.day)]
