"""Entry point for the birthday insights CLI.

Run with:
    python main.py

The script configures structured logging, builds the agent, prompts the user
for their birthdate, validates the input, prints the local life statistics
and then asks the agent for the full birthday insights.
"""

import argparse
import datetime
import json
import logging
import os
import sys
import time
import uuid

from birthday_insights import AgeTicker, compute_age, create_agent, elapsed_totals, ordinal_label
from birthday_insights.age import AgeBreakdown
from birthday_insights.agent import invoke_with_audit
from birthday_insights.zodiac import get_zodiac_sign

logger: logging.Logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure logging format based on the LOG_FORMAT environment variable.

    Set LOG_FORMAT=json for structured JSON output (CloudWatch-friendly).
    Any other value (or absent) falls back to human-readable plaintext.
    """
    log_format = os.environ.get("LOG_FORMAT", "text").lower()

    if log_format == "json":
        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload: dict = {
                    "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                }
                # Merge any extra fields passed via logger.info(..., extra={...})
                for key, value in record.__dict__.items():
                    if key not in logging.LogRecord.__dict__ and not key.startswith("_"):
                        payload[key] = value
                return json.dumps(payload, default=str)

        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def _print_life_statistics(birth: datetime.date, today: datetime.date) -> None:
    age = compute_age(birth, today)
    print(f"Zodiac sign: {get_zodiac_sign(birth.month, birth.day)}")
    print(f"Age: {age.years} years, {age.months} months, {age.days} days")
    print(f"Total: {age.total_months:,} months, {age.total_days:,} days")
    print(f"Today is the {ordinal_label(age.day_of_life)} day of your life.")
    lived = elapsed_totals(birth, datetime.datetime.now())
    print(f"Total hours on Earth: {lived.hours:,}")
    print(f"Total minutes on Earth: {lived.minutes:,}")
    print(f"Total seconds on Earth: {lived.seconds:,}")


def _print_day_of_life(age: AgeBreakdown) -> None:
    print(f"{age.years} years, {age.months} months, {age.days} days: day {ordinal_label(age.day_of_life)}")


def _watch(birth: datetime.date) -> None:
    """Reprint the age every refresh interval until interrupted with Ctrl+C."""
    with AgeTicker(birth, _print_day_of_life) as ticker:
        logger.info("Watching age, refreshing every %.0fs", ticker.interval)
        try:
            while True:
                time.sleep(ticker.interval)
        except KeyboardInterrupt:
            print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Birthday insights for a birthdate.")
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Keep running and refresh the age every REFRESH_INTERVAL seconds.",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> None:
    """Configure logging, build the agent, and run the interactive prompt.

    Validates the user-supplied birthdate with ``datetime.date.fromisoformat``
    and rejects dates in the future before passing it to the agent.  Exits
    with code 1 on invalid input so that callers (shell scripts, Docker
    health checks, etc.) can detect failure cleanly.

    The agent call is audited by ``invoke_with_audit``.  With ``--watch`` the
    age is then reprinted on every refresh interval until Ctrl+C.
    """
    args = _parse_args(argv)
    _configure_logging()

    agent = create_agent()

    print("Welcome to Birthday Insights!")
    birthdate_raw = input("Please enter your birthdate (YYYY-MM-DD, e.g. 1990-05-15): ").strip()

    try:
        birth = datetime.date.fromisoformat(birthdate_raw)
    except ValueError:
        print(
            f"Error: '{birthdate_raw}' is not a valid date. "
            "Please use the format YYYY-MM-DD (e.g. 1990-05-15)."
        )
        sys.exit(1)

    today = datetime.date.today()
    if birth > today:
        print(f"Error: '{birthdate_raw}' is in the future. Please enter a past date.")
        sys.exit(1)

    _print_life_statistics(birth, today)

    prompt = (
        f"My birthdate is {birthdate_raw}. Tell me my horoscope, "
        "who shares my birthday and what happened in history on that day."
    )
    invoke_with_audit(agent, prompt, session_id=str(uuid.uuid4()))

    if args.watch:
        _watch(birth)


if __name__ == "__main__":
    run()
