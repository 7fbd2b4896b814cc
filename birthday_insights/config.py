"""Runtime configuration for the birthday_insights package.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults, or a validation error if a required variable is missing

Usage::

    from birthday_insights.config import settings

    print(settings.wikipedia_feed_url)
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    model_arn: str = Field(
        ...,
        alias="MODEL_ARN",
        description="AWS Bedrock application inference profile ARN.",
    )
    wikipedia_feed_url: str = Field(
        "https://en.wikipedia.org/api/rest_v1/feed/onthisday",
        alias="WIKIPEDIA_FEED_URL",
        description="Base URL of the Wikipedia 'on this day' REST feed.",
    )
    request_timeout: float = Field(
        10.0,
        alias="REQUEST_TIMEOUT",
        gt=0,
        description="Timeout in seconds for each feed request.",
    )
    user_agent: str = Field(
        "birthday-insights/0.1",
        alias="USER_AGENT",
        description="User-Agent header sent to Wikimedia, which requires one.",
    )
    page_size: int = Field(
        10,
        alias="PAGE_SIZE",
        ge=1,
        description="Number of people or events returned per page.",
    )
    refresh_interval: float = Field(
        60.0,
        alias="REFRESH_INTERVAL",
        gt=0,
        description="Seconds between live age recomputations.",
    )


settings = Settings()
