"""Suite settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

log = structlog.get_logger(__name__)

ENV_FILE = ".env"

CONSOLE_MESSAGE_TYPES = frozenset(
    {
        "log",
        "debug",
        "info",
        "error",
        "warning",
        "dir",
        "dirxml",
        "table",
        "trace",
        "clear",
        "startGroup",
        "startGroupCollapsed",
        "endGroup",
        "assert",
        "profile",
        "profileEnd",
        "count",
        "timeEnd",
    }
)


class Settings(BaseSettings):
    """Catalog suite configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Site under test
    site_url: str = Field(description="Start page of the shop under test")

    # Logging
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    # Waits
    default_timeout_ms: int = Field(
        default=6000, ge=0, description="Wait window for visible/enabled/text conditions"
    )
    product_wait_timeout_ms: int = Field(
        default=1000, ge=0, description="Existence wait for each product card"
    )
    navigation_wait_until: Literal["commit", "domcontentloaded", "load", "networkidle"] = Field(
        default="commit", description="Navigation event page.goto() waits for"
    )

    section_match: Literal["equals", "contains"] = Field(
        default="equals",
        description="Heading must equal the section name, or contain it ignoring case",
    )

    # Pagination bounds
    max_pages: int = Field(default=100, ge=1, description="Most listing pages to traverse")
    pagination_deadline_seconds: float = Field(
        default=600.0, gt=0, description="Wall-clock budget for the whole listing traversal"
    )
    filter_check_mode: Literal["fail_fast", "collect_all"] = Field(
        default="fail_fast",
        description="Stop on the first mismatching product or report all of them",
    )

    # Report attachments
    save_screenshots: bool = Field(default=True, description="Attach a screenshot per step")
    save_page_source: bool = Field(default=True, description="Attach page HTML per step")
    browser_log_types: list[str] = Field(
        default_factory=list, description="Console message types attached per step"
    )

    # Browser
    browser_args: list[str] = Field(
        default_factory=lambda: ["--disable-extensions", "--start-maximized"],
        description="Extra browser launch arguments",
    )
    headed: bool = Field(default=False, description="Show the browser window")
    slow_mo_ms: int = Field(default=0, ge=0, description="Delay between browser actions")

    @field_validator("site_url")
    @classmethod
    def validate_site_url(cls, v: str) -> str:
        """Validate site URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Site URL must start with http:// or https://")
        return v

    @field_validator("browser_log_types")
    @classmethod
    def validate_browser_log_types(cls, v: list[str]) -> list[str]:
        """Only accept console message types the browser actually emits."""
        unknown = sorted(set(v) - CONSOLE_MESSAGE_TYPES)
        if unknown:
            raise ValueError(f"Unknown console message types: {', '.join(unknown)}")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    if not Path(ENV_FILE).exists():
        log.warning("env_file_not_found", path=ENV_FILE)
    return Settings()  # type: ignore[call-arg]  # Values from env
