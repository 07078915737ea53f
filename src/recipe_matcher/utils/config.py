"""Configuration management for Recipe Matcher.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os
from typing import Optional

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # TheMealDB base URL (v1 with the public test key "1")
        self.MEALDB_BASE_URL: str = os.getenv("MEALDB_BASE_URL", "https://www.themealdb.com/api/json/v1/1")
        # Number of selected ingredients that trigger a search call. Default: 5
        self.MAX_INGREDIENTS_QUERIED: int = int(os.getenv("MAX_INGREDIENTS_QUERIED", "5"))
        # Maximum number of unique candidates kept after aggregation. Default: 10
        self.MAX_CANDIDATES: int = int(os.getenv("MAX_CANDIDATES", "10"))
        # Upper bound on concurrent detail lookups. Default: 10
        self.MAX_CONCURRENT_FETCHES: int = int(os.getenv("MAX_CONCURRENT_FETCHES", "10"))
        # Per-call HTTP timeout in seconds. Default: 10
        self.REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "10"))
        # Seed for placeholder estimates (cook time, servings, calories).
        # Unset: estimates differ on every request
        seed = os.getenv("ESTIMATE_SEED")
        self.ESTIMATE_SEED: Optional[int] = int(seed) if seed else None
        # Output Format for the query runner: "json" or "markdown". Default: "markdown"
        self.OUTPUT_FORMAT: str = os.getenv("OUTPUT_FORMAT", "markdown")

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a limit is not positive or a choice is invalid.
        """
        if not self.MEALDB_BASE_URL.startswith(("http://", "https://")):
            raise ValueError(
                f"MEALDB_BASE_URL must be an http(s) URL, got: {self.MEALDB_BASE_URL}"
            )
        if self.MAX_INGREDIENTS_QUERIED < 1:
            raise ValueError(
                f"MAX_INGREDIENTS_QUERIED must be at least 1, got: {self.MAX_INGREDIENTS_QUERIED}"
            )
        if self.MAX_CANDIDATES < 1:
            raise ValueError(
                f"MAX_CANDIDATES must be at least 1, got: {self.MAX_CANDIDATES}"
            )
        if self.MAX_CONCURRENT_FETCHES < 1:
            raise ValueError(
                f"MAX_CONCURRENT_FETCHES must be at least 1, got: {self.MAX_CONCURRENT_FETCHES}"
            )
        if self.REQUEST_TIMEOUT_SECONDS <= 0:
            raise ValueError(
                f"REQUEST_TIMEOUT_SECONDS must be positive, got: {self.REQUEST_TIMEOUT_SECONDS}"
            )
        if self.OUTPUT_FORMAT not in ("json", "markdown"):
            raise ValueError(
                f"OUTPUT_FORMAT must be 'json' or 'markdown', got: {self.OUTPUT_FORMAT}"
            )


# Create module-level config instance and validate immediately
config = Config()
config.validate()
