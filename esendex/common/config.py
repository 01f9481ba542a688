"""esendex.common.config

Configuration is read from the environment only (optionally seeded from a
``.env`` file). Nothing here talks to the network: the values are plain
defaults that ``Client`` falls back to when the caller does not pass them
explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(usecwd=True))


DEFAULT_BASE_URL = "https://api.esendex.com/"
DEFAULT_USER_AGENT = "esendex/python"


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass
class Settings:
    """
    Settings read from environment variables.

    Grouped into API access, HTTP transport and logging/timing.
    """

    # API
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    username: str = ""
    password: str = ""
    account_reference: str = ""

    # HTTP
    timeout_s: float = 10.0
    pool_connections: int = 10
    pool_maxsize: int = 10

    # logging / timing
    log_level: str = "INFO"
    slow_threshold_ms: int = 1000
    timing_log_all: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment."""
        return cls(
            base_url=os.getenv("ESENDEX_BASE_URL", DEFAULT_BASE_URL),
            user_agent=os.getenv("ESENDEX_USER_AGENT", DEFAULT_USER_AGENT),
            username=os.getenv("ESENDEX_USERNAME", ""),
            password=os.getenv("ESENDEX_PASSWORD", ""),
            account_reference=os.getenv("ESENDEX_ACCOUNT_REFERENCE", ""),
            timeout_s=_env_float("ESENDEX_TIMEOUT_S", 10.0),
            pool_connections=_env_int("HTTP_POOL_CONN", 10),
            pool_maxsize=_env_int("HTTP_POOL_MAX", 10),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            slow_threshold_ms=_env_int("TIMING_SLOW_THRESHOLD_MS", 1000),
            timing_log_all=os.getenv("TIMING_LOG_ALL", "false").lower() == "true",
        )


# Global settings instance shared across the package.
settings = Settings.from_env()
