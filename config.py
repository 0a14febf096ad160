"""Centralized configuration for environment variables and display constants.

This module is the single source of truth for configuration used across the
statistics core. Import constants from here rather than calling os.getenv
directly in multiple places.
"""

from __future__ import annotations

import logging
import os
from typing import Final

from dotenv import load_dotenv

from core.exceptions import ConfigurationError

# Load environment variables from .env if present
load_dotenv()


# --- Logging ---
LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


# --- Country map ---
# How a trip with several country-distance rows labels its rides:
#   primary - the country with the longest total distance
#   all     - every country the trip passes through
#   reject  - raise AmbiguousCountryError
COUNTRY_MAP_POLICIES: Final[tuple[str, ...]] = ("primary", "all", "reject")
DEFAULT_COUNTRY_MAP_POLICY: Final[str] = "primary"


# --- Metrics ---
KMH_PER_METER_PER_SECOND: Final[float] = 3.6
HITCHABILITY_PRECISION: Final[int] = 2


# --- Display ---
DISPLAY_DATE_FORMAT: Final[str] = "%d. %b %Y"


def require_country_map_policy(value: str | None = None) -> str:
    """Return a validated multi-country policy.

    Args:
        value: Explicit policy name. When omitted the ``COUNTRY_MAP_POLICY``
            environment variable is read at call time.

    Raises:
        ConfigurationError: If the policy is not one of COUNTRY_MAP_POLICIES.
    """
    raw = value if value is not None else os.getenv(
        "COUNTRY_MAP_POLICY", DEFAULT_COUNTRY_MAP_POLICY
    )
    policy = (raw or "").strip().lower()
    if policy not in COUNTRY_MAP_POLICIES:
        msg = (
            f"Unsupported country map policy '{raw}'. "
            f"Expected one of: {', '.join(COUNTRY_MAP_POLICIES)}"
        )
        raise ConfigurationError(msg, {"policy": raw})
    return policy


def configure_logging(level: str | None = None) -> None:
    """Apply the basic logging configuration used by the application."""
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", LOG_LEVEL)).upper(),
        format=LOG_FORMAT,
    )


__all__ = [
    "COUNTRY_MAP_POLICIES",
    "DEFAULT_COUNTRY_MAP_POLICY",
    "DISPLAY_DATE_FORMAT",
    "HITCHABILITY_PRECISION",
    "KMH_PER_METER_PER_SECOND",
    "LOG_FORMAT",
    "LOG_LEVEL",
    "configure_logging",
    "require_country_map_policy",
]
