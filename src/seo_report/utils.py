"""Rounding, URL validation and timestamp helpers."""

import math
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from urllib.parse import urlparse

from seo_report.constants import ALLOWED_URL_SCHEMES
from seo_report.exceptions import InvalidURLError


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going up."""
    return int(math.floor(value + 0.5))


def round_to_tenth(value: float) -> float:
    """Round to one decimal place, with .x5 always going up.

    Works on the exact binary value of the float, so 6.25 becomes 6.3.
    """
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def clamp(value: float, lower: float = 0, upper: float = 100) -> float:
    return min(upper, max(lower, value))


def validate_url(url: str) -> str:
    """Check that a URL is absolute and uses http or https.

    Args:
        url: The URL to validate

    Returns:
        The URL, stripped of surrounding whitespace

    Raises:
        InvalidURLError: If the URL has no http(s) scheme or no host
    """
    if not isinstance(url, str):
        raise InvalidURLError(str(url))

    candidate = url.strip()
    try:
        parsed = urlparse(candidate)
        parsed.port  # raises ValueError when out of range
    except ValueError as e:
        raise InvalidURLError(candidate) from e

    if parsed.scheme.lower() not in ALLOWED_URL_SCHEMES or not parsed.hostname:
        raise InvalidURLError(candidate)
    return candidate


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a moment as e.g. 'Oct 17, 2026, 3:04 PM'."""
    moment = moment or datetime.now()
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment:%b} {moment.day}, {moment.year}, {hour}:{moment:%M} {meridiem}"
