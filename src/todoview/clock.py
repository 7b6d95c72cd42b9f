"""Current-day calculation in the configured time zone."""

import logging
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from todoview.errors import ConfigError

logger = logging.getLogger(__name__)


def detect_timezone() -> str:
    """Return the system time zone name, falling back to UTC."""
    try:
        from tzlocal import get_localzone
        return str(get_localzone())
    except Exception as e:
        logger.debug("Could not detect system timezone (%s); using UTC", e)
        return "UTC"


def today_in(timezone_str: str) -> date:
    """Get the current calendar day in ``timezone_str``.

    Called once per invocation; every date comparison of a run uses the
    same value.

    Raises:
        ConfigError: If the time zone name is unknown
    """
    try:
        tz = ZoneInfo(timezone_str)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"Invalid timezone '{timezone_str}': {e}") from e

    return datetime.now(timezone.utc).astimezone(tz).date()
