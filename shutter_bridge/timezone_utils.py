"""
Host timezone lookup.
"""

import logging
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tzlocal

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_TIMEZONE = 'UTC'


def _is_loadable(tz_name: str) -> bool:
    try:
        ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def _timezone_from_system() -> str | None:
    """Read the operating system timezone, bypassing tzlocal's cache."""
    try:
        tzlocal.reload_localzone()
        return tzlocal.get_localzone_name()
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        logger.warning("Could not determine system timezone: %s", e)
        return None


def get_host_timezone_name(fallback: str = DEFAULT_FALLBACK_TIMEZONE) -> str:
    """
    Return the host's current default timezone identifier.

    The value is resolved on every call so that changes to the host
    setting between calls are picked up. A set TZ wins over the system
    configuration; a TZ that is not a zoneinfo name (including POSIX rule
    strings) resolves to the fallback, as glibc treats it as UTC.

    Args:
        fallback: Identifier returned when the host cannot determine a zone

    Returns:
        A non-empty timezone identifier such as 'America/New_York'
    """
    tz_env = os.environ.get('TZ', '').strip().lstrip(':')
    if tz_env:
        if _is_loadable(tz_env):
            return tz_env
        logger.warning("Unknown TZ value %r, falling back to %s", tz_env, fallback)
        return fallback

    tz_name = _timezone_from_system()
    if not tz_name:
        logger.warning("Host timezone unavailable, falling back to %s", fallback)
        return fallback
    return tz_name


def get_host_timezone(fallback: str = DEFAULT_FALLBACK_TIMEZONE) -> ZoneInfo:
    """Return the host timezone as a ZoneInfo object."""
    return ZoneInfo(get_host_timezone_name(fallback))
