"""Lap / sector time and speed token parsing."""

import re

from ._errors import TokenParseError

# shapes accepted for elapsed times, tried in this order
SECONDS_PATTERN = re.compile(r'^(\d{2})\.(\d{3})$')
MINUTES_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})\.(\d{3})$')

# neighbour patterns used by the classifier
LAP_TIME_PATTERN = re.compile(r'^(?:\d{1,3}:)?\d{2}\.\d{3}$')
CLOCK_TIME_PATTERN = re.compile(r'^\d{2}:\d{2}:\d{2}$')

SPEED_PATTERN = re.compile(r'^\d+(?:\.\d+)?$')


def parse_time_ms(value, index=None, step='time'):
    """Convert ``SS.mmm`` or ``M:SS.mmm`` / ``MM:SS.mmm`` to milliseconds.

    The token shape is checked with a regex before any arithmetic so that
    e.g. a clock time is never taken for a duration.
    """
    m = SECONDS_PATTERN.match(value)
    if m:
        minutes = 0
        seconds, millis = m.groups()
    else:
        m = MINUTES_PATTERN.match(value)
        if not m:
            raise TokenParseError(value, index, step)
        minutes, seconds, millis = m.groups()

    if int(seconds) >= 60:
        raise TokenParseError(value, index, step)

    return int(minutes) * 60000 + int(seconds) * 1000 + int(millis)


def format_time_ms(ms):
    """Render milliseconds back to the sheet's time notation."""
    minutes, rest = divmod(int(ms), 60000)
    seconds, millis = divmod(rest, 1000)
    if minutes:
        return f'{minutes}:{seconds:02d}.{millis:03d}'
    return f'{seconds:02d}.{millis:03d}'


def parse_speed(value, index=None, step='speed'):
    if not SPEED_PATTERN.match(value):
        raise TokenParseError(value, index, step)
    return float(value)


def is_lap_time(value):
    return bool(LAP_TIME_PATTERN.match(value))


def is_duration(value):
    """True when ``parse_time_ms`` accepts ``value``."""
    m = SECONDS_PATTERN.match(value) or MINUTES_PATTERN.match(value)
    return bool(m) and int(m.groups()[-2]) < 60


def is_clock_time(value):
    return bool(CLOCK_TIME_PATTERN.match(value))
