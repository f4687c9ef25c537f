import datetime


MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
MINUTES_PER_WEEK = 7 * MINUTES_PER_DAY

# Duration units, in minutes, largest first; this is also the order in which
# they are rendered.
UNITS = {
    'w': MINUTES_PER_WEEK,
    'd': MINUTES_PER_DAY,
    'h': MINUTES_PER_HOUR,
    'm': 1,
}


def truncdiv(a, b):
    """Divide two integers, rounding toward zero.

    Python's ``//`` rounds toward negative infinity; durations are split
    into components that all carry the sign of the total, so we need C-like
    truncation instead.
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q


def truncmod(a, b):
    """Remainder of truncdiv(a, b); has the sign of ``a``."""
    return a - truncdiv(a, b) * b


def as_minutes(duration):
    """Convert a datetime.timedelta to an integer number of minutes.

    Leftover seconds are dropped, rounding toward zero for negative
    durations as well.
    """
    return truncdiv(duration // datetime.timedelta(seconds=1), 60)
