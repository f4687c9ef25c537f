"""
Parsing of duration and interval expressions.

An expression is either a signed duration (``1h``, ``-30m``, ``2d``, ``1w``)
or a clock interval (``9-12:30``, ``08:00-08:30``).  Every expression is
converted to a signed integer number of minutes.
"""
import logging
import re

from timecalc.core.utils import MINUTES_PER_HOUR, UNITS


log = logging.getLogger('timecalc.parser')


duration_rx = re.compile(r'^(-?\d+)([wdhm])$', re.ASCII)
clock_time_rx = re.compile(r'^([01]?\d|2[0-3])(?::([0-5]\d))?$', re.ASCII)


class ParseError(ValueError):
    """An expression is neither a duration nor a clock interval."""

    def __init__(self, token):
        super(ParseError, self).__init__(token)
        self.token = token

    def __str__(self):
        return 'Failed to parse duration: %s' % self.token


def parse_duration_expression(s):
    """Parse a duration in the format ``(-)N[wdhm]``.

    Returns the number of minutes, or None if ``s`` is not a duration.
    """
    m = duration_rx.fullmatch(s)
    if not m:
        return None
    value, unit = m.groups()
    return int(value) * UNITS[unit]


def parse_clock_time(s):
    """Parse a time of day in the format ``H``, ``HH``, ``H:MM`` or ``HH:MM``.

    Returns the number of minutes since midnight, or None.
    """
    m = clock_time_rx.fullmatch(s)
    if not m:
        return None
    hour, minute = m.groups()
    return int(hour) * MINUTES_PER_HOUR + int(minute or '0')


def parse_interval_expression(s):
    """Parse an interval in the format ``start-end``.

    Both ends are times of day (see parse_clock_time).  Returns the number of
    minutes between start and end, or None if ``s`` is not an interval or if
    the interval ends before it starts.
    """
    parts = s.split('-')
    if len(parts) != 2:
        return None
    start = parse_clock_time(parts[0])
    end = parse_clock_time(parts[1])
    if start is None or end is None:
        return None
    if end < start:
        log.debug('%s: end time is before start time', s)
        return None
    return end - start


def parse_one(s):
    """Parse a duration or interval expression into minutes.

    Durations take precedence, so ``-5h`` is never read as an interval.

    Raises ParseError if ``s`` is neither.
    """
    minutes = parse_duration_expression(s)
    if minutes is None:
        minutes = parse_interval_expression(s)
    if minutes is None:
        raise ParseError(s)
    log.debug('%s = %d min', s, minutes)
    return minutes


parse_expression = parse_one


def iter_expressions(tokens):
    """Parse expressions one by one.

    Yields (token, minutes) tuples in order.  Stops with ParseError at the
    first token that cannot be parsed; the remaining tokens are not looked at.
    """
    for token in tokens:
        yield token, parse_one(token)


def aggregate(tokens):
    """Return the total number of minutes of all expressions in ``tokens``.

    An empty sequence totals 0.  The first unparseable token aborts with
    ParseError.
    """
    total = 0
    for token, minutes in iter_expressions(tokens):
        total += minutes
    return total


parse_expressions = aggregate
