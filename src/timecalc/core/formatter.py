import datetime

from timecalc.core.utils import UNITS, as_minutes, truncdiv, truncmod


def split_duration(minutes):
    """Split a number of minutes into (weeks, days, hours, minutes).

    All components have the sign of the total, so a negative total splits
    into non-positive components.
    """
    parts = []
    for size in UNITS.values():
        parts.append(truncdiv(minutes, size))
        minutes = truncmod(minutes, size)
    return tuple(parts)


def format_duration(duration):
    """Format a duration in the compact ``1w 2d 3h 4m`` style.

    ``duration`` is an integer number of minutes or a datetime.timedelta.
    Zero components are left out; a zero duration is ``0m``.
    """
    if isinstance(duration, datetime.timedelta):
        duration = as_minutes(duration)
    if duration == 0:
        return '0m'
    parts = zip(split_duration(duration), UNITS)
    return ' '.join('%d%s' % (value, unit) for value, unit in parts if value)
