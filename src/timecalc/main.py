"""Add up durations and time intervals."""
import argparse
import configparser
import logging
import sys

from timecalc import __version__
from timecalc.core import (
    ParseError,
    aggregate,
    format_duration,
    iter_expressions,
)
from timecalc.settings import Settings


log = logging.getLogger('timecalc')


DESCRIPTION = """\
Calculate the total time of a set of durations and time intervals.

An expression is either a duration or an interval.
Durations are specified as N<unit> or -N<unit>, e.g. 1h or -30m.
Intervals are specified as start-end, e.g. 9-12:30 or 08:00-08:30.

Valid duration units are:
  w  weeks
  d  days
  h  hours
  m  minutes

If no expressions are given on the command line, they are read from
standard input, separated by whitespace.
"""


parser = argparse.ArgumentParser(
    prog='timecalc',
    usage='%(prog)s [options] [EXPR ...]',
    description=DESCRIPTION,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    allow_abbrev=False)
parser.add_argument(
    '--version', action='version', version='%(prog)s ' + __version__)
parser.add_argument(
    '--debug', action='store_true',
    help='show debug messages')
parser.add_argument(
    '-v', '--verbose', action='store_true',
    help='list every expression with its duration before the total')
parser.add_argument(
    '--config', metavar='FILE',
    help='read settings from FILE instead of the default location')


def parse_args(argv=None):
    """Parse command line arguments.

    Returns (args, expressions).  Expressions are whatever argparse does not
    recognize as an option, in the order given; this is what lets negative
    durations like -30m through.
    """
    args, expressions = parser.parse_known_args(argv)
    if '--' in expressions:
        expressions.remove('--')
    return args, expressions


def load_settings(filename=None):
    settings = Settings()
    try:
        settings.load(filename)
    except (configparser.Error, ValueError) as e:
        log.error("Could not read settings from %s: %s",
                  filename or settings.get_config_file(), e)
        sys.exit(1)
    return settings


def calculate(expressions, verbose=False, output=None):
    """Print the total of ``expressions``.

    With ``verbose``, every expression is listed first, followed by a
    ``** Total`` line.
    """
    if output is None:
        output = sys.stdout
    if not verbose:
        total = aggregate(expressions)
        print(format_duration(total), file=output)
        return total
    total = 0
    for expression, minutes in iter_expressions(expressions):
        print('%-20s %s' % (expression, format_duration(minutes)),
              file=output)
        total += minutes
    print('** Total: %s' % format_duration(total), file=output)
    return total


def main(argv=None):
    """Run timecalc."""
    args, expressions = parse_args(argv)
    settings = load_settings(args.config)
    if args.debug or settings.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if not expressions:
        log.debug('Reading expressions from standard input')
        expressions = sys.stdin.read().split()
    try:
        calculate(expressions, verbose=args.verbose or settings.verbose)
    except ParseError as e:
        log.error('%s', e)
        sys.exit(1)


if __name__ == '__main__':
    main()
