"""Expression parsing and duration formatting for timecalc."""
from timecalc.core.formatter import format_duration, split_duration
from timecalc.core.parser import (
    ParseError,
    aggregate,
    iter_expressions,
    parse_expression,
    parse_expressions,
    parse_one,
)

__all__ = [
    'ParseError',
    'aggregate',
    'format_duration',
    'iter_expressions',
    'parse_expression',
    'parse_expressions',
    'parse_one',
    'split_duration',
]
