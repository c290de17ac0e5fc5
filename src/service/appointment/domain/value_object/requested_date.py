"""
Requested calendar date parsing.

Parsing never raises: callers get a ``DateParseResult`` and decide what a
failure means for them.
"""

from datetime import date, datetime
import re
from typing import Optional

import attrs


REQUESTED_DATE_FORMAT = '%Y-%m-%d'
INVALID_DATE_MESSAGE = 'Invalid date format. Expected format: yyyy-MM-dd'

# strptime alone accepts '2024-5-3', the wire format requires zero padding
_REQUESTED_DATE_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2}', re.ASCII)


@attrs.define(frozen=True)
class DateParseResult:
    value: Optional[date] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: date) -> 'DateParseResult':
        return cls(value=value)

    @classmethod
    def invalid(cls, error: str = INVALID_DATE_MESSAGE) -> 'DateParseResult':
        return cls(error=error)


def parse_requested_date(raw: Optional[str]) -> DateParseResult:
    if raw is None or not _REQUESTED_DATE_PATTERN.fullmatch(raw):
        return DateParseResult.invalid()
    try:
        return DateParseResult.ok(datetime.strptime(raw, REQUESTED_DATE_FORMAT).date())
    except ValueError:
        return DateParseResult.invalid()
