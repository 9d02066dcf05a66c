"""Date phrases → SOQL date predicates (UTC calendar days).

Relative periods map to SOQL date literals (`THIS_MONTH`, `LAST_N_DAYS:n`, ...). Explicit calendar
dates are parsed with `dateparser` and rendered as UTC datetime literals; an inclusive day range is
interpreted as the half-open interval `[start 00:00:00Z, (end + 1 day) 00:00:00Z)`.

At most one time window is derived per query: the first matching rule wins.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, time, timedelta

import dateparser
from dateparser.conf import Settings as DateparserSettings

from src.intent.normalize import contains_phrase

DATE_FIELD = "CreatedDate"

_DATEPARSER_SETTINGS = DateparserSettings().replace(
    STRICT_PARSING=True,
    DATE_ORDER="MDY",
    TIMEZONE="UTC",
    TO_TIMEZONE="UTC",
    RETURN_AS_TIMEZONE_AWARE=True,
)

# Checked in order; the first phrase found decides the period.
RELATIVE_PERIODS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("this month", "current month"), "THIS_MONTH"),
    (("last month",), "LAST_MONTH"),
    (("this quarter",), "THIS_QUARTER"),
    (("last quarter",), "LAST_QUARTER"),
    (("this year",), "THIS_YEAR"),
    (("last year",), "LAST_YEAR"),
)

_LAST_N_DAYS_RE = re.compile(r"\b(?:last|past)\s+(?P<n>\d{1,4})\s+days?\b")

_DATE_FRAGMENT = r"(?:\d{4}-\d{1,2}-\d{1,2}|[0-9a-z,/ ]*?\d{4})"
_BETWEEN_RE = re.compile(
    rf"\bbetween\s+(?P<d1>{_DATE_FRAGMENT})\s+and\s+(?P<d2>{_DATE_FRAGMENT})\b"
)
_BOUND_RE = re.compile(rf"\b(?P<kw>since|after|before)\s+(?P<d>{_DATE_FRAGMENT})\b")


def _parse_date_fragment(fragment: str) -> date | None:
    dt = dateparser.parse(
        fragment.strip(" ,"),
        languages=["en"],
        settings=_DATEPARSER_SETTINGS,
    )
    if not dt:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.date()


def soql_datetime(value: datetime) -> str:
    """Render a datetime as a SOQL UTC datetime literal (`2025-06-01T00:00:00Z`)."""

    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def inclusive_dates_to_half_open(start: date, end: date) -> tuple[datetime, datetime]:
    """Convert inclusive day range into a half-open UTC datetime interval."""

    start_dt = datetime.combine(start, time.min, tzinfo=UTC)
    end_dt = datetime.combine(end + timedelta(days=1), time.min, tzinfo=UTC)
    return start_dt, end_dt


def relative_period_literal(text: str) -> str | None:
    """Return the SOQL date literal for the first relative period phrase found in `text`."""

    for phrases, literal in RELATIVE_PERIODS:
        if any(contains_phrase(text, phrase) for phrase in phrases):
            return literal

    match = _LAST_N_DAYS_RE.search(text)
    if match and int(match.group("n")) > 0:
        return f"LAST_N_DAYS:{int(match.group('n'))}"
    return None


def explicit_date_predicate(text: str, *, field: str = DATE_FIELD) -> str | None:
    """Build a predicate from explicit calendar dates ("since March 1 2025", "between ... and ...").

    Only ISO dates and fragments ending in a four-digit year are considered, which keeps bare
    numbers ("top 10") from being read as dates.
    """

    match = _BETWEEN_RE.search(text)
    if match:
        first = _parse_date_fragment(match.group("d1"))
        second = _parse_date_fragment(match.group("d2"))
        if first is not None and second is not None:
            start, end = (first, second) if first <= second else (second, first)
            start_dt, end_dt = inclusive_dates_to_half_open(start, end)
            return f"{field} >= {soql_datetime(start_dt)} AND {field} < {soql_datetime(end_dt)}"

    match = _BOUND_RE.search(text)
    if match:
        day = _parse_date_fragment(match.group("d"))
        if day is None:
            return None
        start_dt, end_dt = inclusive_dates_to_half_open(day, day)
        keyword = match.group("kw")
        if keyword == "since":
            return f"{field} >= {soql_datetime(start_dt)}"
        if keyword == "after":
            return f"{field} >= {soql_datetime(end_dt)}"
        return f"{field} < {soql_datetime(start_dt)}"

    return None


def date_predicate(
        text: str,
        *,
        raw_text: str | None = None,
        field: str = DATE_FIELD,
) -> str | None:
    """Derive the single time-window predicate for a normalized query, if any.

    Explicit dates are parsed from `raw_text` when given, since punctuation ("03/01/2025") matters
    there.
    """

    literal = relative_period_literal(text)
    if literal is not None:
        return f"{field} = {literal}"
    source = " ".join((raw_text if raw_text is not None else text).lower().split())
    return explicit_date_predicate(source, field=field)
