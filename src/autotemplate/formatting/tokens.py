"""Ordered date token table.

Each FormatToken pairs a literal pattern with a resolver. The formatter runs
one full replace pass per token, in table order. Wider tokens precede
narrower ones of the same family (YYYY before YY, dddd before ddd before dd).

Known interference: a later token re-matches text emitted by an earlier one
when the characters coincide. `dd` emits 日 on Sundays under ja, which the
日 pass then expands to "<day>日"; under en, `a` emits "AM", whose "A" the
`A` pass expands again. Output depends on table order; do not reorder.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import TypeAlias

from autotemplate.constants import (
    SUFFIX_DAY,
    SUFFIX_MONTH,
    SUFFIX_WEEKDAY,
    SUFFIX_WEEKDAY_OUTPUT,
    SUFFIX_YEAR,
    WEEKDAYS_EN,
    WEEKDAYS_SHORT_EN,
)

from .labels import LocaleLabels

__all__ = ["DATE_TOKENS", "FormatToken", "TokenResolver", "sunday_weekday"]

TokenResolver: TypeAlias = Callable[[datetime, LocaleLabels], str]


@dataclass(frozen=True, slots=True)
class FormatToken:
    """A literal pattern and the resolver producing its replacement."""

    pattern: str
    resolve: TokenResolver

    def apply(self, text: str, timestamp: datetime, labels: LocaleLabels) -> str:
        """Replace every non-overlapping occurrence, scanning left to right."""
        if self.pattern not in text:
            return text
        return text.replace(self.pattern, self.resolve(timestamp, labels))


def sunday_weekday(timestamp: datetime) -> int:
    """Day of week with Sunday=0 through Saturday=6."""
    return (timestamp.weekday() + 1) % 7


def _hour12(timestamp: datetime) -> int:
    return timestamp.hour % 12 or 12


def _meridiem_label(timestamp: datetime, labels: LocaleLabels) -> str:
    return labels.am if timestamp.hour < 12 else labels.pm


DATE_TOKENS: tuple[FormatToken, ...] = (
    # Year
    FormatToken("YYYY", lambda t, _: f"{t.year:04d}"),
    FormatToken("YY", lambda t, _: f"{t.year % 100:02d}"),
    # Month
    FormatToken("MM", lambda t, _: f"{t.month:02d}"),
    FormatToken("M", lambda t, _: str(t.month)),
    # Day
    FormatToken("DD", lambda t, _: f"{t.day:02d}"),
    FormatToken("D", lambda t, _: str(t.day)),
    # Hour (24h, then 12h)
    FormatToken("HH", lambda t, _: f"{t.hour:02d}"),
    FormatToken("H", lambda t, _: str(t.hour)),
    FormatToken("hh", lambda t, _: f"{_hour12(t):02d}"),
    FormatToken("h", lambda t, _: str(_hour12(t))),
    # Minute and second
    FormatToken("mm", lambda t, _: f"{t.minute:02d}"),
    FormatToken("m", lambda t, _: str(t.minute)),
    FormatToken("ss", lambda t, _: f"{t.second:02d}"),
    FormatToken("s", lambda t, _: str(t.second)),
    # Meridiem
    FormatToken("a", _meridiem_label),
    FormatToken("A", lambda t, _: "AM" if t.hour < 12 else "PM"),
    # Weekday
    FormatToken("dddd", lambda t, _: WEEKDAYS_EN[sunday_weekday(t)]),
    FormatToken("ddd", lambda t, _: WEEKDAYS_SHORT_EN[sunday_weekday(t)]),
    FormatToken("dd", lambda t, labels: labels.weekdays[sunday_weekday(t)]),
    # Calendar suffixes
    FormatToken(SUFFIX_YEAR, lambda t, _: f"{t.year}{SUFFIX_YEAR}"),
    FormatToken(SUFFIX_MONTH, lambda t, _: f"{t.month}{SUFFIX_MONTH}"),
    FormatToken(SUFFIX_DAY, lambda t, _: f"{t.day}{SUFFIX_DAY}"),
    FormatToken(
        SUFFIX_WEEKDAY,
        lambda t, labels: f"{labels.weekdays[sunday_weekday(t)]}{SUFFIX_WEEKDAY_OUTPUT}",
    ),
)
