"""Date token formatting.

- DateTokenFormatter applies the ordered DATE_TOKENS table to a pattern
- format_date() is the functional entry point taking a locale code
- Never raises for string patterns: unrecognized characters pass through

Thread-safe. Formatters hold only immutable state.

Python 3.13+. Uses Babel (via LocaleLabels) for localized labels.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from autotemplate.constants import DEFAULT_LOCALE

from .labels import LocaleLabels
from .tokens import DATE_TOKENS, FormatToken

__all__ = ["DateTokenFormatter", "format_date"]


@dataclass(frozen=True, slots=True)
class DateTokenFormatter:
    """Formats a point in time against a token pattern.

    Attributes:
        labels: Localized meridiem and weekday labels
        tokens: Ordered token table; each token is one full replace pass

    Example:
        >>> formatter = DateTokenFormatter.for_locale("ja_JP")
        >>> formatter.format(datetime(2024, 3, 15, 9, 5), "YYYY-MM-DD HH:mm")
        '2024-03-15 09:05'
        >>> formatter.format(datetime(2024, 3, 15), "年月日(dd)")
        '2024年3月15日(金)'
    """

    labels: LocaleLabels = field(default_factory=LocaleLabels.for_locale)
    tokens: tuple[FormatToken, ...] = DATE_TOKENS

    @classmethod
    def for_locale(cls, locale_code: str = DEFAULT_LOCALE) -> DateTokenFormatter:
        """Create a formatter using the labels of a locale (with fallback)."""
        return cls(labels=LocaleLabels.for_locale(locale_code))

    def format(self, timestamp: datetime, pattern: str) -> str:
        """Format timestamp according to pattern.

        Args:
            timestamp: Point in time; its fields are used as-is (no tz conversion)
            pattern: Token pattern such as "YYYY-MM-DD"; may be empty

        Returns:
            Pattern with every token replaced, in table order
        """
        result = pattern
        for token in self.tokens:
            result = token.apply(result, timestamp, self.labels)
        return result


def format_date(
    timestamp: datetime,
    pattern: str,
    locale_code: str = DEFAULT_LOCALE,
) -> str:
    """Format timestamp according to a token pattern.

    Args:
        timestamp: Point in time to format
        pattern: Token pattern (e.g., "YYYY/MM/DD dddd")
        locale_code: Locale for the `a`, `dd` and `曜` tokens

    Returns:
        Formatted string

    Examples:
        >>> format_date(datetime(2024, 1, 3), "YYYY-MM-DD")
        '2024-01-03'
        >>> format_date(datetime(2024, 1, 3), "dddd, ddd")
        'Wednesday, Wed'
        >>> format_date(datetime(2024, 1, 3, 13), "A")
        'PM'
    """
    return DateTokenFormatter.for_locale(locale_code).format(timestamp, pattern)
