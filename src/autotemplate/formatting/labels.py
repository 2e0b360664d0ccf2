"""Localized labels for the meridiem and single-character weekday tokens.

Labels come from CLDR via Babel: the abbreviated format-context day periods
for `a`, and the narrow format-context day names for `dd` and `曜`.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass

from babel import UnknownLocaleError
from babel.dates import get_day_names, get_period_names

from autotemplate.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from autotemplate.locale_utils import get_babel_locale, normalize_locale

__all__ = ["LocaleLabels"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleLabels:
    """Immutable set of localized date labels for one locale.

    Attributes:
        locale_code: Normalized locale code the labels were requested for
        am: Meridiem label for hours 0-11
        pm: Meridiem label for hours 12-23
        weekdays: Seven single-character weekday labels, Sunday first
        is_fallback: True if the requested locale was unknown and the
            default locale's labels were used instead
    """

    locale_code: str
    am: str
    pm: str
    weekdays: tuple[str, ...]
    is_fallback: bool = False

    def __post_init__(self) -> None:
        if len(self.weekdays) != 7:
            msg = f"weekdays must hold 7 labels (Sunday first), got {len(self.weekdays)}"
            raise ValueError(msg)

    @classmethod
    def for_locale(cls, locale_code: str = DEFAULT_LOCALE) -> LocaleLabels:
        """Return labels for a locale, falling back to the default locale.

        Unknown or malformed locale codes log a warning and yield the
        default locale's labels, with `is_fallback` set and the requested
        code preserved for debugging. Results are cached per normalized code.

        Example:
            >>> labels = LocaleLabels.for_locale("ja-JP")
            >>> labels.am, labels.weekdays[0]
            ('午前', '日')
        """
        return _cached_labels(normalize_locale(locale_code))

    @classmethod
    def for_locale_or_raise(cls, locale_code: str) -> LocaleLabels:
        """Return labels for a locale or raise on an unknown locale.

        Raises:
            ValueError: If the locale code is unknown or malformed
        """
        try:
            return cls._from_cldr(normalize_locale(locale_code))
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None

    @classmethod
    def _from_cldr(cls, locale_code: str, *, is_fallback: bool = False) -> LocaleLabels:
        locale = get_babel_locale(locale_code)
        periods = get_period_names(width="abbreviated", context="format", locale=locale)
        # Babel keys day names Monday=0; shift to Sunday first
        days = get_day_names(width="narrow", context="format", locale=locale)
        return cls(
            locale_code=locale_code,
            am=periods["am"],
            pm=periods["pm"],
            weekdays=tuple(days[(i - 1) % 7] for i in range(7)),
            is_fallback=is_fallback,
        )


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _cached_labels(locale_code: str) -> LocaleLabels:
    try:
        return LocaleLabels._from_cldr(locale_code)  # noqa: SLF001
    except UnknownLocaleError as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
    fallback = LocaleLabels._from_cldr(DEFAULT_LOCALE)  # noqa: SLF001
    return LocaleLabels(
        locale_code=locale_code,
        am=fallback.am,
        pm=fallback.pm,
        weekdays=fallback.weekdays,
        is_fallback=True,
    )
