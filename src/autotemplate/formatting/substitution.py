"""Template variable substitution.

Finds `{{date:<format>}}` placeholders and replaces each with the formatted
date. All placeholders in one text are evaluated against the same `now`.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, TypeAlias

from autotemplate.constants import DATE_PLACEHOLDER_PATTERN, DEFAULT_LOCALE

from .dates import DateTokenFormatter

if TYPE_CHECKING:
    from autotemplate.settings import TemplateSettings

__all__ = [
    "TemplateSubstitutor",
    "process_template_variables",
    "substitute_dates",
]

logger = logging.getLogger(__name__)

_DATE_PLACEHOLDER = re.compile(DATE_PLACEHOLDER_PATTERN)


@dataclass(frozen=True, slots=True)
class TemplateSubstitutor:
    """Replaces date placeholders in template text.

    Attributes:
        formatter: Formatter used for every placeholder
    """

    formatter: DateTokenFormatter = field(default_factory=DateTokenFormatter)

    @classmethod
    def for_locale(cls, locale_code: str = DEFAULT_LOCALE) -> TemplateSubstitutor:
        """Create a substitutor whose formatter uses the given locale."""
        return cls(formatter=DateTokenFormatter.for_locale(locale_code))

    def substitute(self, text: str, now: datetime) -> str:
        """Replace every `{{date:<format>}}` in text, left to right.

        Text outside placeholders is returned untouched. An empty format
        (`{{date:}}`) is replaced by an empty string.
        """
        return _DATE_PLACEHOLDER.sub(
            lambda match: self.formatter.format(now, match.group(1)),
            text,
        )


def substitute_dates(
    text: str,
    now: datetime,
    locale_code: str = DEFAULT_LOCALE,
) -> str:
    """Replace `{{date:<format>}}` placeholders in text.

    Example:
        >>> substitute_dates("{{date:YYYY}}-{{date:MM}}", datetime(2024, 3, 1))
        '2024-03'
    """
    return TemplateSubstitutor.for_locale(locale_code).substitute(text, now)


VariablePass: TypeAlias = Callable[[str, datetime, str], str]

# Variable kinds applied to a template, in order.
VARIABLE_PASSES: tuple[VariablePass, ...] = (substitute_dates,)


def process_template_variables(
    template_content: str,
    now: datetime | None = None,
    settings: TemplateSettings | None = None,
) -> str:
    """Expand every supported template variable.

    Args:
        template_content: Raw template text
        now: Reference time for date variables (default: datetime.now())
        settings: Configuration supplying the locale (default: ja_JP)

    Returns:
        Template text with all variables substituted
    """
    if now is None:
        now = datetime.now()
    locale_code = settings.locale_code if settings is not None else DEFAULT_LOCALE
    for variable_pass in VARIABLE_PASSES:
        template_content = variable_pass(template_content, now, locale_code)
    logger.debug("Processed template variables (locale=%s, now=%s)", locale_code, now)
    return template_content
