"""Date token formatting and template variable substitution.

Public API:
    DateTokenFormatter - Applies the ordered date token table to a pattern
    TemplateSubstitutor - Replaces {{date:<format>}} placeholders in text
    LocaleLabels - Localized meridiem and weekday labels (Babel CLDR data)
    FormatToken - A literal token and its resolver
    DATE_TOKENS - The token table, in application order
    format_date - Functional form of DateTokenFormatter.format
    substitute_dates - Functional form of TemplateSubstitutor.substitute
    process_template_variables - Expand all template variable kinds

Example:
    >>> from datetime import datetime
    >>> from autotemplate.formatting import substitute_dates
    >>> substitute_dates("# {{date:YYYY-MM-DD}} (dddd)", datetime(2024, 1, 3))
    '# 2024-01-03 (dddd)'

Python 3.13+.
"""

from .dates import DateTokenFormatter, format_date
from .labels import LocaleLabels
from .substitution import TemplateSubstitutor, process_template_variables, substitute_dates
from .tokens import DATE_TOKENS, FormatToken

__all__ = [
    "DATE_TOKENS",
    "DateTokenFormatter",
    "FormatToken",
    "LocaleLabels",
    "TemplateSubstitutor",
    "format_date",
    "process_template_variables",
    "substitute_dates",
]
