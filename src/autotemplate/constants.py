"""Shared constants for autotemplate.

Constants are grouped by domain:
- Locale: default locale used for localized date tokens
- Templates: placeholder syntax and file selection
- Weekday names: fixed English names (Sunday first)
- Notices: user-facing messages emitted by the template applier

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF001, RUF022 - Japanese glyphs are intentional; __all__ grouped by category
__all__ = [
    # Locale
    "DEFAULT_LOCALE",
    "MAX_LOCALE_CACHE_SIZE",
    # Templates
    "DATE_PLACEHOLDER_PATTERN",
    "TEMPLATE_EXTENSION",
    # Weekday names
    "WEEKDAYS_EN",
    "WEEKDAYS_SHORT_EN",
    # Calendar suffix glyphs
    "SUFFIX_YEAR",
    "SUFFIX_MONTH",
    "SUFFIX_DAY",
    "SUFFIX_WEEKDAY",
    "SUFFIX_WEEKDAY_OUTPUT",
    # Notices
    "NOTICE_NO_TEMPLATE",
    "NOTICE_APPLIED",
    "NOTICE_APPLY_FAILED",
    "NOTICE_READ_FAILED",
]

# ============================================================================
# LOCALE
# ============================================================================

# Locale for the `a`, `dd` and `曜` tokens when none is configured.
# ja_JP yields 午前/午後 and the 日月火水木金土 weekday labels.
DEFAULT_LOCALE: str = "ja_JP"

# Maximum cached LocaleLabels instances.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# TEMPLATES
# ============================================================================

# {{date:<format>}}; the format may be empty but never contains "}".
DATE_PLACEHOLDER_PATTERN: str = r"\{\{date:([^}]*)\}\}"

# Only notes with this extension receive a template on creation.
TEMPLATE_EXTENSION: str = "md"

# ============================================================================
# WEEKDAY NAMES
# ============================================================================

WEEKDAYS_EN: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

WEEKDAYS_SHORT_EN: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# ============================================================================
# CALENDAR SUFFIX GLYPHS
# ============================================================================

SUFFIX_YEAR: str = "年"
SUFFIX_MONTH: str = "月"
SUFFIX_DAY: str = "日"
SUFFIX_WEEKDAY: str = "曜"
SUFFIX_WEEKDAY_OUTPUT: str = "曜日"

# ============================================================================
# NOTICES
# ============================================================================

NOTICE_NO_TEMPLATE: str = "テンプレートが選択されていません。設定から選択してください。"
NOTICE_APPLIED: str = "テンプレートを適用しました"
NOTICE_APPLY_FAILED: str = "テンプレート適用中にエラーが発生しました"
NOTICE_READ_FAILED: str = "テンプレートの読み込みに失敗しました"
