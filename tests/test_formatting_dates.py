"""Tests for DateTokenFormatter and format_date().

Covers every token in table order, the localized tokens under ja_JP and
en_US, and the known token interference cases that the table order
produces (pinned as regressions, not fixed).
"""

from datetime import datetime

import pytest

from autotemplate.formatting import DATE_TOKENS, DateTokenFormatter, LocaleLabels, format_date

# Wednesday
WED = datetime(2024, 1, 3, 9, 5, 7)
# Friday
FRI = datetime(2024, 3, 15, 13, 45, 30)
# Sunday / Monday
SUN = datetime(2024, 3, 17, 0, 0, 0)
MON = datetime(2024, 3, 18, 12, 0, 0)


class TestYearTokens:
    """YYYY and YY."""

    def test_four_digit_year(self) -> None:
        assert format_date(FRI, "YYYY") == "2024"

    def test_two_digit_year(self) -> None:
        assert format_date(FRI, "YY") == "24"

    def test_year_padding(self) -> None:
        """Years below 1000 are zero-padded."""
        t = datetime(5, 6, 7)
        assert format_date(t, "YYYY") == "0005"
        assert format_date(t, "YY") == "05"

    def test_wide_year_token_wins(self) -> None:
        """YYYY is consumed before the YY pass sees it."""
        assert format_date(FRI, "YYYY/YY") == "2024/24"


class TestMonthDayTokens:
    """MM, M, DD, D."""

    def test_padded_month(self) -> None:
        assert format_date(WED, "MM") == "01"

    def test_unpadded_month(self) -> None:
        assert format_date(WED, "M") == "1"

    def test_padded_day(self) -> None:
        assert format_date(WED, "DD") == "03"

    def test_unpadded_day(self) -> None:
        assert format_date(WED, "D") == "3"

    def test_iso_date(self) -> None:
        assert format_date(FRI, "YYYY-MM-DD") == "2024-03-15"

    def test_two_digit_month_and_day(self) -> None:
        t = datetime(2024, 12, 31)
        assert format_date(t, "M/D") == "12/31"
        assert format_date(t, "MM/DD") == "12/31"


class TestTimeTokens:
    """HH, H, hh, h, mm, m, ss, s."""

    def test_24_hour(self) -> None:
        assert format_date(WED, "HH") == "09"
        assert format_date(WED, "H") == "9"
        assert format_date(FRI, "HH:mm:ss") == "13:45:30"

    def test_12_hour(self) -> None:
        assert format_date(FRI, "hh") == "01"
        assert format_date(FRI, "h") == "1"

    @pytest.mark.parametrize(
        ("hour", "padded", "unpadded"),
        [(0, "12", "12"), (11, "11", "11"), (12, "12", "12"), (23, "11", "11")],
    )
    def test_12_hour_boundaries(self, hour: int, padded: str, unpadded: str) -> None:
        """Midnight and noon both render as 12."""
        t = datetime(2024, 1, 1, hour)
        assert format_date(t, "hh") == padded
        assert format_date(t, "h") == unpadded

    def test_minutes_and_seconds(self) -> None:
        assert format_date(WED, "mm") == "05"
        assert format_date(WED, "m") == "5"
        assert format_date(WED, "ss") == "07"
        assert format_date(WED, "s") == "7"

    def test_midnight(self) -> None:
        assert format_date(SUN, "H:m:s") == "0:0:0"


class TestMeridiemTokens:
    """a (localized) and A."""

    def test_uppercase_am_at_midnight(self) -> None:
        assert format_date(datetime(2024, 1, 1, 0), "A") == "AM"

    def test_uppercase_pm_after_noon(self) -> None:
        assert format_date(datetime(2024, 1, 1, 13), "A") == "PM"

    def test_noon_is_pm(self) -> None:
        assert format_date(datetime(2024, 1, 1, 12), "A") == "PM"

    def test_localized_meridiem_ja(self) -> None:
        assert format_date(WED, "a") == "午前"
        assert format_date(FRI, "a") == "午後"

    def test_localized_meridiem_en_pm(self) -> None:
        assert format_date(FRI, "a", "en_US") == "PM"


class TestWeekdayTokens:
    """dddd, ddd, dd, 曜."""

    def test_full_weekday(self) -> None:
        assert format_date(WED, "dddd") == "Wednesday"

    def test_short_weekday(self) -> None:
        assert format_date(WED, "ddd") == "Wed"

    def test_localized_weekday_ja(self) -> None:
        assert format_date(WED, "dd") == "水"
        assert format_date(FRI, "dd") == "金"

    def test_english_names_ignore_locale(self) -> None:
        assert format_date(FRI, "dddd ddd", "de_DE") == "Friday Fri"

    @pytest.mark.parametrize(
        ("day", "name"),
        [
            (17, "Sunday"),
            (18, "Monday"),
            (19, "Tuesday"),
            (20, "Wednesday"),
            (21, "Thursday"),
            (22, "Friday"),
            (23, "Saturday"),
        ],
    )
    def test_full_week(self, day: int, name: str) -> None:
        assert format_date(datetime(2024, 3, day), "dddd") == name

    def test_weekday_suffix(self) -> None:
        assert format_date(WED, "曜") == "水曜日"
        assert format_date(SUN, "曜") == "日曜日"


class TestCalendarSuffixTokens:
    """年, 月, 日."""

    def test_japanese_date(self) -> None:
        assert format_date(FRI, "年月日") == "2024年3月15日"

    def test_japanese_date_with_weekday(self) -> None:
        assert format_date(FRI, "年月日(dd)") == "2024年3月15日(金)"

    def test_full_japanese_heading(self) -> None:
        assert format_date(WED, "年月日 曜") == "2024年1月3日 水曜日"


class TestPassThrough:
    """Unrecognized characters and empty patterns."""

    def test_empty_pattern(self) -> None:
        assert format_date(FRI, "") == ""

    def test_non_token_characters_unchanged(self) -> None:
        assert format_date(FRI, "# [x] - _ / : . 123 !") == "# [x] - _ / : . 123 !"

    def test_mixed_literal_and_tokens(self) -> None:
        assert format_date(FRI, "[YYYY] (HH:mm)") == "[2024] (13:45)"


class TestTokenInterference:
    """Known token interference, pinned to the table order.

    A later token re-matches text emitted by an earlier token when the
    characters coincide. These tests document that behavior; a change to
    any of them means the token table order changed.
    """

    def test_padded_month_not_resubstituted(self) -> None:
        """MM for January stays "01"; the M pass finds no M left."""
        result = format_date(WED, "MM")
        assert result == "01"
        assert result != "0" + "1" + "1"

    def test_padded_day_not_resubstituted(self) -> None:
        assert format_date(WED, "DD") == "03"

    def test_sunday_label_reexpanded_by_day_suffix(self) -> None:
        """dd emits 日 on Sunday, which the 日 pass expands to "<day>日"."""
        assert format_date(SUN, "dd") == "17日"

    def test_monday_label_reexpanded_by_month_suffix(self) -> None:
        """dd emits 月 on Monday, which the 月 pass expands to "<month>月"."""
        assert format_date(MON, "dd") == "3月"

    def test_year_token_before_year_suffix(self) -> None:
        """YYYY年 yields the year twice: the 年 pass also prepends the year."""
        assert format_date(FRI, "YYYY年") == "20242024年"

    def test_english_am_reexpanded_by_uppercase_meridiem(self) -> None:
        """Under en, `a` emits "AM", whose "A" the A pass expands again."""
        assert format_date(WED, "a", "en_US") == "AMM"

    def test_literal_letters_are_tokens(self) -> None:
        """Letters in words are tokens too: "Date" becomes day + meridiem."""
        assert format_date(WED, "Date") == "3午前te"


class TestDateTokenFormatter:
    """Formatter construction and reuse."""

    def test_default_locale_is_japanese(self) -> None:
        formatter = DateTokenFormatter()
        assert formatter.labels.am == "午前"

    def test_for_locale(self) -> None:
        formatter = DateTokenFormatter.for_locale("en-US")
        assert formatter.format(FRI, "a") == "PM"

    def test_custom_labels(self) -> None:
        labels = LocaleLabels(
            locale_code="custom",
            am="am",
            pm="pm",
            weekdays=("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"),
        )
        formatter = DateTokenFormatter(labels=labels)
        assert formatter.format(FRI, "dd") == "Fr"

    def test_token_table_order(self) -> None:
        patterns = [token.pattern for token in DATE_TOKENS]
        assert patterns == [
            "YYYY", "YY", "MM", "M", "DD", "D", "HH", "H", "hh", "h",
            "mm", "m", "ss", "s", "a", "A", "dddd", "ddd", "dd",
            "年", "月", "日", "曜",
        ]  # fmt: skip

    def test_same_input_same_output(self) -> None:
        formatter = DateTokenFormatter.for_locale("ja_JP")
        pattern = "YYYY-MM-DD HH:mm:ss a dddd 年月日 曜"
        assert formatter.format(FRI, pattern) == formatter.format(FRI, pattern)
