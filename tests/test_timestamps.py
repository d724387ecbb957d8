"""Tests for timestamp tag formatting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from discord_addons.core.errors import InvalidArgumentError
from discord_addons.formatting import TimestampStyle, TimestampTag, timestamp_tag

UTC = timezone.utc
APRIL_20 = datetime(2021, 4, 20, 16, 20, 30, tzinfo=UTC)
APRIL_20_EPOCH = 1618935630


class TestTimestampStyle:
    @pytest.mark.parametrize(
        "style,code",
        [
            (TimestampStyle.SHORT_TIME, "t"),
            (TimestampStyle.LONG_TIME, "T"),
            (TimestampStyle.SHORT_DATE, "d"),
            (TimestampStyle.LONG_DATE, "D"),
            (TimestampStyle.SHORT_DATE_TIME, "f"),
            (TimestampStyle.LONG_DATE_TIME, "F"),
            (TimestampStyle.RELATIVE, "R"),
        ],
    )
    def test_code_mapping(self, style, code):
        assert style.code == code
        assert TimestampStyle.from_code(code) is style

    def test_seven_styles(self):
        assert len(TimestampStyle) == 7
        assert len({s.code for s in TimestampStyle}) == 7

    @pytest.mark.parametrize("code", ["Q", "", "tt", "r", "F ", None, 1])
    def test_unknown_code(self, code):
        with pytest.raises(InvalidArgumentError) as exc_info:
            TimestampStyle.from_code(code)
        assert exc_info.value.details == {"style": code}


class TestTimestampTag:
    def test_renders_template(self):
        assert str(TimestampTag(APRIL_20_EPOCH, TimestampStyle.RELATIVE)) == f"<t:{APRIL_20_EPOCH}:R>"

    def test_default_style(self):
        assert str(TimestampTag(0)) == "<t:0:f>"

    def test_immutable(self):
        tag = TimestampTag(0)
        with pytest.raises(AttributeError):
            tag.epoch = 1  # type: ignore[misc]

    def test_equal_by_value(self):
        assert TimestampTag.from_datetime(APRIL_20, "R") == TimestampTag(APRIL_20_EPOCH, TimestampStyle.RELATIVE)

    def test_style_code_is_coerced(self):
        tag = TimestampTag(0, "R")  # type: ignore[arg-type]

        assert tag.style is TimestampStyle.RELATIVE
        assert str(tag) == "<t:0:R>"

    def test_unknown_style_code_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            TimestampTag(0, "Q")  # type: ignore[arg-type]
        assert exc_info.value.code == "invalid_timestamp_style"

    @pytest.mark.parametrize("epoch", [1.5, True, "0", None])
    def test_epoch_must_be_int(self, epoch):
        with pytest.raises(InvalidArgumentError) as exc_info:
            TimestampTag(epoch)
        assert exc_info.value.code == "invalid_epoch"

    def test_from_datetime_naive_requires_style(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            TimestampTag.from_datetime(datetime(2021, 4, 20))
        assert exc_info.value.code == "missing_timestamp_style"

    def test_from_datetime_aware_defaults_to_short_date_time(self):
        assert TimestampTag.from_datetime(APRIL_20) == TimestampTag(APRIL_20_EPOCH, TimestampStyle.SHORT_DATE_TIME)


class TestTimestampTagFormatter:
    @pytest.mark.parametrize("code", ["t", "T", "d", "D", "f", "F", "R"])
    def test_all_codes(self, code):
        assert timestamp_tag(APRIL_20, code) == f"<t:{APRIL_20_EPOCH}:{code}>"

    def test_enum_style(self):
        assert timestamp_tag(APRIL_20, TimestampStyle.LONG_DATE) == f"<t:{APRIL_20_EPOCH}:D>"

    def test_aware_defaults_to_short_date_time(self):
        assert timestamp_tag(APRIL_20) == f"<t:{APRIL_20_EPOCH}:f>"

    def test_offset_is_applied(self):
        plus_two = APRIL_20.astimezone(timezone(timedelta(hours=2)))
        assert timestamp_tag(plus_two, "F") == f"<t:{APRIL_20_EPOCH}:F>"

    def test_naive_is_utc(self):
        naive = datetime(2021, 4, 20, 16, 20, 30)
        assert timestamp_tag(naive, "t") == f"<t:{APRIL_20_EPOCH}:t>"

    def test_naive_requires_style(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            timestamp_tag(datetime(2021, 4, 20))
        assert exc_info.value.code == "missing_timestamp_style"

    def test_before_epoch(self):
        assert timestamp_tag(datetime(1960, 1, 1, tzinfo=UTC), "D") == "<t:-315619200:D>"

    def test_fractional_seconds_floor(self):
        assert timestamp_tag(APRIL_20 + timedelta(microseconds=999_999), "T") == f"<t:{APRIL_20_EPOCH}:T>"
        just_before_epoch = datetime(1969, 12, 31, 23, 59, 59, 500_000, tzinfo=UTC)
        assert timestamp_tag(just_before_epoch, "T") == "<t:-1:T>"

    def test_epoch_numbers(self):
        assert timestamp_tag(APRIL_20_EPOCH) == f"<t:{APRIL_20_EPOCH}:f>"
        assert timestamp_tag(-0.5, "R") == "<t:-1:R>"

    def test_unknown_code_checked_before_instant(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            timestamp_tag(object(), "Q")  # type: ignore[arg-type]
        assert exc_info.value.code == "invalid_timestamp_style"

    def test_unsupported_instant(self):
        with pytest.raises(InvalidArgumentError):
            timestamp_tag("2021-04-20", "f")  # type: ignore[arg-type]

    @pytest.mark.parametrize("instant", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_instant(self, instant):
        with pytest.raises(InvalidArgumentError) as exc_info:
            timestamp_tag(instant, "f")
        assert exc_info.value.code == "invalid_instant"
