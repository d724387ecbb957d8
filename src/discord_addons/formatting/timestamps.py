"""Discord timestamp tags: <t:EPOCH:STYLE>, rendered client-side in the reader's locale.

Example (2021-04-20 16:20:30 UTC)::

    timestamp_tag(dt, "t")  # 16:20
    timestamp_tag(dt, "T")  # 16:20:30
    timestamp_tag(dt, "d")  # 20/04/2021
    timestamp_tag(dt, "D")  # 20 April 2021
    timestamp_tag(dt, "f")  # 20 April 2021 16:20
    timestamp_tag(dt, "F")  # Tuesday, 20 April 2021 16:20
    timestamp_tag(dt, "R")  # 2 months ago
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Union

from discord_addons.core.constants import DEFAULT_TIMESTAMP_STYLE_CODE
from discord_addons.core.errors import InvalidArgumentError


class TimestampStyle(str, Enum):
    """Timestamp tag styles; each value is the single-character code Discord expects."""

    SHORT_TIME = "t"
    LONG_TIME = "T"
    SHORT_DATE = "d"
    LONG_DATE = "D"
    SHORT_DATE_TIME = "f"
    LONG_DATE_TIME = "F"
    RELATIVE = "R"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> TimestampStyle:
        """Map a style code to its style. Raises InvalidArgumentError for unknown codes."""
        for style in cls:
            if style.value == code:
                return style
        raise InvalidArgumentError(
            f"Unknown timestamp style code: {code!r}",
            code="invalid_timestamp_style",
            details={"style": code},
        )


StyleLike = Union[TimestampStyle, str]
Instant = Union[datetime, int, float]


def _coerce_style(style: StyleLike) -> TimestampStyle:
    if isinstance(style, TimestampStyle):
        return style
    return TimestampStyle.from_code(style)


def _epoch_seconds(instant: Instant) -> int:
    """Floor of Unix time in seconds. Naive datetimes are taken as UTC."""
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        # Dropping microseconds floors toward the past, also before 1970
        return int(instant.replace(microsecond=0).timestamp())
    if isinstance(instant, (int, float)) and not isinstance(instant, bool):
        if not math.isfinite(instant):
            raise InvalidArgumentError(
                f"Instant must be a finite number, got {instant!r}",
                code="invalid_instant",
                details={"instant": instant},
            )
        return math.floor(instant)
    raise InvalidArgumentError(
        f"Unsupported instant type: {type(instant).__name__}",
        code="invalid_instant",
        details={"type": type(instant).__name__},
    )


@dataclass(frozen=True)
class TimestampTag:
    """Immutable (epoch seconds, style) pair. str() renders the Discord tag."""

    epoch: int
    style: TimestampStyle = TimestampStyle.SHORT_DATE_TIME

    def __post_init__(self) -> None:
        if isinstance(self.epoch, bool) or not isinstance(self.epoch, int):
            raise InvalidArgumentError(
                f"Epoch must be whole seconds, got {self.epoch!r}",
                code="invalid_epoch",
                details={"epoch": self.epoch},
            )
        object.__setattr__(self, "style", _coerce_style(self.style))

    @classmethod
    def from_datetime(cls, instant: Instant, style: StyleLike | None = None) -> TimestampTag:
        """Tag for instant. style defaults to "f", except naive datetimes must name one."""
        if style is None:
            if isinstance(instant, datetime) and instant.tzinfo is None:
                raise InvalidArgumentError(
                    "A style is required when formatting a naive datetime",
                    code="missing_timestamp_style",
                )
            style = DEFAULT_TIMESTAMP_STYLE_CODE
        resolved = _coerce_style(style)
        return cls(_epoch_seconds(instant), resolved)

    def __str__(self) -> str:
        return f"<t:{self.epoch}:{self.style.code}>"


def timestamp_tag(instant: Instant, style: StyleLike | None = None) -> str:
    """Format instant as a Discord timestamp tag.

    style is a TimestampStyle or its code (t, T, d, D, f, F, R). Defaults to
    short date/time ("f") for timezone-aware datetimes and epoch numbers; naive
    datetimes carry no offset, so the caller must name a style explicitly.
    """
    return str(TimestampTag.from_datetime(instant, style))
