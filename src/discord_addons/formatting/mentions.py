"""Mention tags for users, channels and roles."""

from __future__ import annotations

from discord_addons.core.errors import InvalidArgumentError

MAX_SNOWFLAKE = 2**64 - 1


def _snowflake(value: int) -> int:
    """Snowflakes are unsigned 64-bit; reject negatives and non-integers."""
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_SNOWFLAKE:
        raise InvalidArgumentError(
            f"Not a valid snowflake: {value!r}",
            code="invalid_snowflake",
            details={"value": value},
        )
    return value


def user_mention(user_id: int, ping: bool = True) -> str:
    """<@!id> (nickname form) when ping, otherwise <@id>."""
    user_id = _snowflake(user_id)
    return f"<@!{user_id}>" if ping else f"<@{user_id}>"


def channel_mention(channel_id: int) -> str:
    return f"<#{_snowflake(channel_id)}>"


def role_mention(role_id: int) -> str:
    return f"<@&{_snowflake(role_id)}>"
