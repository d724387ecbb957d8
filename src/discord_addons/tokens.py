"""Discord token format validation."""

from __future__ import annotations

import base64
import binascii
from enum import Enum

from loguru import logger

from discord_addons.core.constants import MIN_BOT_TOKEN_LENGTH
from discord_addons.core.errors import InvalidTokenError

_FORBIDDEN_CHARS = frozenset(" \t\r\n")


class TokenType(str, Enum):
    BOT = "bot"
    BEARER = "bearer"
    WEBHOOK = "webhook"


def _decode_user_id(segment: str) -> int | None:
    """First bot token segment is the base64 (unpadded) of the bot's user ID."""
    padded = segment + "=" * (-len(segment) % 4)
    try:
        decoded = base64.b64decode(padded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    if not (decoded.isascii() and decoded.isdigit()):
        return None
    return int(decoded)


def validate_token(token: str, token_type: TokenType = TokenType.BOT) -> None:
    """Raise InvalidTokenError if token is not well-formed for token_type."""
    if not token or token.isspace():
        raise InvalidTokenError("Token is empty", code="empty_token")
    if any(c in _FORBIDDEN_CHARS for c in token):
        raise InvalidTokenError("Token contains whitespace", code="token_whitespace")
    if token_type is not TokenType.BOT:
        return

    if len(token) < MIN_BOT_TOKEN_LENGTH:
        raise InvalidTokenError(
            f"Bot token is shorter than {MIN_BOT_TOKEN_LENGTH} characters",
            code="token_too_short",
            details={"length": len(token)},
        )
    segments = token.split(".")
    if len(segments) != 3:
        raise InvalidTokenError(
            "Bot token must have three dot-separated segments",
            code="token_segments",
            details={"segments": len(segments)},
        )
    if _decode_user_id(segments[0]) is None:
        raise InvalidTokenError("Bot token does not start with an encoded user ID", code="token_user_id")


def is_valid_token(token: str, token_type: TokenType = TokenType.BOT) -> bool:
    """True if token is well-formed. Never raises."""
    try:
        validate_token(token, token_type)
    except Exception as exc:
        logger.debug("Rejected {} token: {}", getattr(token_type, "value", token_type), exc)
        return False
    return True


def try_validate_token(token: str, token_type: TokenType = TokenType.BOT) -> str | None:
    """Return token if well-formed, otherwise None."""
    return token if is_valid_token(token, token_type) else None
