"""Domain exceptions for the Discord helpers."""

from __future__ import annotations


class AddonsError(Exception):
    """Base for discord_addons errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, object] | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.original_error = original_error


class InvalidArgumentError(AddonsError, ValueError):
    """Argument outside its accepted range (style code, heading level, snowflake)."""


class InvalidWebhookNameError(AddonsError):
    """Webhook name contains a substring Discord reserves."""


class WebhookExistsError(AddonsError):
    """A webhook with this name, created by us, already exists in the channel."""


class ChannelNotFoundError(AddonsError):
    """Channel does not exist or is not a text channel."""


class InvalidTokenError(AddonsError):
    """Token does not match the expected Discord token format."""


class AddonsConfigurationError(AddonsError):
    """Config validation or load failure."""
