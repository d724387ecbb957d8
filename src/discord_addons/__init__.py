"""Discord helpers: markdown, mentions, timestamp tags, token checks and webhook get-or-create."""

from discord_addons.channels import (
    ChannelKind,
    get_category_channel,
    get_channel_of_kind,
    get_forum_channel,
    get_text_channel,
    get_thread_channel,
    get_voice_channel,
    get_webhook_channel,
)
from discord_addons.core.errors import (
    AddonsConfigurationError,
    AddonsError,
    ChannelNotFoundError,
    InvalidArgumentError,
    InvalidTokenError,
    InvalidWebhookNameError,
    WebhookExistsError,
)
from discord_addons.formatting import TimestampStyle, TimestampTag, timestamp_tag
from discord_addons.tokens import TokenType, is_valid_token, try_validate_token, validate_token
from discord_addons.webhooks import DiscordWebhookCapability, WebhookIdentity, WebhookResolver

__version__ = "0.1.0"

__all__ = [
    "AddonsConfigurationError",
    "AddonsError",
    "ChannelKind",
    "ChannelNotFoundError",
    "DiscordWebhookCapability",
    "InvalidArgumentError",
    "InvalidTokenError",
    "InvalidWebhookNameError",
    "TimestampStyle",
    "TimestampTag",
    "TokenType",
    "WebhookExistsError",
    "WebhookIdentity",
    "WebhookResolver",
    "__version__",
    "get_category_channel",
    "get_channel_of_kind",
    "get_forum_channel",
    "get_text_channel",
    "get_thread_channel",
    "get_voice_channel",
    "get_webhook_channel",
    "is_valid_token",
    "timestamp_tag",
    "try_validate_token",
    "validate_token",
]
