"""Webhook get-or-create over an injected chat client capability."""

from discord_addons.webhooks.capability import WebhookCapability, WebhookIdentity, WebhookRecord
from discord_addons.webhooks.client import DiscordWebhookCapability
from discord_addons.webhooks.resolver import WebhookResolver, validate_webhook_name

__all__ = [
    "DiscordWebhookCapability",
    "WebhookCapability",
    "WebhookIdentity",
    "WebhookRecord",
    "WebhookResolver",
    "validate_webhook_name",
]
