"""WebhookCapability backed by a discord.py client."""

from __future__ import annotations

import discord

from discord_addons.channels import get_webhook_channel
from discord_addons.webhooks.capability import WebhookRecord


def _to_record(webhook: discord.Webhook) -> WebhookRecord:
    return WebhookRecord(
        id=webhook.id,
        name=webhook.name,
        token=webhook.token,
        creator_id=webhook.user.id if webhook.user else None,
    )


class DiscordWebhookCapability:
    """Adapts discord.Client (or commands.Bot) to WebhookCapability. Requires Manage Webhooks."""

    def __init__(self, client: discord.Client) -> None:
        self._client = client

    @property
    def self_id(self) -> int | None:
        user = self._client.user
        return user.id if user else None

    async def get_text_channel(
        self,
        channel_id: int,
    ) -> discord.TextChannel | discord.VoiceChannel | discord.StageChannel | None:
        """Any channel with a text feed, including text chat in voice and stage channels."""
        return await get_webhook_channel(self._client, channel_id)

    async def list_webhooks(self, channel: discord.TextChannel) -> list[WebhookRecord]:
        return [_to_record(wh) for wh in await channel.webhooks()]

    async def create_webhook(
        self,
        channel: discord.TextChannel,
        name: str,
        *,
        reason: str | None = None,
    ) -> WebhookRecord:
        return _to_record(await channel.create_webhook(name=name, reason=reason))
