"""Webhook value types and the client capability the resolver depends on."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import aiohttp
import discord

from discord_addons.core.constants import WEBHOOK_URL_TEMPLATE


@dataclass(frozen=True)
class WebhookIdentity:
    """Webhook ID + token: everything needed to post to the channel without a bot session."""

    id: int
    token: str

    @property
    def url(self) -> str:
        return WEBHOOK_URL_TEMPLATE.format(id=self.id, token=self.token)

    def to_webhook(self, session: aiohttp.ClientSession) -> discord.Webhook:
        """Partial discord.py Webhook bound to session, ready for send()."""
        return discord.Webhook.partial(self.id, self.token, session=session)


@dataclass(frozen=True)
class WebhookRecord:
    """Webhook as listed on a channel."""

    id: int
    name: str | None
    token: str | None
    creator_id: int | None

    def identity(self) -> WebhookIdentity:
        return WebhookIdentity(self.id, self.token or "")


class WebhookCapability(Protocol):
    """Channel and webhook operations of an authenticated chat client."""

    @property
    def self_id(self) -> int | None:
        """User ID the client is authenticated as (None before login)."""
        ...

    async def get_text_channel(self, channel_id: int) -> Any | None: ...

    async def list_webhooks(self, channel: Any) -> Sequence[WebhookRecord]: ...

    async def create_webhook(self, channel: Any, name: str, *, reason: str | None = None) -> WebhookRecord: ...
