"""Get-or-create a named webhook per channel, limited to webhooks we created."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from discord_addons.config import Config, cfg
from discord_addons.core.constants import BLACKLISTED_WEBHOOK_NAME_SUBSTRINGS
from discord_addons.core.errors import ChannelNotFoundError, InvalidWebhookNameError, WebhookExistsError
from discord_addons.webhooks.capability import WebhookCapability, WebhookIdentity, WebhookRecord


def validate_webhook_name(
    name: str,
    blacklist: Iterable[str] = BLACKLISTED_WEBHOOK_NAME_SUBSTRINGS,
) -> None:
    """Raise InvalidWebhookNameError if name contains a reserved substring (case-insensitive)."""
    lowered = name.lower()
    for reserved in blacklist:
        if reserved.lower() in lowered:
            raise InvalidWebhookNameError(
                f"Webhook name {name!r} contains reserved substring {reserved!r}",
                code="reserved_webhook_name",
                details={"name": name, "reserved": reserved},
            )


class WebhookResolver:
    """Look up or create a webhook by exact name in a text channel.

    Only webhooks whose creator is the authenticated client are considered, so
    several bots can share a channel without adopting each other's webhooks.
    Calls are not serialized: two concurrent resolve_or_create() calls for the
    same channel and name can both miss the lookup and both create. Callers
    that need one webhook per name must hold their own lock.
    """

    def __init__(self, capability: WebhookCapability, *, audit_reason: str | None = None) -> None:
        self._capability = capability
        self._audit_reason = audit_reason

    @classmethod
    def from_config(cls, capability: WebhookCapability, config: Config | None = None) -> WebhookResolver:
        """Resolver using the configured default audit log reason."""
        return cls(capability, audit_reason=(config or cfg).webhook_audit_reason)

    async def _text_channel(self, channel_id: int) -> object:
        channel = await self._capability.get_text_channel(channel_id)
        if channel is None:
            raise ChannelNotFoundError(
                f"Could not retrieve text channel by ID {channel_id}",
                code="channel_not_found",
                details={"channel_id": channel_id},
            )
        return channel

    def _find_own(self, webhooks: Sequence[WebhookRecord], name: str) -> WebhookRecord | None:
        self_id = self._capability.self_id
        if self_id is None:
            return None
        for wh in webhooks:
            # channel follower webhooks have no token and cannot be posted to
            if wh.name == name and wh.creator_id == self_id and wh.token:
                return wh
        return None

    async def lookup(self, channel_id: int, name: str) -> WebhookIdentity | None:
        """Return our webhook named name in the channel, or None if there is none."""
        channel = await self._text_channel(channel_id)
        found = self._find_own(await self._capability.list_webhooks(channel), name)
        if found is None:
            logger.debug("No webhook '{}' owned by us in channel {}", name, channel_id)
            return None
        logger.debug("Found webhook '{}' ({}) in channel {}", name, found.id, channel_id)
        return found.identity()

    async def create(
        self,
        channel_id: int,
        name: str,
        audit_reason: str | None = None,
    ) -> WebhookIdentity:
        """Create webhook name in the channel.

        Raises InvalidWebhookNameError before any request if the name is reserved,
        ChannelNotFoundError if the channel is missing or cannot hold webhooks, and
        WebhookExistsError if we already own a webhook with this name there.
        """
        validate_webhook_name(name)
        channel = await self._text_channel(channel_id)
        if self._find_own(await self._capability.list_webhooks(channel), name) is not None:
            raise WebhookExistsError(
                f'Webhook "{name}" already exists for channel ID {channel_id}',
                code="webhook_exists",
                details={"channel_id": channel_id, "name": name},
            )
        reason = audit_reason if audit_reason is not None else self._audit_reason
        created = await self._capability.create_webhook(channel, name, reason=reason)
        logger.info("Created webhook '{}' ({}) in channel {}", name, created.id, channel_id)
        return created.identity()

    async def resolve_or_create(
        self,
        channel_id: int,
        name: str,
        audit_reason: str | None = None,
    ) -> WebhookIdentity:
        """Return the existing webhook, creating it (once) if lookup finds nothing."""
        existing = await self.lookup(channel_id, name)
        if existing is not None:
            return existing
        return await self.create(channel_id, name, audit_reason)
