"""Typed channel lookup on a discord.py client: cache first, then REST."""

from __future__ import annotations

from enum import Enum
from typing import Any

import discord
from loguru import logger


class ChannelKind(Enum):
    TEXT = discord.TextChannel
    VOICE = discord.VoiceChannel
    CATEGORY = discord.CategoryChannel
    FORUM = discord.ForumChannel
    THREAD = discord.Thread


# Channels that carry a message feed and accept webhooks (text chat in voice/stage included)
WEBHOOK_CHANNEL_TYPES: tuple[type, ...] = (discord.TextChannel, discord.VoiceChannel, discord.StageChannel)


async def _get_channel_of_type(client: discord.Client, channel_id: int, types: type | tuple[type, ...]) -> Any | None:
    channel = client.get_channel(int(channel_id))
    if channel is None:
        try:
            channel = await client.fetch_channel(int(channel_id))
        except (discord.NotFound, discord.Forbidden) as exc:
            logger.debug("Channel {} not available: {}", channel_id, exc)
            return None
    if not isinstance(channel, types):
        logger.debug("Channel {} is {}, expected {}", channel_id, type(channel).__name__, types)
        return None
    return channel


async def get_channel_of_kind(client: discord.Client, channel_id: int, kind: ChannelKind) -> Any | None:
    """Return channel if it exists, is visible to the client and is of kind; otherwise None.

    discord.HTTPException other than NotFound/Forbidden propagates.
    """
    return await _get_channel_of_type(client, channel_id, kind.value)


async def get_webhook_channel(
    client: discord.Client,
    channel_id: int,
) -> discord.TextChannel | discord.VoiceChannel | discord.StageChannel | None:
    """Text, voice or stage channel (all support webhooks); None for anything else."""
    return await _get_channel_of_type(client, channel_id, WEBHOOK_CHANNEL_TYPES)


async def get_text_channel(client: discord.Client, channel_id: int) -> discord.TextChannel | None:
    return await get_channel_of_kind(client, channel_id, ChannelKind.TEXT)


async def get_voice_channel(client: discord.Client, channel_id: int) -> discord.VoiceChannel | None:
    return await get_channel_of_kind(client, channel_id, ChannelKind.VOICE)


async def get_category_channel(client: discord.Client, channel_id: int) -> discord.CategoryChannel | None:
    return await get_channel_of_kind(client, channel_id, ChannelKind.CATEGORY)


async def get_forum_channel(client: discord.Client, channel_id: int) -> discord.ForumChannel | None:
    return await get_channel_of_kind(client, channel_id, ChannelKind.FORUM)


async def get_thread_channel(client: discord.Client, channel_id: int) -> discord.Thread | None:
    return await get_channel_of_kind(client, channel_id, ChannelKind.THREAD)
