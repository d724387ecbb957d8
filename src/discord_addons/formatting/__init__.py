"""Discord markdown, mention and timestamp formatting."""

from discord_addons.formatting.markdown import (
    block_quote,
    bold,
    code_block,
    h1,
    h2,
    h3,
    heading,
    hide_link_embed,
    hyperlink,
    inline_code,
    italic,
    ordered_list,
    quote,
    spoiler,
    strikethrough,
    underline,
    unordered_list,
    unwrap,
)
from discord_addons.formatting.mentions import channel_mention, role_mention, user_mention
from discord_addons.formatting.timestamps import TimestampStyle, TimestampTag, timestamp_tag

__all__ = [
    "TimestampStyle",
    "TimestampTag",
    "block_quote",
    "bold",
    "channel_mention",
    "code_block",
    "h1",
    "h2",
    "h3",
    "heading",
    "hide_link_embed",
    "hyperlink",
    "inline_code",
    "italic",
    "ordered_list",
    "quote",
    "role_mention",
    "spoiler",
    "strikethrough",
    "timestamp_tag",
    "underline",
    "unordered_list",
    "unwrap",
    "user_mention",
]
