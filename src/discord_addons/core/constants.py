"""Discord formatting and validation constants."""

from __future__ import annotations

from typing import Final

# Discord rejects webhook names containing these (case-insensitive)
BLACKLISTED_WEBHOOK_NAME_SUBSTRINGS: Final[tuple[str, ...]] = ("clyde", "discord")

HEADING_PREFIXES: Final[dict[int, str]] = {1: "#", 2: "##", 3: "###"}

DEFAULT_CODE_BLOCK_LANGUAGE: Final = "md"
DEFAULT_TIMESTAMP_STYLE_CODE: Final = "f"

# Bot tokens shorter than this are rejected before the segment check
MIN_BOT_TOKEN_LENGTH: Final = 58

WEBHOOK_URL_TEMPLATE: Final = "https://discord.com/api/webhooks/{id}/{token}"
