"""Discord markdown constructs: headings, emphasis, quotes, code, links, lists."""

from __future__ import annotations

from collections.abc import Iterable

from discord_addons.core.constants import DEFAULT_CODE_BLOCK_LANGUAGE, HEADING_PREFIXES
from discord_addons.core.errors import InvalidArgumentError

BOLD = "**"
ITALIC_UNDERSCORE = "_"
ITALIC_ASTERISK = "*"
UNDERLINE = "__"
STRIKETHROUGH = "~~"
SPOILER = "||"
INLINE_CODE = "`"
CODE_FENCE = "```"


def _wrap(text: str, marker: str) -> str:
    return f"{marker}{text}{marker}"


def unwrap(text: str, marker: str) -> str:
    """Remove one symmetric marker pair from text. Returns text unchanged if not wrapped."""
    size = len(marker)
    if not size or len(text) < 2 * size:
        return text
    if text.startswith(marker) and text.endswith(marker):
        return text[size:-size]
    return text


def heading(text: str, level: int = 1) -> str:
    """Format text as a heading. Discord supports levels 1-3."""
    prefix = HEADING_PREFIXES.get(level)
    if prefix is None:
        raise InvalidArgumentError(
            f"Heading level must be between 1 and 3, got {level}",
            code="invalid_heading_level",
            details={"level": level},
        )
    return f"{prefix} {text}"


def h1(text: str) -> str:
    return heading(text, 1)


def h2(text: str) -> str:
    return heading(text, 2)


def h3(text: str) -> str:
    return heading(text, 3)


def spoiler(text: str) -> str:
    return _wrap(text, SPOILER)


def italic(text: str, use_underscores: bool = True, bold: bool = False) -> str:
    """Italicize text with _ (default) or *. With bold=True, wrap once more for bold italics."""
    formatted = _wrap(text, ITALIC_UNDERSCORE if use_underscores else ITALIC_ASTERISK)
    if bold:
        formatted = _wrap(formatted, BOLD)
    return formatted


def bold(text: str, italic: bool = False) -> str:
    formatted = _wrap(text, BOLD)
    if italic:
        formatted = _wrap(formatted, ITALIC_ASTERISK)
    return formatted


def underline(text: str, bold: bool = False, italic: bool = False) -> str:
    """Underline text, optionally also bold and/or italic (***__x__***)."""
    formatted = _wrap(text, UNDERLINE)
    if bold:
        formatted = _wrap(formatted, BOLD)
    if italic:
        formatted = _wrap(formatted, ITALIC_ASTERISK)
    return formatted


def strikethrough(text: str) -> str:
    return _wrap(text, STRIKETHROUGH)


def hide_link_embed(url: str) -> str:
    """Wrap a URL in angle brackets so Discord does not render an embed preview."""
    return f"<{url}>"


def quote(text: str) -> str:
    return f"> {text}"


def block_quote(text: str) -> str:
    """Quote text and everything after it in the message."""
    return f">>> {text}"


def hyperlink(text: str, url: object, title: str | None = None) -> str:
    """Masked link: [text](url) or [text](url "title"). url may be any str()-able (e.g. yarl.URL)."""
    if title is not None:
        return f'[{text}]({url} "{title}")'
    return f"[{text}]({url})"


def inline_code(text: str) -> str:
    return _wrap(text, INLINE_CODE)


def code_block(text: str, language: str = DEFAULT_CODE_BLOCK_LANGUAGE) -> str:
    """Fenced code block with a language tag (default: md)."""
    return f"{CODE_FENCE}{language}\n{text}\n{CODE_FENCE}"


def _to_list(items: Iterable[str | None], prefix: str) -> str:
    lines: list[str] = []
    for item in items:
        if not item:
            continue
        lines.append(f"{prefix} {item}\n")
    return "".join(lines)


def unordered_list(items: Iterable[str | None], use_asterisks: bool = False) -> str:
    """One "- item" (or "* item") line per non-empty item, each newline-terminated."""
    return _to_list(items, "*" if use_asterisks else "-")


def ordered_list(items: Iterable[str | None]) -> str:
    """One "1. item" line per non-empty item; Discord renumbers the list when rendering."""
    return _to_list(items, "1.")
