"""Clickable markup parsing.

Turns `<link>` / `<command>` pseudo-tags into interactive chat segments:

- `<link>http://example.com</link>`
- `<link=http://example.com>Visit our website.</link>`
- `<command>/example</command>`
- `<command=/example>Click here</command>`

Tags never nest. A run of legacy `§` style codes right before a tag is
captured with it so the clickable text keeps its color.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from mcmessaging.text import ClickEvent, RichText, clickable, concat, plain_text


class TagKind(Enum):
    LINK = "link"
    COMMAND = "command"


DEFAULT_HOVER_MESSAGES: dict[TagKind, str] = {
    TagKind.LINK: "Click to open",
    TagKind.COMMAND: "Click to run",
}
# `§x§R§R§G§G§B§B` hex colors first, then single-character codes.
STYLE_CODE_PATTERN = r"§x(?:§[0-9a-fA-F]){6}|§[0-9a-fA-Fk-oK-OrR]"
STYLE_CODE_RE = re.compile(STYLE_CODE_PATTERN)


def strip_style_codes(text: str) -> str:
    """Remove legacy `§` color and format codes."""
    return STYLE_CODE_RE.sub("", text)


def _tag_pattern(kind: TagKind, *, capture_style_prefix: bool) -> re.Pattern[str]:
    prefix = f"((?:{STYLE_CODE_PATTERN})*)" if capture_style_prefix else "()"
    tag = kind.value
    return re.compile(rf"{prefix}<{tag}(?:=([^>]*))?>(.*?)</{tag}>", re.DOTALL)


@dataclass(frozen=True)
class TagMatch:
    """One tag occurrence found during a scan."""

    kind: TagKind
    style_prefix: str
    target: str
    display_text: str
    start: int
    end: int

    @classmethod
    def from_match(cls, kind: TagKind, match: re.Match[str]) -> TagMatch:
        style_prefix, explicit_target, display_text = match.groups()
        return cls(
            kind=kind,
            style_prefix=style_prefix,
            target=explicit_target or display_text,
            display_text=display_text,
            start=match.start(),
            end=match.end(),
        )


class ClickableMarkupParser:
    """Splits text into literal and clickable segments."""

    def __init__(self, *, capture_style_prefix: bool = True) -> None:
        self.capture_style_prefix = capture_style_prefix
        self._patterns = {
            kind: _tag_pattern(kind, capture_style_prefix=capture_style_prefix) for kind in TagKind
        }

    def parse(self, text: str, hover_messages: Mapping[str, str] | None = None) -> RichText:
        """Build a rich text value from `text`, never raising on malformed markup."""

        if "<link" not in text and "<command" not in text:
            return plain_text(text)

        tags = self.scan(text)
        if not tags:
            return plain_text(text)

        hover_messages = hover_messages or {}
        segments: list[RichText] = []
        cursor = 0
        for tag in tags:
            if tag.start > cursor:
                segments.append(plain_text(text[cursor : tag.start]))
            segments.append(self._build_segment(tag, hover_messages))
            cursor = tag.end

        if cursor < len(text):
            segments.append(plain_text(text[cursor:]))
        return concat(segments)

    def find_next(self, text: str, pos: int) -> TagMatch | None:
        """Return the leftmost tag starting at or after `pos`.

        Links win ties; the tag literals differ so a tie never happens on
        real input.
        """

        best: TagMatch | None = None
        for kind in TagKind:
            match = self._patterns[kind].search(text, pos)
            if match is None:
                continue
            if best is None or match.start() < best.start:
                best = TagMatch.from_match(kind, match)
        return best

    def scan(self, text: str) -> list[TagMatch]:
        """All tag occurrences in left-to-right order."""

        tags: list[TagMatch] = []
        cursor = 0
        while (tag := self.find_next(text, cursor)) is not None:
            tags.append(tag)
            cursor = tag.end
        return tags

    @staticmethod
    def _build_segment(tag: TagMatch, hover_messages: Mapping[str, str]) -> RichText:
        hover_prefix = hover_messages.get(tag.kind.value) or DEFAULT_HOVER_MESSAGES[tag.kind]
        if tag.kind is TagKind.LINK:
            event = ClickEvent.open_url(tag.target)
        else:
            event = ClickEvent.run_command(tag.target)
        return clickable(f"{tag.style_prefix}{tag.display_text}", event, f"{hover_prefix} {tag.target}")


_DEFAULT_PARSER = ClickableMarkupParser()


def parse_clickable_components(text: str, hover_messages: Mapping[str, str] | None = None) -> RichText:
    """Parse `text` with the default parser."""

    return _DEFAULT_PARSER.parse(text, hover_messages)
