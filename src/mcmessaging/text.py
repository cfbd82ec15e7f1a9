"""Rich text values produced by the markup parser."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ClickAction(Enum):
    """Click behaviors supported by interactive segments."""

    OPEN_URL = "open_url"
    RUN_COMMAND = "run_command"


@dataclass(frozen=True)
class ClickEvent:
    action: ClickAction
    value: str

    @classmethod
    def open_url(cls, url: str) -> ClickEvent:
        return cls(ClickAction.OPEN_URL, url)

    @classmethod
    def run_command(cls, command: str) -> ClickEvent:
        return cls(ClickAction.RUN_COMMAND, command)


class RichText(ABC):
    """Base class for composable chat text."""

    @abstractmethod
    def to_plain_text(self) -> str:
        """Visible text without click or hover data."""

    @abstractmethod
    def to_json_object(self) -> dict[str, Any]:
        """Minecraft chat component payload."""

    def to_json_str(self) -> str:
        return json.dumps(self.to_json_object(), ensure_ascii=False)

    def segments(self) -> tuple[RichText, ...]:
        """Leaf segments in display order."""
        return (self,)

    def __str__(self) -> str:
        return self.to_plain_text()

    def __add__(self, other: RichText) -> Composite:
        return concat([self, other])

    @staticmethod
    def empty() -> Composite:
        return Composite()


@dataclass(frozen=True)
class PlainText(RichText):
    """Literal text without any behavior."""

    text: str

    def to_plain_text(self) -> str:
        return self.text

    def to_json_object(self) -> dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True)
class ClickableText(RichText):
    """Text bound to a click action and a hover tooltip."""

    text: str
    click_event: ClickEvent
    hover_text: str

    def to_plain_text(self) -> str:
        return self.text

    def to_json_object(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "clickEvent": {
                "action": self.click_event.action.value,
                "value": self.click_event.value,
            },
            "hoverEvent": {
                "action": "show_text",
                "value": {"text": self.hover_text},
            },
        }


@dataclass(frozen=True)
class Composite(RichText):
    """Ordered concatenation of leaf segments."""

    children: tuple[RichText, ...] = field(default_factory=tuple)

    def to_plain_text(self) -> str:
        return "".join(child.to_plain_text() for child in self.children)

    def to_json_object(self) -> dict[str, Any]:
        return {"text": "", "extra": [child.to_json_object() for child in self.children]}

    def segments(self) -> tuple[RichText, ...]:
        return self.children

    def is_empty(self) -> bool:
        return not self.children


def plain_text(text: str) -> PlainText:
    return PlainText(text)


def clickable(text: str, click_event: ClickEvent, hover_text: str) -> ClickableText:
    return ClickableText(text, click_event, hover_text)


def concat(parts: Iterable[RichText]) -> Composite:
    """Concatenate values into one composite, splicing nested composites."""

    children: list[RichText] = []
    for part in parts:
        children.extend(part.segments())
    return Composite(tuple(children))
