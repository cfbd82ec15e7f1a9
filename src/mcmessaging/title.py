"""On-screen titles built from catalog messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from mcmessaging.delivery import Player, Server
from mcmessaging.source import MessageSource
from mcmessaging.text import RichText


@dataclass(frozen=True)
class TitleTimes:
    """Fade-in, stay and fade-out durations in seconds."""

    fade_in: float = 0.5
    stay: float = 3.5
    fade_out: float = 1.0

    def __post_init__(self) -> None:
        for name in ("fade_in", "stay", "fade_out"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")


@dataclass(frozen=True)
class Title:
    title: RichText
    subtitle: RichText = field(default_factory=RichText.empty)
    times: TitleTimes | None = None


class TitleDisplayer:
    """Shows title/subtitle pairs looked up by key."""

    def __init__(self, source: MessageSource, server: Server, *, times: TitleTimes | None = None) -> None:
        self.source = source
        self.server = server
        self.times = times

    def build(self, title_key: str, subtitle_key: str, *params: str) -> Title:
        """Render both lines; an empty `subtitle_key` means no subtitle."""

        title = self.source.get_component(title_key, *params)
        subtitle = self.source.get_component(subtitle_key, *params) if subtitle_key else RichText.empty()
        return Title(title=title, subtitle=subtitle, times=self.times)

    def show_to_player(self, player: Player, title_key: str, subtitle_key: str, *params: str) -> None:
        player.show_title(self.build(title_key, subtitle_key, *params))

    def show_to_players(self, title_key: str, subtitle_key: str, *params: str) -> int:
        title = self.build(title_key, subtitle_key, *params)
        count = 0
        for player in self.server.online_players():
            player.show_title(title)
            count += 1
        return count
