"""Message delivery to players and the server console."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from loguru import logger

from mcmessaging.source import MessageSource
from mcmessaging.text import RichText

if TYPE_CHECKING:
    from mcmessaging.title import Title


@dataclass(frozen=True)
class Location:
    world: str
    x: float
    y: float
    z: float

    def distance(self, other: Location) -> float:
        if self.world != other.world:
            raise ValueError(f"Cannot measure distance between worlds {self.world} and {other.world}")
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))


class Player(Protocol):
    name: str

    @property
    def location(self) -> Location: ...

    def has_permission(self, permission: str) -> bool: ...

    def send_message(self, message: RichText) -> None: ...

    def show_title(self, title: Title) -> None: ...


class Server(Protocol):
    def online_players(self) -> Iterable[Player]: ...

    def broadcast(self, message: RichText) -> None: ...


def within_radius(player: Player, center: Location, radius: float) -> bool:
    """Players in another world are never within range."""
    location = player.location
    if location.world != center.world:
        return False
    return location.distance(center) <= radius


class Messenger:
    """Sends catalog messages to audiences on a server.

    Every `send_*` method renders the component once and returns how many
    players received it.
    """

    def __init__(self, source: MessageSource, server: Server) -> None:
        self.source = source
        self.server = server

    def send_to_all(self, key: str, *params: str) -> int:
        component = self.source.get_component(key, *params)
        self.server.broadcast(component)
        return len(list(self.server.online_players()))

    def send_to_player(self, player: Player, key: str, *params: str) -> int:
        player.send_message(self.source.get_component(key, *params))
        return 1

    def send_to_players_with_permission(self, permission: str, key: str, *params: str) -> int:
        return self._send_filtered(lambda player: player.has_permission(permission), key, params)

    def send_to_players_within_radius(self, center: Location, radius: float, key: str, *params: str) -> int:
        return self._send_filtered(lambda player: within_radius(player, center, radius), key, params)

    def send_to_players_with_permission_within_radius(
        self,
        permission: str,
        center: Location,
        radius: float,
        key: str,
        *params: str,
    ) -> int:
        return self._send_filtered(
            lambda player: player.has_permission(permission) and within_radius(player, center, radius),
            key,
            params,
        )

    def send_to_system(self, level: str | int, key: str, *params: str) -> None:
        """Log the plain message to the server console at `level`."""
        logger.log(level, self.source.get_string(key, *params))

    def _send_filtered(self, predicate: Callable[[Player], bool], key: str, params: tuple[str, ...]) -> int:
        recipients = [player for player in self.server.online_players() if predicate(player)]
        if not recipients:
            logger.debug("messenger.no_recipients key={}", key)
            return 0
        component = self.source.get_component(key, *params)
        for player in recipients:
            player.send_message(component)
        return len(recipients)
