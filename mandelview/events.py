"""Input events and their bindings to keys, wheel and mouse buttons."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional, Union


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Pan:
    direction: Direction


@dataclass(frozen=True)
class ZoomIn:
    pass


@dataclass(frozen=True)
class ZoomOut:
    pass


@dataclass(frozen=True)
class Recenter:
    x: int
    y: int


Event = Union[Quit, Pan, ZoomIn, ZoomOut, Recenter]

# Arrow keys and their vi equivalents.
KEY_BINDINGS: dict[str, Event] = {
    "up": Pan(Direction.UP),
    "k": Pan(Direction.UP),
    "down": Pan(Direction.DOWN),
    "j": Pan(Direction.DOWN),
    "left": Pan(Direction.LEFT),
    "h": Pan(Direction.LEFT),
    "right": Pan(Direction.RIGHT),
    "l": Pan(Direction.RIGHT),
    "plus": ZoomIn(),
    "+": ZoomIn(),
    "p": ZoomIn(),
    "minus": ZoomOut(),
    "-": ZoomOut(),
    "m": ZoomOut(),
    "q": Quit(),
}

RECENTER_BUTTON = "right"


def event_for_key(key: str) -> Optional[Event]:
    return KEY_BINDINGS.get(key)


def event_for_wheel(dy: int) -> Optional[Event]:
    """Wheel down zooms in, wheel up zooms out."""
    if dy < 0:
        return ZoomIn()
    if dy > 0:
        return ZoomOut()
    return None


def event_for_button(button: str, x: int, y: int) -> Optional[Event]:
    if button == RECENTER_BUTTON:
        return Recenter(int(x), int(y))
    return None


def event_for_close() -> Event:
    return Quit()


def _parse_token(token: str) -> Event:
    if token == "quit":
        return event_for_close()
    if token == "wheel-up":
        return event_for_wheel(1)
    if token == "wheel-down":
        return event_for_wheel(-1)
    if token.startswith("click:"):
        coords = token[len("click:"):].split("x")
        if len(coords) != 2:
            raise ValueError(f"click events must look like click:XxY, got '{token}'")
        try:
            x, y = (int(value) for value in coords)
        except ValueError as exc:
            raise ValueError(f"click coordinates must be integers, got '{token}'") from exc
        return Recenter(x, y)
    event = event_for_key(token)
    if event is None:
        raise ValueError(f"unknown event '{token}'")
    return event


def parse_script(text: str) -> list[list[Event]]:
    """Parse ``"k,k,plus;click:40x30;q"`` into one event list per tick."""

    ticks: list[list[Event]] = []
    for chunk in text.split(";"):
        tokens = [token.strip() for token in chunk.split(",")]
        ticks.append([_parse_token(token) for token in tokens if token])
    return ticks


class ScriptedEventSource:
    """Event source that replays a fixed list of ticks, then stays silent."""

    def __init__(self, ticks: Iterable[Iterable[Event]] = ()):
        self._ticks = deque(list(tick) for tick in ticks)

    @classmethod
    def from_script(cls, text: str) -> ScriptedEventSource:
        return cls(parse_script(text))

    def push(self, *events: Event) -> None:
        """Queue ``events`` as one more tick."""
        self._ticks.append(list(events))

    @property
    def exhausted(self) -> bool:
        return not self._ticks

    def poll(self) -> list[Event]:
        if not self._ticks:
            return []
        return self._ticks.popleft()
