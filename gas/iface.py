"""Interfaces a game supplies to the ability system, and its timing constants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from .buff import BuffCompose, BuffStack

# Fallback think interval.
THINK_LATER = 3000
# Smallest gap between two thinks of one running entity.
MIN_THINK_GAP = 10
# A think result meaning the entity is finished.
NEVER = -1

EventKind = int
BuffKind = int


class World(ABC):
    @abstractmethod
    def now(self) -> int: ...

    @abstractmethod
    def describe_buff_kind(self, kind: BuffKind) -> tuple[BuffCompose, BuffStack]: ...


class Unit(ABC):
    @abstractmethod
    def get_buff_base(self, kind: BuffKind) -> float: ...

    @abstractmethod
    def set_buff(self, kind: BuffKind, value: float) -> None: ...


class Event(ABC):
    @abstractmethod
    def kind(self) -> EventKind: ...


class Ability(ABC):
    @abstractmethod
    def id(self) -> int: ...

    @abstractmethod
    def listen_event(self) -> Sequence[EventKind]: ...

    @abstractmethod
    def on_create(self, world: World, unit: Unit) -> None: ...

    @abstractmethod
    def on_event(self, world: World, unit: Unit, event: Event) -> None: ...

    @abstractmethod
    def cast(self, world: World, unit: Unit, target: Any) -> Any:
        """Cast the ability; raise when it cannot be cast."""


class Running(ABC):
    @abstractmethod
    def id(self) -> int: ...

    @abstractmethod
    def listen_event(self) -> Sequence[EventKind]: ...

    @abstractmethod
    def stack(self) -> tuple[int, int]: ...

    @abstractmethod
    def on_stack(self, start: int, end: int) -> None: ...

    @abstractmethod
    def think(self, world: World, unit: Unit) -> int:
        """Return the time of the next think, or ``NEVER`` to finish."""

    @abstractmethod
    def on_begin(self, world: World, unit: Unit) -> int:
        """Return the time of the first think, or a negative to refuse."""

    @abstractmethod
    def on_end(self, world: World, unit: Unit) -> None: ...

    @abstractmethod
    def on_event(self, world: World, unit: Unit, event: Event) -> None: ...