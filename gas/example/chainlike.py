"""A simple cast-on-demand ability and a periodic chain-like running entity."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ..ds.jsonproxy import Proxy, _field
from ..iface import NEVER, Ability, Event, EventKind, Running
from .game import MODIFIER_KIND, SELECTOR_KIND, GameUnit, GameWorld


class AbilityCooldownError(Exception):
    def __init__(self, message: str = "ability in cd") -> None:
        super().__init__(message)


class AbilityNoTargetError(Exception):
    def __init__(self, message: str = "ability no target picked") -> None:
        super().__init__(message)


@dataclass
class SimpleAbilityConfig:
    """An ability that selects targets and applies one modifier to each."""

    ident: int = 0
    cd: int = 0
    selector: Proxy = field(default_factory=lambda: Proxy(SELECTOR_KIND))
    modifier: Proxy = field(default_factory=lambda: Proxy(MODIFIER_KIND))

    def id(self) -> int:
        return self.ident

    @classmethod
    def from_json(cls, raw: str | bytes) -> "SimpleAbilityConfig":
        data = json.loads(raw)
        return cls(
            ident=int(data.get("id", 0)),
            cd=int(data.get("cd", 0)),
            selector=_field(SELECTOR_KIND, data, "selector"),
            modifier=_field(MODIFIER_KIND, data, "modifier"),
        )

    def activate(self, world: GameWorld, unit: GameUnit) -> "SimpleAbility":
        return SimpleAbility(self)


@dataclass(eq=False)
class SimpleAbility(Ability):
    config: SimpleAbilityConfig
    next_time: int = 0
    last_event: Optional[Event] = field(default=None, repr=False)

    def cast(self, world: GameWorld, unit: GameUnit, target: Any) -> None:
        if world.now() < self.next_time:
            raise AbilityCooldownError()
        targets = self.config.selector.get().select(world, unit, None)
        if not targets:
            raise AbilityNoTargetError()
        for picked in targets:
            self.config.modifier.get().apply(world, picked)

    def listen_event(self) -> Sequence[EventKind]:
        return ()

    def on_create(self, world: GameWorld, unit: GameUnit) -> None:
        """A freshly created ability is ready to cast."""
        self.next_time = 0

    def on_event(self, world: GameWorld, unit: GameUnit, event: Event) -> None:
        """Remember the most recent event delivered to this ability."""
        self.last_event = event

    def id(self) -> int:
        return self.config.ident


@dataclass
class ChainLikeRunningConfig:
    """Every ``gap`` ms for ``duration`` ms, select targets and modify them."""

    ident: int = 0
    gap: int = 0
    duration: int = 0
    selector: Proxy = field(default_factory=lambda: Proxy(SELECTOR_KIND))
    modifier: Proxy = field(default_factory=lambda: Proxy(MODIFIER_KIND))
    repeat: bool = False

    def id(self) -> int:
        return self.ident

    @classmethod
    def from_json(cls, raw: str | bytes) -> "ChainLikeRunningConfig":
        data = json.loads(raw)
        return cls(
            ident=int(data.get("id", 0)),
            gap=int(data.get("gap", 0)),
            duration=int(data.get("duration", 0)),
            selector=_field(SELECTOR_KIND, data, "selector"),
            modifier=_field(MODIFIER_KIND, data, "modifier"),
            repeat=bool(data.get("repeat", False)),
        )

    def activate(self, world: GameWorld, unit: GameUnit) -> "ChainLikeRunning":
        return ChainLikeRunning(self, unit.x, unit.y)


@dataclass(eq=False)
class ChainLikeRunning(Running):
    config: ChainLikeRunningConfig
    x: float = 0.0
    y: float = 0.0
    next_time: int = 0
    end: int = 0
    visited: list[int] = field(default_factory=list)
    last_event: Optional[Event] = field(default=None, repr=False)

    def id(self) -> int:
        return self.config.ident

    def listen_event(self) -> Sequence[EventKind]:
        return ()

    def stack(self) -> tuple[int, int]:
        return 0, self.end

    def on_stack(self, start: int, end: int) -> None:
        self.end = max(self.end, end)

    def think(self, world: GameWorld, unit: GameUnit) -> int:
        now = world.now()
        if now > self.end:
            return NEVER
        if now >= self.next_time:
            self.next_time += self.config.gap
            for picked in self.config.selector.get().select(world, unit, self.visited):
                self.config.modifier.get().apply(world, picked)
                if not self.config.repeat:
                    self.visited.append(picked.id)
        return min(self.next_time, self.end)

    def on_begin(self, world: GameWorld, unit: GameUnit) -> int:
        now = world.now()
        self.next_time = now
        self.end = now + self.config.duration
        return self.next_time

    def on_end(self, world: GameWorld, unit: GameUnit) -> None:
        """Forget the targets already visited once the entity has finished."""
        self.visited.clear()

    def on_event(self, world: GameWorld, unit: GameUnit, event: Event) -> None:
        """Remember the most recent event delivered to this entity."""
        self.last_event = event