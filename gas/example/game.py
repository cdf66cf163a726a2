"""A small world, unit and event used to drive the ability system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from ..buff import BuffCompose, BuffStack
from ..iface import BuffKind, Event, EventKind, Unit, World
from ..system import GAS

# Registry kinds under which configurations are looked up by id.
SELECTOR_KIND = "selector"
MODIFIER_KIND = "modifier"
RUNNING_KIND = "running"
ABILITY_KIND = "ability"


@dataclass(eq=False)
class GameUnit(Unit):
    id: int
    x: float = 0.0
    y: float = 0.0
    hp: int = 0
    faction: int = 0
    gas: GAS = field(default_factory=GAS, repr=False)
    buff_base: dict[BuffKind, float] = field(default_factory=dict, repr=False)
    buffs: dict[BuffKind, float] = field(default_factory=dict, repr=False)

    def get_buff_base(self, kind: BuffKind) -> float:
        return self.buff_base.get(kind, 0.0)

    def set_buff(self, kind: BuffKind, value: float) -> None:
        self.buffs[kind] = value


class GameEvent(Event):
    def kind(self) -> EventKind:
        return 0


class GameWorld(World):
    """A set of units and a clock in milliseconds."""

    def __init__(self, units: Mapping[int, GameUnit] | Iterable[GameUnit]) -> None:
        if isinstance(units, Mapping):
            self.units: dict[int, GameUnit] = dict(units)
        else:
            self.units = {u.id: u for u in units}
        self._now = 0

    def set_now(self, now_ts: int) -> None:
        self._now = now_ts

    def tick(self) -> None:
        for unit in list(self.units.values()):
            unit.gas.think(self, unit)

    def now(self) -> int:
        return self._now

    def describe_buff_kind(self, kind: BuffKind) -> tuple[BuffCompose, BuffStack]:
        return BuffCompose.NONE, BuffStack.NONE