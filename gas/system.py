"""The ability system attached to one unit: abilities, running entities and buffs."""

from __future__ import annotations

from typing import Any

from .buff import BuffCompose, BuffList, BuffNode, BuffStack
from .ds.heapindexmap import HeapIndexMap
from .ds.indexmap import IndexMap
from .iface import (
    MIN_THINK_GAP,
    THINK_LATER,
    Ability,
    Event,
    EventKind,
    Running,
    Unit,
    World,
)


class AbilityNotFoundError(LookupError):
    """Raised when casting an ability the unit does not have."""


class GAS:
    """Manages the abilities, running entities and buffs of one unit.

    ``abilities`` maps ability id to ability; ``running`` and ``buff`` are
    ordered by the time each entry next needs attention.
    """

    def __init__(self) -> None:
        self.abilities: IndexMap[int, Ability] = IndexMap()
        self.running: HeapIndexMap[int, Running] = HeapIndexMap()
        self.buff: HeapIndexMap[int, BuffList] = HeapIndexMap()
        self._watchers: dict[EventKind, set[int]] = {}

    def think(self, world: World, unit: Unit) -> int:
        """Run everything that is due and return when to think next."""
        now = world.now()
        next_time = now + THINK_LATER
        while len(self.running) > 0:
            i, _, entity, when = self.running.top()
            if when > now:
                next_time = when
                break
            wanted = entity.think(world, unit)
            if wanted >= 0:
                self.running.update(i, max(now + MIN_THINK_GAP, wanted))
            else:
                entity.on_end(world, unit)
                self.running.remove(i)
        return min(next_time, self._think_buff(now, unit))

    def on_event(self, world: World, unit: Unit, event: Event) -> None:
        """Pass ``event`` to every ability and running entity that listens to it."""
        kind = event.kind()
        if kind not in self._watchers:
            return
        for ability in self.abilities:
            if kind in ability.listen_event():
                ability.on_event(world, unit, event)
        for entity in self.running:
            if kind in entity.listen_event():
                entity.on_event(world, unit, event)

    def cast(self, world: World, unit: Unit, target: Any, ability_id: int) -> Any:
        """Cast the ability with ``ability_id`` at ``target``."""
        i, ability = self.abilities.get(ability_id)
        if i < 0:
            raise AbilityNotFoundError(f"ability {ability_id} not found")
        return ability.cast(world, unit, target)

    def add_ability(self, world: World, unit: Unit, ability: Ability) -> bool:
        """Add ``ability``; return False if one with the same id exists."""
        ident = ability.id()
        i, _ = self.abilities.get(ident)
        if i >= 0:
            return False
        ability.on_create(world, unit)
        self.abilities.put(ident, ability)
        for kind in ability.listen_event():
            self.watch(kind, ident)
        return True

    def add_running(self, world: World, unit: Unit, running: Running) -> None:
        """Start ``running``, or stack it onto an entity with the same id."""
        i, existing = self.running.get(running.id())
        if i >= 0:
            start, end = running.stack()
            existing.on_stack(start, end)
            return
        first = running.on_begin(world, unit)
        if first >= 0:
            self.running.put(running.id(), running, first)

    def add_buff(self, world: World, unit: Unit, node: BuffNode) -> None:
        """Apply the buff ``node`` and update the unit's buffed value."""
        i, blist = self.buff.get(node.kind)
        if i >= 0:
            self.buff.update(i, blist.merge(node))
            self._calculate_buff(world.now(), blist, unit)
            return
        compose, stack = world.describe_buff_kind(node.kind)
        blist = BuffList(node.kind, BuffCompose(compose), BuffStack(stack), [node])
        self.buff.put(node.kind, blist, blist.next_expire())
        self._calculate_buff(world.now(), blist, unit)

    def watch(self, kind: EventKind, ident: int) -> None:
        """Record that ``ident`` wants events of ``kind`` delivered."""
        self._watchers.setdefault(kind, set()).add(ident)

    def unwatch(self, kind: EventKind, ident: int) -> None:
        """Withdraw the interest of ``ident`` in events of ``kind``."""
        watchers = self._watchers.get(kind)
        if watchers is None:
            return
        watchers.discard(ident)
        if not watchers:
            del self._watchers[kind]

    def _calculate_buff(self, now: int, blist: BuffList, unit: Unit) -> None:
        base = unit.get_buff_base(blist.kind)
        unit.set_buff(blist.kind, blist.refresh(now, base))

    def _think_buff(self, now: int, unit: Unit) -> int:
        while len(self.buff) > 0:
            i, _, blist, when = self.buff.top()
            if when > now:
                return when
            self._calculate_buff(now, blist, unit)
            upcoming = blist.next_expire()
            if upcoming >= 0:
                self.buff.update(i, upcoming)
            else:
                self.buff.remove(i)
        return now + THINK_LATER