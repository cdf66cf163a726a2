# gas

A compact game ability system for a single game unit. A `GAS` instance
(`gas.system.GAS`) holds three kinds of things:

- **abilities**: skills a unit owns, cast on demand and able to react to events;
- **running effects**: timed entities that think periodically, stack and end;
- **buffs**: stat modifiers grouped by kind that expire and are recombined.

The world, unit and event types are yours. They subclass the small
abstract interfaces in `gas.iface`: `World`, `Unit`, `Event`, `Ability`
and `Running`. The same module holds the timing constants `THINK_LATER`
(3000), `MIN_THINK_GAP` (10) and `NEVER` (-1).

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Using it

```python
from gas.system import GAS, AbilityNotFoundError
from gas.buff import BuffNode

system = GAS()
system.add_ability(world, unit, my_ability)    # False if the id is already present
system.add_running(world, unit, my_running)    # stacks onto an existing one with the same id
system.add_buff(world, unit, BuffNode(source="potion", value=0.2, expire=5000, kind=1))

next_think = system.think(world, unit)         # time at which think should run again
system.on_event(world, unit, event)

try:
    system.cast(world, unit, target, ability_id=1)
except AbilityNotFoundError:
    ...
```

- `think` runs every running effect that is due. An effect's `think`
  returns the time it next wants to think (at least `MIN_THINK_GAP` after
  now), or a negative value to finish, after which its `on_end` is called
  and it is dropped. Expired buffs are dropped and their kind recombined.
  The return value is the earliest time anything is due, and never later
  than `now + THINK_LATER`.
- `add_running` calls `on_begin`; a negative result means the effect is
  not started. When an effect with the same id is already running, the
  new one's `stack()` is passed to the existing one's `on_stack` instead.
- `on_event` delivers an event only to abilities and running effects whose
  `listen_event()` contains its kind, and only for kinds that are watched.
  `add_ability` watches every kind its ability listens to; `watch` and
  `unwatch` change this by hand.
- `cast` raises `AbilityNotFoundError` for an unknown id and otherwise
  returns or raises whatever the ability's `cast` does.

### Buffs

How buffs of one kind combine is decided by `world.describe_buff_kind(kind)`,
which returns a `BuffCompose` and a `BuffStack` (both in `gas.buff`):

| `BuffCompose` | value passed to `unit.set_buff` |
|---|---|
| `NONE` | 1.0 if any buff is active, else 0.0 |
| `ADD` | base + sum of values |
| `PERCENT` | base × (1 + sum of values) |
| `MAGNIFY` | base × product of (1 + value) |

The base comes from `unit.get_buff_base(kind)`. A buff is active while
its `expire` is later than the world's current time.

| `BuffStack` | a new buff from a source already present… |
|---|---|
| `NONE` | is ignored |
| `GREATER` | replaces the old one if its value is greater |
| `LONGER` | replaces the old one if it expires later |
| `SEPARATE` | is always added alongside |

`BuffList` holds the buffs of one kind; `merge`, `refresh` and
`next_expire` can be used on their own.

### Data structures

`gas.ds` holds the small containers the system is built on:

- `gas.ds.indexmap.IndexMap` and `gas.ds.arraymap.ArrayMap`: maps kept in
  dense lists, where `get` returns `(slot, value)` or `(-1, None)` and
  `remove(slot)` moves the last entry into the freed slot;
- `gas.ds.heapindexmap.HeapIndexMap` and `gas.ds.heaparraymap.HeapArrayMap`:
  maps whose entries are also kept in a min-heap by a score, so the entry
  with the lowest score is found with `top()` and removed with `pop()`;
  `update(slot, score)` re-orders one entry, and `check()` reports whether
  the internal links are consistent;
- `gas.ds.jsonproxy`: `register_proxy(kind, item)` files an object under a
  kind by its `id()`, `lookup_ptr(kind, ident)` finds it again (None for an
  unknown kind, `KeyError` for an unknown id), and `Proxy.from_json(kind, raw)`
  resolves a JSON integer to the registered object. The registry is
  shared by the whole process.

## Example

`gas.example` contains a tiny simulated world with four units in two
factions. Unit 1 casts an ability that starts a damage-over-time effect on
itself, hitting the nearest enemy every 300 ms; unit 2 casts one that
starts a heal-over-time effect, healing an ally every 250 ms. Run it with:

```
gas-example
```

It prints each tick, from 0 to 1950 ms in steps of 50, and the damage,
healing and effects applied.

## What it does not do

The package is a library for the logic attached to one unit. It has no
game loop, clock, rendering, networking or saving of state: the caller
supplies the world, decides when to call `think`, and keeps the units.
The example abilities do not track their cooldown, and the example world
uses no buffs.