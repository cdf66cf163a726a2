"""Run a short scripted fight between two factions and print what happens."""

from __future__ import annotations

from typing import Sequence

from ..ds.jsonproxy import lookup_ptr
from ..system import AbilityNotFoundError
from .chainlike import AbilityCooldownError, AbilityNoTargetError
from .config import register_all
from .game import ABILITY_KIND, GameUnit, GameWorld


def _cast_and_report(world: GameWorld, unit: GameUnit, ability_id: int) -> None:
    try:
        unit.gas.cast(world, unit, 0, ability_id)
    except (AbilityNotFoundError, AbilityCooldownError, AbilityNoTargetError) as err:
        print(err)


def main(argv: Sequence[str] | None = None) -> int:
    register_all()
    units = [
        GameUnit(id=1, hp=100, faction=1),
        GameUnit(id=2, x=10, y=0, hp=100, faction=2),
        GameUnit(id=3, x=0, y=10, hp=100, faction=1),
        GameUnit(id=4, x=10, y=10, hp=100, faction=2),
    ]
    world = GameWorld(units)
    u1, u2 = world.units[1], world.units[2]
    u1.gas.add_ability(world, u1, lookup_ptr(ABILITY_KIND, 1).activate(world, u1))
    u2.gas.add_ability(world, u2, lookup_ptr(ABILITY_KIND, 2).activate(world, u2))
    for now in range(0, 2000, 50):
        world.set_now(now)
        print("tick ", now, ":")
        if now == 200:
            _cast_and_report(world, u1, 1)
            _cast_and_report(world, u2, 2)
        world.tick()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())