import pytest

from gas.ds.jsonproxy import Proxy
from gas.example.chainlike import (
    AbilityCooldownError,
    AbilityNoTargetError,
    ChainLikeRunning,
    ChainLikeRunningConfig,
    SimpleAbility,
    SimpleAbilityConfig,
)
from gas.example.game import GameUnit, GameWorld
from gas.iface import NEVER


class _Pick:
    def __init__(self, units):
        self.units = units
        self.excludes = []

    def select(self, world, unit, exclude):
        self.excludes.append(list(exclude or []))
        return [u for u in self.units if u.id not in (exclude or [])]


class _Record:
    def __init__(self):
        self.applied = []

    def apply(self, world, unit):
        self.applied.append(unit.id)


def _setup():
    caster = GameUnit(id=1, x=3, y=4)
    target = GameUnit(id=2)
    world = GameWorld([caster, target])
    return world, caster, target


def test_cast_applies_modifier():
    world, caster, target = _setup()
    mod = _Record()
    cfg = SimpleAbilityConfig(
        ident=1, selector=Proxy("s", _Pick([target])), modifier=Proxy("m", mod)
    )
    ability = cfg.activate(world, caster)
    assert ability.id() == 1
    assert ability.cast(world, caster, 0) is None
    assert mod.applied == [target.id]


def test_cast_without_target():
    world, caster, _ = _setup()
    cfg = SimpleAbilityConfig(
        ident=1, selector=Proxy("s", _Pick([])), modifier=Proxy("m", _Record())
    )
    with pytest.raises(AbilityNoTargetError):
        cfg.activate(world, caster).cast(world, caster, 0)


def test_cast_in_cooldown():
    world, caster, target = _setup()
    cfg = SimpleAbilityConfig(
        ident=1, selector=Proxy("s", _Pick([target])), modifier=Proxy("m", _Record())
    )
    ability = SimpleAbility(cfg, next_time=500)
    world.set_now(100)
    with pytest.raises(AbilityCooldownError):
        ability.cast(world, caster, 0)


def test_config_from_json():
    cfg = ChainLikeRunningConfig.from_json(
        '{"id":7,"gap":300,"duration":901,"repeat":true}'
    )
    assert (cfg.ident, cfg.gap, cfg.duration, cfg.repeat) == (7, 300, 901, True)


def test_running_lifecycle():
    world, caster, target = _setup()
    mod = _Record()
    cfg = ChainLikeRunningConfig(
        ident=7,
        gap=300,
        duration=901,
        selector=Proxy("s", _Pick([target])),
        modifier=Proxy("m", mod),
        repeat=True,
    )
    running = cfg.activate(world, caster)
    assert isinstance(running, ChainLikeRunning)
    assert (running.x, running.y) == (caster.x, caster.y)
    world.set_now(200)
    assert running.on_begin(world, caster) == 200
    assert running.stack() == (0, 200 + cfg.duration)
    assert running.think(world, caster) == 200 + cfg.gap
    assert mod.applied == [target.id]
    world.set_now(250)
    assert running.think(world, caster) == 200 + cfg.gap
    assert mod.applied == [target.id]
    world.set_now(200 + cfg.duration + 1)
    assert running.think(world, caster) == NEVER


def test_on_stack_keeps_later_end():
    world, caster, _ = _setup()
    running = ChainLikeRunningConfig(ident=1, duration=100).activate(world, caster)
    running.on_begin(world, caster)
    running.on_stack(0, 50)
    assert running.stack() == (0, 100)
    running.on_stack(0, 400)
    assert running.stack() == (0, 400)


def test_non_repeat_visits_once():
    world, caster, target = _setup()
    mod = _Record()
    picker = _Pick([target])
    cfg = ChainLikeRunningConfig(
        ident=8,
        gap=10,
        duration=1000,
        selector=Proxy("s", picker),
        modifier=Proxy("m", mod),
        repeat=False,
    )
    running = cfg.activate(world, caster)
    running.on_begin(world, caster)
    running.think(world, caster)
    world.set_now(running.next_time)
    running.think(world, caster)
    assert mod.applied == [target.id]
    assert running.visited == [target.id]
    assert picker.excludes[-1] == [target.id]