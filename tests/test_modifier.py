import pytest

from gas.ds.jsonproxy import Proxy, register_proxy
from gas.example.game import RUNNING_KIND, GameUnit, GameWorld
from gas.example.modifier import ModifierConfig, ModifierType
from gas.iface import Running


class _Idle(Running):
    def __init__(self, ident):
        self.ident = ident

    def id(self):
        return self.ident

    def listen_event(self):
        return ()

    def stack(self):
        return 0, 0

    def on_stack(self, start, end):
        pass

    def think(self, world, unit):
        return world.now() + 1000

    def on_begin(self, world, unit):
        return world.now() + 100

    def on_end(self, world, unit):
        pass

    def on_event(self, world, unit, event):
        pass


class _RunningConfig:
    def __init__(self, ident):
        self.ident = ident

    def id(self):
        return self.ident

    def activate(self, world, unit):
        return _Idle(self.ident)


def test_damage(capsys):
    unit = GameUnit(id=1, hp=100)
    world = GameWorld([unit])
    cfg = ModifierConfig(ident=1, type=ModifierType.DAMAGE, value=3)
    cfg.apply(world, unit)
    assert unit.hp == 100 - 3
    assert capsys.readouterr().out == f"    unit 1: damage 100->{unit.hp}\n"


def test_heal(capsys):
    unit = GameUnit(id=2, hp=50)
    world = GameWorld([unit])
    ModifierConfig(ident=2, type=ModifierType.HEAL, value=2).apply(world, unit)
    assert unit.hp == 50 + 2
    assert "heal 50->" in capsys.readouterr().out


def test_unknown_type_does_nothing(capsys):
    unit = GameUnit(id=3, hp=10)
    ModifierConfig(ident=9, type=42, value=5).apply(GameWorld([unit]), unit)
    assert unit.hp == 10
    assert capsys.readouterr().out == ""


def test_add_running(capsys):
    register_proxy(RUNNING_KIND, _RunningConfig(901))
    cfg = ModifierConfig.from_json('{"id":903,"type":3,"running":901}')
    assert cfg.running.get().id() == 901
    unit = GameUnit(id=4)
    world = GameWorld([unit])
    cfg.apply(world, unit)
    i, running = unit.gas.running.get(901)
    assert i >= 0
    assert running.id() == 901
    assert "add running 901" in capsys.readouterr().out


def test_from_json_without_running():
    cfg = ModifierConfig.from_json('{"id":1,"type":1,"value":3}')
    assert (cfg.ident, cfg.type, cfg.value) == (1, ModifierType.DAMAGE, 3)
    assert cfg.running == Proxy(RUNNING_KIND)


def test_from_json_unknown_running():
    register_proxy(RUNNING_KIND, _RunningConfig(902))
    with pytest.raises(KeyError):
        ModifierConfig.from_json('{"id":5,"type":3,"running":987654}')