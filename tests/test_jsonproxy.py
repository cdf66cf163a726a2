import json
from dataclasses import dataclass

import pytest

from gas.ds.jsonproxy import Proxy, lookup_ptr, register_proxy


@dataclass
class Cd:
    ident: int
    text: str

    def id(self):
        return self.ident

    def ok(self):
        return None


@dataclass
class Cb:
    ident: int
    name: str
    cd: int
    count: int

    def id(self):
        return self.ident

    def ok(self):
        return None


class Mix:
    """Kind key for objects with id() and ok()."""


def test_proxy():
    raw_b = json.loads('{"id":1,"name":"test","cd":7000,"count":3}')
    b = Cb(raw_b["id"], raw_b["name"], raw_b["cd"], raw_b["count"])
    register_proxy(Cb, b)

    raw_d = json.loads('{"id":3, "text":"hello, world"}')
    d = Cd(raw_d["id"], raw_d["text"])
    register_proxy(Cd, d)

    register_proxy(Mix, b)
    register_proxy(Mix, d)

    doc = json.loads('{"x":13,"b":1,"d":3,"mix":3}')
    pb = Proxy.from_json(Cb, json.dumps(doc["b"]))
    pd = Proxy.from_json(Cd, json.dumps(doc["d"]))
    pm = Proxy.from_json(Mix, json.dumps(doc["mix"]))

    assert doc["x"] == 13
    assert pb.get() == Cb(1, "test", 7000, 3)
    assert pd.get() == Cd(3, "hello, world")
    assert pm.get() is d


def test_lookup_unknown_kind_returns_none():
    class Unregistered:
        pass

    assert lookup_ptr(Unregistered, 1) is None
    assert Proxy.from_json(Unregistered, "1").get() is None


def test_lookup_missing_id_raises():
    class Kind:
        pass

    register_proxy(Kind, Cd(5, "five"))
    with pytest.raises(KeyError):
        lookup_ptr(Kind, 6)


def test_register_replaces_same_id():
    class Kind:
        pass

    register_proxy(Kind, Cd(1, "old"))
    register_proxy(Kind, Cd(1, "new"))
    assert lookup_ptr(Kind, 1) == Cd(1, "new")


def test_from_json_accepts_bytes():
    class Kind:
        pass

    item = Cd(42, "answer")
    register_proxy(Kind, item)
    assert Proxy.from_json(Kind, b"42").get() is item


@pytest.mark.parametrize("raw", ['"1"', "1.5", "true", "null", "{}", "not json", "4294967296"])
def test_from_json_rejects_non_int32(raw):
    class Kind:
        pass

    register_proxy(Kind, Cd(1, "one"))
    with pytest.raises(ValueError):
        Proxy.from_json(Kind, raw)