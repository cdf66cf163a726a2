"""The configurations of the demonstration, registered by id."""

from __future__ import annotations

from ..ds.jsonproxy import register_proxy
from .chainlike import ChainLikeRunningConfig, SimpleAbilityConfig
from .game import ABILITY_KIND, MODIFIER_KIND, RUNNING_KIND, SELECTOR_KIND
from .modifier import ModifierConfig
from .selector import SelectorConfig

_SELECTORS = (
    '{"id":1,"range":100,"count":1,"ally":false}',
    '{"id":2,"range":100,"count":1,"ally":true}',
    '{"id":3,"self":true}',
)

_DIRECT_MODIFIERS = (
    '{"id":1,"type":1,"value":3}',  # damage 3
    '{"id":2,"type":2,"value":2}',  # heal 2
)

_RUNNINGS = (
    '{"id":1,"gap":300,"duration":901,"selector":1,"modifier":1,"repeat":true}',
    '{"id":2,"gap":250,"duration":1001,"selector":2,"modifier":2,"repeat":true}',
)

_RUNNING_MODIFIERS = (
    '{"id":3,"type":3,"running":1}',  # damage over time
    '{"id":4,"type":3,"running":2}',  # heal over time
)

_ABILITIES = (
    '{"id":1,"cd":2000,"selector":3,"modifier":3}',
    '{"id":2,"cd":2000,"selector":3,"modifier":4,"repeat":true}',
)


def register_all() -> None:
    """Parse and register every configuration, dependencies first."""
    for raw in _SELECTORS:
        register_proxy(SELECTOR_KIND, SelectorConfig.from_json(raw))
    for raw in _DIRECT_MODIFIERS:
        register_proxy(MODIFIER_KIND, ModifierConfig.from_json(raw))
    for raw in _RUNNINGS:
        register_proxy(RUNNING_KIND, ChainLikeRunningConfig.from_json(raw))
    for raw in _RUNNING_MODIFIERS:
        register_proxy(MODIFIER_KIND, ModifierConfig.from_json(raw))
    for raw in _ABILITIES:
        register_proxy(ABILITY_KIND, SimpleAbilityConfig.from_json(raw))