"""Game ability system: abilities, running effects and buffs for a game unit."""

__version__ = "0.1.0"