"""Weapons that the player can wield."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Weapon:
    """A named weapon dealing a fixed amount of damage."""

    name: str
    damage: int