"""Enemies the player fights."""

from dataclasses import dataclass


@dataclass
class Enemy:
    """An opponent with health and a fixed attack damage."""

    name: str
    health: int
    damage: int

    def take_damage(self, amount: int) -> None:
        """Reduce health by ``amount``, never going below zero."""
        self.health = max(self.health - amount, 0)