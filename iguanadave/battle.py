"""Turn-based fights between the player and an enemy."""

from __future__ import annotations

import copy
import random
import sys
from typing import Callable, Optional

from .battle_action import ActionType, BattleAction
from .enemy import Enemy
from .player import Player

_ACTIONS = {
    "1": ActionType.ATTACK,
    "2": ActionType.USE_ITEM,
    "3": ActionType.DEFEND,
    "4": ActionType.RUN_AWAY,
}


def _read_line() -> str:
    return sys.stdin.readline().rstrip("\r\n")


class Battle:
    """A fight that runs until one side drops to zero health.

    The enemy is copied, so the one passed in is left untouched. Escaping
    successfully ends the program, raising SystemExit.
    """

    def __init__(
        self,
        player: Player,
        enemy: Enemy,
        read_line: Optional[Callable[[], str]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.player = player
        self.enemy = copy.copy(enemy)
        self._read_line = read_line or _read_line
        self._rng = rng or random.Random()

    def start(self) -> None:
        """Run the battle to its end."""
        print(f"⚔️ A wild {self.enemy.name} appears!")
        while self.player.health > 0 and self.enemy.health > 0:
            self._display_battle_status()
            self._player_turn()

            if self.enemy.health <= 0:
                print(f"🎉 You defeated {self.enemy.name}!")
                break

            self._enemy_turn()

            if self.player.health <= 0:
                print(f"💀 You were defeated by {self.enemy.name}.")
                break

    def attempt_escape(self) -> bool:
        """Try to run away; succeeds half of the time."""
        return self._rng.randrange(100) < 50

    def _display_battle_status(self) -> None:
        print("\n--- BATTLE STATUS ---")
        self.player.show_status()
        print(f"{self.enemy.name}'s Health: {self.enemy.health}")

    def _player_turn(self) -> None:
        print("\nYour turn! Choose an action:")
        print("1. Attack")
        print("2. Use Item (coming soon)")
        print("3. Defend (coming soon)")
        print("4. Run Away")
        print("➡️ ", end="", flush=True)

        action_type = _ACTIONS.get(self._read_line())
        if action_type is None:
            print("❌ Not implemented yet or invalid choice!")
            return
        self._handle_action(BattleAction(action_type))

    def _handle_action(self, action: BattleAction) -> None:
        if action.action_type is ActionType.ATTACK:
            damage = self.player.weapon.damage
            self.enemy.take_damage(damage)
            print(f"💥 You attacked {self.enemy.name} for {damage} damage!")
        elif action.action_type is ActionType.RUN_AWAY:
            if self.attempt_escape():
                print("🏃 You escaped successfully!")
                raise SystemExit(0)
            print("🚫 Escape failed!")
        else:
            print("❌ Not implemented yet or invalid choice!")

    def _enemy_turn(self) -> None:
        damage = self.enemy.damage
        self.player.take_damage(damage)
        print(f"👾 {self.enemy.name} attacks you for {damage} damage!")