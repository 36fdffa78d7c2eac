"""The player character: stats, skills, weapon and inventory."""

from __future__ import annotations

from dataclasses import dataclass, field

from .item import Item, ItemType
from .weapon import Weapon


def _starting_weapon() -> Weapon:
    return Weapon("Banana Blaster", 15)


@dataclass
class Player:
    """The hero of the story, starting with full health, energy and coolness."""

    name: str
    health: int = 100
    energy: int = 100
    coolness: int = 1000
    weapon: Weapon = field(default_factory=_starting_weapon)
    skills: list[str] = field(default_factory=list)
    inventory: list[Item] = field(default_factory=list)

    def show_status(self) -> str:
        """Print the player's stats and weapon, and return the printed text."""
        text = "\n".join(
            [
                f"{self.name}'s Status:",
                f" - Health: {self.health}",
                f" - Energy: {self.energy}",
                f" - Coolness: {self.coolness}",
                f" - Weapon: {self.weapon.name} (Damage: {self.weapon.damage})",
            ]
        )
        print(text)
        return text

    def show_skills(self) -> str:
        """Print the list of learned skills, and return the printed text."""
        text = "Skills: " + "".join(f"{skill}, " for skill in self.skills)
        print(text)
        return text

    def show_inventory(self) -> None:
        """Print the numbered inventory."""
        print("\n📦 Inventory:")
        if not self.inventory:
            print(" (empty)")
            return
        for number, item in enumerate(self.inventory, start=1):
            print(f"{number}. {item.name}")

    def add_skill(self, skill: str) -> None:
        """Learn a new skill."""
        self.skills.append(skill)

    def take_damage(self, amount: int) -> None:
        """Reduce health by ``amount``, never going below zero."""
        self.health = max(self.health - amount, 0)

    def add_item(self, item: Item) -> None:
        """Put an item into the inventory."""
        self.inventory.append(item)
        print(f"🎒 You picked up: {item.name}")

    def use_item(self, index: int) -> None:
        """Use the item at ``index``; consumables are removed afterwards.

        Raises IndexError if there is no item at that position.
        """
        if not 0 <= index < len(self.inventory):
            raise IndexError("Invalid item index.")

        item = self.inventory[index]
        kind = item.item_type
        if kind is ItemType.HEALING:
            self.health += item.effect_value
            print(f"❤️ Restored {item.effect_value} health!")
        elif kind is ItemType.ENERGY:
            self.energy += item.effect_value
            print(f"⚡ Restored {item.effect_value} energy!")
        elif kind is ItemType.WEAPON:
            self.weapon = Weapon(item.name, item.effect_value)
            print(f"🗡️ Equipped new weapon: {self.weapon.name}!")
        elif kind is ItemType.KEY:
            print(f"🔑 You used a key item: {item.name}")
        else:
            print(f"📦 You looked at: {item.name}. It’s probably junk... or is it?")

        if kind not in (ItemType.KEY, ItemType.MISC):
            del self.inventory[index]