"""Inventory items and their kinds."""

from dataclasses import dataclass
from enum import Enum, auto


class ItemType(Enum):
    """What an item does when used."""

    HEALING = auto()
    ENERGY = auto()
    WEAPON = auto()
    KEY = auto()
    MISC = auto()


@dataclass(frozen=True)
class Item:
    """An item; ``effect_value`` is how much it heals, restores or hits for."""

    name: str
    item_type: ItemType
    effect_value: int = 0