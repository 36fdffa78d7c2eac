import dataclasses

import pytest

from iguanadave.item import Item, ItemType


def test_item_fields_round_trip():
    item = Item("Space Snack", ItemType.HEALING, 25)
    assert item.name == "Space Snack"
    assert item.item_type is ItemType.HEALING
    assert item.effect_value == 25


def test_item_effect_value_defaults_to_zero():
    item = Item("Shiny Rock", ItemType.MISC)
    assert item.effect_value == 0


@pytest.mark.parametrize("kind", ["HEALING", "ENERGY", "WEAPON", "KEY", "MISC"])
def test_item_keeps_each_type(kind):
    item = Item("Thing", ItemType[kind], 3)
    assert item.item_type.name == kind
    assert item.item_type is ItemType[kind]


def test_item_is_immutable():
    item = Item("Rusty Key", ItemType.KEY)
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.name = "other"  # type: ignore[misc]
    assert item.name == "Rusty Key"
    assert item == Item("Rusty Key", ItemType.KEY)


def test_items_compare_by_value():
    assert Item("Cell", ItemType.ENERGY, 10) == Item("Cell", ItemType.ENERGY, 10)
    assert Item("Cell", ItemType.ENERGY, 10) != Item("Cell", ItemType.ENERGY, 11)