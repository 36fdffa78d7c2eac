import dataclasses

import pytest

from iguanadave.battle_action import ActionType, BattleAction


def test_choice_defaults_to_zero():
    action = BattleAction(ActionType.ATTACK)
    assert action.choice == 0
    assert action.action_type is ActionType.ATTACK


def test_fields_round_trip():
    action = BattleAction(ActionType.USE_ITEM, 2)
    assert action.action_type is ActionType.USE_ITEM
    assert action.choice == 2


def test_actions_of_each_of_the_four_moves():
    actions = [BattleAction(t) for t in ActionType]
    assert [a.action_type.name for a in actions] == [
        "ATTACK",
        "USE_ITEM",
        "DEFEND",
        "RUN_AWAY",
    ]


def test_action_is_immutable():
    action = BattleAction(ActionType.DEFEND)
    with pytest.raises(dataclasses.FrozenInstanceError):
        action.choice = 1  # type: ignore[misc]
    assert action.choice == 0
    assert action == BattleAction(ActionType.DEFEND, 0)