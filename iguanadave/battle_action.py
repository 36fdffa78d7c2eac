"""Actions a player may take during a battle turn."""

from dataclasses import dataclass
from enum import Enum, auto


class ActionType(Enum):
    """The kind of action chosen in battle."""

    ATTACK = auto()
    USE_ITEM = auto()
    DEFEND = auto()
    RUN_AWAY = auto()


@dataclass(frozen=True)
class BattleAction:
    """A chosen action, with an optional sub-choice such as an item index."""

    action_type: ActionType
    choice: int = 0