"""Story scenes and the links between them."""

from __future__ import annotations

from typing import Optional, Sequence


class Scene:
    """A piece of the story: a description, choices, and the scenes they lead to."""

    def __init__(self, description: str, choices: Sequence[str]) -> None:
        self.description = description
        self.choices: list[str] = list(choices)
        self.outcomes: list[Scene] = []

    @property
    def num_choices(self) -> int:
        return len(self.choices)

    def show_scene(self) -> None:
        """Print the description followed by the numbered choices."""
        print(self.description)
        for number, choice in enumerate(self.choices, start=1):
            print(f"{number}. {choice}")

    def make_choice(self, choice_index: int) -> None:
        """Show the scene that the given choice leads to, if there is one."""
        outcome = self.get_outcome(choice_index)
        if outcome is not None:
            outcome.show_scene()

    def add_outcome(self, outcome: Scene) -> None:
        """Link the next choice to ``outcome``."""
        self.outcomes.append(outcome)

    def get_outcome(self, index: int) -> Optional[Scene]:
        """Return the scene linked at ``index``, or None if there is none."""
        if 0 <= index < len(self.outcomes):
            return self.outcomes[index]
        return None

    def __repr__(self) -> str:
        return f"Scene({self.description!r}, {self.choices!r})"