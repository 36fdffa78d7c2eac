"""The main story loop: show a scene, read a choice, move on."""

from __future__ import annotations

import sys
from typing import Callable, Optional

from .input_helper import get_char_from_user
from .story import Story


def _read_line() -> str:
    return sys.stdin.readline()


class Game:
    """Plays a story from its current scene until an ending is reached."""

    def __init__(
        self,
        story: Story,
        read_char: Optional[Callable[[], str]] = None,
        read_line: Optional[Callable[[], str]] = None,
    ) -> None:
        self.story = story
        self._read_char = read_char or get_char_from_user
        self._read_line = read_line or _read_line

    def play(self) -> None:
        """Run the story until a scene without choices is shown."""
        while True:
            self.story.display_current_scene()
            num_choices = self.story.current_scene.num_choices

            if num_choices == 0:
                print("🎉 The story has ended. Thanks for playing!")
                print("Press enter to exit...")
                self._read_line()
                break

            choice = self.get_choice_from_player(num_choices)
            if self.story.get_next_scene(choice) is None:
                print("❌ Invalid choice. Try again.")

    def get_choice_from_player(self, num_choices: int) -> int:
        """Read a single key press and return the zero-based choice.

        'q' or 'Q' quits (SystemExit); EOFError is raised when input runs out.
        """
        while True:
            print(f"➡️ Enter your choice (1-{num_choices}): ", end="", flush=True)
            key = self._read_char()

            if key == "":
                raise EOFError("no more input")
            if key in ("q", "Q"):
                print("👋 Goodbye!")
                raise SystemExit(0)
            if "1" <= key <= chr(ord("0") + num_choices):
                return ord(key) - ord("1")

            print(f"❌ Invalid input. Please enter a number between 1 and {num_choices}.")