"""Title screen and main menu of the game."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .game import Game
from .input_helper import get_char_from_user
from .story import DEFAULT_STORY_PATH, Story

_TITLE_ART = r"""
   _.-~~-.__
 _-~ _-=-_   ''-,,
('___ ~~~   0     ~''-_,,,,,,,,,,,,,,,,
 \~~~~~~--'                            '''''''--,,,,
  ~`-,_      ()                                     '''',,,
       '-,_      \                           /             '', _~/|
  ,.       \||/~--\ \_________              / /______...---.  ;  /
  \ ~~~~~~~~~~~~~  \ )~~------~`~~~~~~~~~~~( /----         /,'/ /
   |   -           / /                      \ \           /;/  /
  / -             / /                        / \         /;/  / -.
 /         __.---/  \__                     /, /|       |:|    \  \
/_.~`-----~      \.  \ ~~~~~~~~~~~~~---~`---\\\\ \---__ \:\    /  /
                  `\\\`                     ' \\' '    --\'\, /  /
                                               '\,        ~-_'''"
                    🦎  Space Iguana Dave  🦎
    """

_MENU_LINES = (
    "1. Play the Story",
    "2. Test Fight (Coming Soon)",
    "3. Quit",
)


def show_title_screen() -> str:
    """Print the title art and the main menu, and return the printed text."""
    text = "\n".join([_TITLE_ART, *_MENU_LINES])
    print(text)
    return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the main menu until the player quits."""
    parser = argparse.ArgumentParser(prog="iguanadave", description="Space Iguana Dave")
    parser.add_argument("--story", default=DEFAULT_STORY_PATH, help="path of the story JSON file")
    args = parser.parse_args(argv)

    while True:
        show_title_screen()
        print("\n➡️ Select an option: ", end="", flush=True)
        key = get_char_from_user()

        if key == "1":
            try:
                story = Story(args.story)
            except OSError:
                print("❌ Failed to open story.json", file=sys.stderr)
                continue
            try:
                Game(story).play()
            except EOFError:
                return 0
        elif key == "2":
            print("\n🛠️  Fight system is still under construction!\n")
        elif key in ("3", "q", "Q", ""):
            print("👋 Thanks for playing Space Iguana Dave!")
            return 0
        else:
            print("❌ Invalid input. Please try again.\n")


if __name__ == "__main__":
    sys.exit(main())