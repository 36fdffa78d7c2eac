# iguanadave

Space Iguana Dave is a small text adventure for the terminal. You guide Dave,
an iguana with a Banana Blaster and a great deal of coolness, through a
branching story loaded from a JSON file.

## Installing

```
pip install .
```

## Playing

Run the game from a directory that contains `data/story.json`:

```
iguanadave
```

or point it at another story file:

```
iguanadave --story path/to/story.json
```

The title screen offers three options:

1. Play the Story
2. Test Fight (Coming Soon)
3. Quit

On a terminal, keys are read one at a time without pressing Enter; `q` or `Q`
also quits from the title screen. While the story is running, press the number
of a choice to follow it, or `q` to quit the program. When you reach an ending
scene, press Enter to go back to the title screen.

If the story file cannot be opened, an error is printed and the title screen is
shown again.

## The story file

The story file maps scene ids to scenes. Every scene has a description and a
list of choices, and every choice names the scene it leads to. The story always
begins at the scene with the id `start`, and a scene with no choices is an
ending.

```json
{
  "start": {
    "description": "Dave wakes up aboard his ship.",
    "choices": [
      {"text": "Look out the window", "next": "window"},
      {"text": "Go back to sleep", "next": "sleep"}
    ]
  },
  "window": {"description": "Space seagulls! Everywhere!", "choices": []},
  "sleep": {"description": "Dave dreams of bananas. The end.", "choices": []}
}
```

If a choice points to a scene id that is not in the file, a warning is printed
to standard error and that choice leads nowhere; picking it prints
"Invalid choice. Try again."

## Using the pieces

The game is built from plain classes that can also be used on their own:

```python
from iguanadave.story import Story
from iguanadave.game import Game

story = Story.from_mapping({
    "start": {"description": "Hello", "choices": [{"text": "Bye", "next": "end"}]},
    "end": {"description": "The end.", "choices": []},
})
Game(story).play()
```

`Game` takes optional `read_char` and `read_line` callables, so input can come
from somewhere other than the keyboard.

- `iguanadave.story.Story` loads scenes from a JSON file (`Story(path)`) or a
  mapping (`Story.from_mapping`), and moves between them with
  `get_next_scene`, `go_to_scene` and `reset`.
- `iguanadave.scene.Scene` holds a description, its choices and the scenes
  they lead to.
- `iguanadave.player.Player` holds health, energy, coolness, a weapon, skills
  and an inventory. `use_item` heals, restores energy or equips a weapon and
  then removes the item; key and misc items stay in the inventory. An index with
  no item raises `IndexError`.
- `iguanadave.enemy.Enemy`, `iguanadave.weapon.Weapon` and
  `iguanadave.item.Item` (with `ItemType`) describe opponents, weapons and
  inventory items.
- `iguanadave.battle.Battle` runs a turn-based fight between a player and a copy
  of an enemy until one of them reaches zero health. It takes optional
  `read_line` and `rng` arguments.

## What it does not do

- The "Test Fight" option on the title screen only prints that the fight system
  is under construction; fights are not part of the story.
- In a `Battle`, only attacking and running away work. "Use Item" and "Defend"
  print that they are not implemented yet. A successful escape ends the whole
  program.
- There is no saving or loading of progress.

## Running the tests

```
pip install .[test]
pytest
```