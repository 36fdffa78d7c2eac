"""The branching story, loaded from a JSON description of its scenes."""

from __future__ import annotations

import json
import sys
from typing import Any, Mapping, Optional

from .scene import Scene

DEFAULT_STORY_PATH = "data/story.json"
START_SCENE = "start"


class Story:
    """A graph of scenes keyed by id, with a current position starting at "start".

    Each scene in the data is ``{"description": str, "choices": [{"text": str,
    "next": str}, ...]}``.
    """

    def __init__(self, path: str = DEFAULT_STORY_PATH) -> None:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        self._load(data)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Story:
        """Build a story from an already parsed mapping of scenes."""
        story = cls.__new__(cls)
        story._load(data)
        return story

    def _load(self, data: Mapping[str, Any]) -> None:
        nodes = sorted(data.items())
        self.scenes: dict[str, Scene] = {
            scene_id: Scene(
                node["description"],
                [choice["text"] for choice in node.get("choices") or []],
            )
            for scene_id, node in nodes
        }
        for scene_id, node in nodes:
            scene = self.scenes[scene_id]
            for choice in node.get("choices") or []:
                next_id = choice["next"]
                target = self.scenes.get(next_id)
                if target is None:
                    print(
                        f"⚠️  Invalid next scene ID: {next_id} in scene {scene_id}",
                        file=sys.stderr,
                    )
                else:
                    scene.add_outcome(target)
        self.current_scene_id = START_SCENE

    @property
    def current_scene(self) -> Scene:
        """The scene the story is at; KeyError if that id has no scene."""
        return self.scenes[self.current_scene_id]

    def go_to_scene(self, scene_id: str) -> None:
        """Jump to ``scene_id``; unknown ids are ignored."""
        if scene_id in self.scenes:
            self.current_scene_id = scene_id

    def reset(self) -> None:
        """Return to the starting scene."""
        self.current_scene_id = START_SCENE

    def display_current_scene(self) -> None:
        """Print the current scene."""
        self.current_scene.show_scene()

    def get_next_scene(self, choice_index: int) -> Optional[Scene]:
        """Follow a choice from the current scene, or return None if it leads nowhere."""
        target = self.current_scene.get_outcome(choice_index)
        if target is None:
            return None
        for scene_id, scene in self.scenes.items():
            if scene is target:
                self.current_scene_id = scene_id
                return target
        return None