import pytest

from iguanadave.game import Game
from iguanadave.story import Story

DATA = {
    "start": {
        "description": "Start",
        "choices": [{"text": "Go", "next": "end"}, {"text": "Stay", "next": "start"}],
    },
    "end": {"description": "The End", "choices": []},
}


def keys(text):
    chars = iter(text)
    return lambda: next(chars, "")


def make_game(text, lines=None):
    lines_read = [] if lines is None else lines

    def read_line():
        lines_read.append(True)
        return "\n"

    return Game(Story.from_mapping(DATA), read_char=keys(text), read_line=read_line)


def test_choice_is_zero_based():
    game = make_game("2")
    assert game.get_choice_from_player(2) == 1


def test_invalid_keys_are_retried(capsys):
    game = make_game("x91")
    assert game.get_choice_from_player(2) == 0
    out = capsys.readouterr().out
    assert out.count("❌ Invalid input. Please enter a number between 1 and 2.") == 2


@pytest.mark.parametrize("key", ["q", "Q"])
def test_quit_key_exits(key, capsys):
    game = make_game(key)
    with pytest.raises(SystemExit) as info:
        game.get_choice_from_player(2)
    assert info.value.code == 0
    assert "👋 Goodbye!" in capsys.readouterr().out


def test_end_of_input_raises():
    with pytest.raises(EOFError):
        make_game("").get_choice_from_player(2)


def test_play_until_ending(capsys):
    lines = []
    game = make_game("21", lines)
    game.play()
    out = capsys.readouterr().out
    assert game.story.current_scene_id == "end"
    assert "🎉 The story has ended. Thanks for playing!" in out
    assert out.count("Start\n") == 2
    assert lines == [True]


def test_prompt_shows_range(capsys):
    make_game("1").get_choice_from_player(3)
    assert "Enter your choice (1-3): " in capsys.readouterr().out