import pytest

pytest.importorskip("pygame")

from falling_blocks.game import Action
from falling_blocks.visualization.human_play import action_allowed, hints_for


def test_new_game_only_when_paused_or_over(o_game):
    assert not action_allowed(o_game, Action.RESET)
    assert action_allowed(o_game, Action.TOGGLE_PAUSE)
    assert "N: new game" not in hints_for(o_game)

    o_game.toggle_pause()
    assert action_allowed(o_game, Action.RESET)
    assert "P: resume" in hints_for(o_game)


def test_pause_unavailable_after_game_over(o_game):
    o_game.grid.grid[0, 4] = 1
    o_game.spawn()
    assert not action_allowed(o_game, Action.TOGGLE_PAUSE)
    assert action_allowed(o_game, Action.RESET)
    assert action_allowed(o_game, Action.LEFT)
