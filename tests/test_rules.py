import pytest

from falling_blocks.game import ScoringRules


@pytest.mark.parametrize("score, level", [(0, 1), (99, 1), (100, 2), (250, 3), (1000, 11)])
def test_level_for_score(score, level):
    assert ScoringRules().level_for_score(score) == level


def test_flat_points_per_row():
    rules = ScoringRules()
    assert rules.score_for_rows(0) == 0
    assert rules.score_for_rows(1) == 10
    assert rules.score_for_rows(4) == 40


def test_tick_period_shrinks_with_level():
    rules = ScoringRules()
    assert rules.tick_period_ms(1) == 1000
    assert rules.tick_period_ms(2) == 500
    assert rules.tick_period_ms(40) == 25
    assert rules.tick_period_ms(1000) == 1


def test_tick_period_floor_is_opt_in():
    rules = ScoringRules(min_period_ms=50)
    assert rules.tick_period_ms(2) == 500
    assert rules.tick_period_ms(100) == 50
