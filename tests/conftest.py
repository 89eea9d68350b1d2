from __future__ import annotations

import random

import pytest

from falling_blocks.game import (
    BASE_SHAPES,
    FallingBlocksGame,
    GameConfig,
    PieceCatalog,
    ScoringRules,
    TetrominoType,
)


def single_kind_catalog(kind: TetrominoType, seed: int = 0) -> PieceCatalog:
    return PieceCatalog({kind: BASE_SHAPES[kind]}, rng=random.Random(seed))


def make_game(kind: TetrominoType | None = None, width: int = 10, height: int = 20,
              rules: ScoringRules | None = None, seed: int = 0) -> FallingBlocksGame:
    catalog = single_kind_catalog(kind, seed) if kind is not None else None
    config = GameConfig(width=width, height=height, random_seed=seed)
    return FallingBlocksGame(config, rules, catalog)


@pytest.fixture
def game() -> FallingBlocksGame:
    return make_game(seed=7)


@pytest.fixture
def o_game() -> FallingBlocksGame:
    return make_game(TetrominoType.O)


@pytest.fixture
def i_game() -> FallingBlocksGame:
    return make_game(TetrominoType.I)
