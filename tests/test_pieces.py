import random

import numpy as np
import pytest

from falling_blocks.game import (
    BASE_SHAPES,
    EmptyCatalogError,
    FallingBlocksError,
    FallingBlocksGame,
    PieceCatalog,
    TetrominoType,
    all_shapes,
    random_shape,
)


def test_default_catalog_has_seven_tetrominoes():
    shapes = all_shapes()
    assert len(shapes) == 7
    for shape in shapes:
        assert int(shape.sum()) == 4
        # Every row of a canonical shape has at least one occupied cell
        assert all(row.any() for row in shape)


def test_all_shapes_returns_copies():
    shapes = all_shapes()
    shapes[0][:] = 0
    assert all(int(s.sum()) == 4 for s in all_shapes())


def test_random_shape_comes_from_catalog():
    rng = random.Random(3)
    for _ in range(20):
        shape = random_shape(rng)
        assert any(np.array_equal(shape, s) for s in all_shapes())


def test_seeded_catalogs_agree():
    a = PieceCatalog(rng=random.Random(11))
    b = PieceCatalog(rng=random.Random(11))
    assert [a.random_piece().kind for _ in range(15)] == [b.random_piece().kind for _ in range(15)]


def test_random_piece_value_matches_kind():
    catalog = PieceCatalog({TetrominoType.T: BASE_SHAPES[TetrominoType.T]})
    piece = catalog.random_piece()
    assert piece.kind is TetrominoType.T
    assert piece.value == 3
    assert np.array_equal(piece.shape, BASE_SHAPES[TetrominoType.T])


def test_empty_catalog_is_fatal():
    with pytest.raises(EmptyCatalogError):
        PieceCatalog({})
    assert issubclass(EmptyCatalogError, FallingBlocksError)


def test_engine_refuses_to_start_without_shapes(monkeypatch):
    catalog = PieceCatalog()
    monkeypatch.setattr(catalog, "_shapes", {})
    with pytest.raises(EmptyCatalogError):
        FallingBlocksGame(catalog=catalog)
