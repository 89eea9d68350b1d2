from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Mapping, Optional

import numpy as np

from .errors import EmptyCatalogError


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    TetrominoType.T: np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8),
    TetrominoType.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    TetrominoType.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
    TetrominoType.J: np.array([[1, 0, 0], [1, 1, 1]], dtype=np.int8),
    TetrominoType.L: np.array([[0, 0, 1], [1, 1, 1]], dtype=np.int8),
}


@dataclass(frozen=True)
class Piece:
    """A piece kind together with its current shape matrix.

    Pieces are values: rotation produces a new ``Piece`` instead of
    mutating the matrix held here.
    """

    kind: TetrominoType
    shape: Shape = field(compare=False)

    @property
    def value(self) -> int:
        return int(self.kind)

    def with_shape(self, shape: Shape) -> "Piece":
        return Piece(self.kind, shape)


class PieceCatalog:
    """Fixed set of piece shapes with uniform random selection.

    An empty catalog cannot produce a piece, so it is rejected up front
    with ``EmptyCatalogError`` instead of failing on the first spawn.
    """

    def __init__(self, shapes: Optional[Mapping[TetrominoType, Shape]] = None,
                 rng: Optional[random.Random] = None) -> None:
        source = BASE_SHAPES if shapes is None else shapes
        if not source:
            raise EmptyCatalogError("piece catalog has no shapes")
        self._shapes: Dict[TetrominoType, Shape] = {
            TetrominoType(kind): np.array(shape, dtype=np.int8) for kind, shape in source.items()
        }
        self.rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._shapes)

    def kinds(self) -> List[TetrominoType]:
        return list(self._shapes)

    def shape_of(self, kind: TetrominoType) -> Shape:
        return self._shapes[kind].copy()

    def all_shapes(self) -> List[Shape]:
        return [shape.copy() for shape in self._shapes.values()]

    def random_piece(self) -> Piece:
        if not self._shapes:
            raise EmptyCatalogError("piece catalog has no shapes")
        kind = self.rng.choice(self.kinds())
        return Piece(kind, self.shape_of(kind))

    def random_shape(self) -> Shape:
        return self.random_piece().shape


_DEFAULT_CATALOG = PieceCatalog()


def all_shapes() -> List[Shape]:
    return _DEFAULT_CATALOG.all_shapes()


def random_shape(rng: Optional[random.Random] = None) -> Shape:
    if rng is None:
        return _DEFAULT_CATALOG.random_shape()
    kind = rng.choice(_DEFAULT_CATALOG.kinds())
    return _DEFAULT_CATALOG.shape_of(kind)
