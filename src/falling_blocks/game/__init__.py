"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- PieceCatalog: Fixed set of piece shapes with random selection
- GameGrid: Board representation and row clearing
- collides: Boundary and overlap test shared by every move
- rotate_clockwise / translate: Candidate piece transforms
- ScoringRules: Score, level and gravity period policy
- FallingBlocksGame: State machine driving spawn, gravity and landing
- GravityClock: Converts elapsed time into gravity ticks
"""

from .errors import FallingBlocksError, EmptyCatalogError
from .pieces import Piece, PieceCatalog, TetrominoType, BASE_SHAPES, all_shapes, random_shape
from .grid import GameGrid
from .transform import Position, rotate_clockwise, translate
from .collision import collides, occupied_cells
from .rules import ScoringRules
from .state import GameState, Snapshot
from .core import FallingBlocksGame, GameConfig, Action
from .clock import GravityClock

__all__ = [
    "FallingBlocksError",
    "EmptyCatalogError",
    "Piece",
    "PieceCatalog",
    "TetrominoType",
    "BASE_SHAPES",
    "all_shapes",
    "random_shape",
    "GameGrid",
    "Position",
    "rotate_clockwise",
    "translate",
    "collides",
    "occupied_cells",
    "ScoringRules",
    "GameState",
    "Snapshot",
    "FallingBlocksGame",
    "GameConfig",
    "Action",
    "GravityClock",
]
