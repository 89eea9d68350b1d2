from __future__ import annotations

import argparse
import logging
import os
from typing import Dict, List, Optional

import pygame

from falling_blocks.game import Action, FallingBlocksGame, GameConfig, GravityClock
from falling_blocks.storage import HighScoreTable
from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_p: Action.TOGGLE_PAUSE,
    pygame.K_n: Action.RESET,
}

DEFAULT_SCORES_PATH = os.path.join(os.path.expanduser("~"), ".falling_blocks", "highscores.json")


def action_allowed(game: FallingBlocksGame, action: Action) -> bool:
    """Button gating of the play screen.

    Pause is unavailable once the game is over and a new game can only be
    started from a finished or paused game.
    """
    if action == Action.TOGGLE_PAUSE:
        return not game.game_over
    if action == Action.RESET:
        return game.game_over or game.paused
    return True


def hints_for(game: FallingBlocksGame) -> List[str]:
    hints = ["Arrows: move / rotate"]
    if action_allowed(game, Action.TOGGLE_PAUSE):
        hints.append("P: resume" if game.paused else "P: pause")
    if action_allowed(game, Action.RESET):
        hints.append("N: new game")
    hints.append("Esc: quit")
    return hints


def run(config: Optional[GameConfig] = None, scores_path: Optional[str] = DEFAULT_SCORES_PATH,
        cell_size: int = 28) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlocksGame(config)
        gravity = GravityClock(game)
        high_scores = HighScoreTable(scores_path)
        game.add_game_over_listener(high_scores.add)
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game.config.width, game.config.height))
        pygame.display.set_caption("Falling Blocks")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    action = KEY_TO_ACTION.get(event.key)
                    if action is None or not action_allowed(game, action):
                        continue
                    game.step(action)
                    if action == Action.RESET:
                        gravity.reset()

            gravity.advance(clock.tick(60))
            renderer.draw(screen, game.snapshot(), high_scores.scores, hints_for(game))
    finally:
        pygame.quit()


def main() -> None:
    p = argparse.ArgumentParser(description="Play Falling Blocks")
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--scores", type=str, default=DEFAULT_SCORES_PATH,
                   help="JSON file holding the high score table")
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--log-level", default="WARNING")
    args = p.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config = GameConfig(width=args.width, height=args.height, random_seed=args.seed)
    logger.info("Starting with %s", config)
    run(config, args.scores, args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
