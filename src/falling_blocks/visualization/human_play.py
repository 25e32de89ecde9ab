from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

import pygame

from falling_blocks.game import Action, FallingBlockGame, GameConfig, GameStatus
from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_DOWN: Action.ROTATE_CCW,
    pygame.K_SPACE: Action.TICK,
}

PAUSE_KEYS = (pygame.K_p, pygame.K_ESCAPE)
RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def handle_key(game: FallingBlockGame, key: int) -> None:
    """Route one key press to the engine."""
    status = game.status
    if status is GameStatus.GAME_OVER:
        if key in RESTART_KEYS:
            game.restart()
        return
    if key in PAUSE_KEYS:
        game.toggle_pause()
        return
    action = KEY_TO_ACTION.get(key)
    if action is not None and status is GameStatus.RUNNING:
        game.step(action)


def run(seed: Optional[int] = None, gravity_ms: int = 500, cell_size: int = 40) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlockGame(GameConfig(gravity_interval_ms=gravity_ms, random_seed=seed))
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Falling Blocks")

        last_fall = pygame.time.get_ticks()

        running = True
        while running:
            # Input handling
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    handle_key(game, event.key)

            # Gravity; the timer is re-armed from the engine's interval after every tick
            now = pygame.time.get_ticks()
            if game.status is not GameStatus.RUNNING:
                last_fall = now
            elif now - last_fall >= game.gravity_interval_ms:
                game.tick()
                last_fall = now

            renderer.draw(screen, game)
            clock.tick(60)
        logger.info("Session ended with %d lines cleared", game.lines_cleared)
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the falling-block game")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--gravity-ms", type=int, default=500)
    p.add_argument("--cell-size", type=int, default=40)
    p.add_argument("--log-level", default="WARNING")
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    run(seed=args.seed, gravity_ms=args.gravity_ms, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
