from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional

import pygame

from blocktris.game import Action, BlockTrisGame, GameConfig
from blocktris.scores import ScoreLedger
from blocktris.scores.ledger import DEFAULT_SCORES_FILE
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
}


class PygameClock:
    def now_ms(self) -> int:
        return pygame.time.get_ticks()


def report_game(game: BlockTrisGame, ledger: ScoreLedger) -> None:
    result = ledger.record(game.score, game.nb_lines)
    if not result.saved:
        print(f"Warning: could not save scores to {ledger.path}")

    print("Game over...")
    print(f"Score: {game.score}{' [NEW HIGHSCORE] ' if result.new_high_score else ''}")
    print(f"Number of lines: {game.nb_lines}{' [NEW HIGHSCORE] ' if result.new_high_lines else ''}")
    print(f"Current level: {game.current_level}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play BlockTris")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--scores-file", type=str, default=DEFAULT_SCORES_FILE)
    p.add_argument("--cell-size", type=int, default=40)
    p.add_argument("--fps", type=int, default=60)
    return p


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = BlockTrisGame(GameConfig(random_seed=args.seed), clock=PygameClock())
        renderer = Renderer(cell_size=args.cell_size)
        ledger = ScoreLedger(args.scores_file)

        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("BlockTris")

        running = True
        while running:
            # Gravity
            game.tick()

            if game.current_piece is None and not game.spawn_next():
                break

            # Input handling
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            game.step(action)
                if not running or game.game_over:
                    break

            if game.game_over:
                break

            # Render
            renderer.draw(screen, game)
            clock.tick(args.fps)

        report_game(game, ledger)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(run())
