"""
Human Play Mode
================

Play Snake interactively in a pygame window.

Controls:
    - Arrow keys / WASD: Turn (the first turn starts the game)
    - Space: Pause / resume
    - R: Restart game
    - ESC: Quit

Usage:
    python -m tools.play_human [--seed SEED] [--cell PIXELS] [--verbose]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from gridsnake.snake_core.config_loader import load_config, GameConfig
from gridsnake.snake_core.game import CoreGame
from gridsnake.snake_core.geometry import Direction
from gridsnake.snake_core.state_snapshot import Cell, GameSnapshot


if PYGAME_AVAILABLE:
    KEY_DIRECTIONS = {
        pygame.K_UP: Direction.UP,
        pygame.K_w: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_s: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_a: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_d: Direction.RIGHT,
    }


class SnakeRenderer:
    """Draws a GameSnapshot as a grid of squares with a score bar on top."""

    def __init__(self, config: GameConfig, cell_px: int):
        self._grid_size = config.grid_size
        self._cell_px = cell_px
        self._top_ui_height = 48

        self._bg = (24, 26, 32)
        self._grid_line = (36, 40, 48)
        self._colors = {
            Cell.FOOD: (230, 70, 70),
            Cell.SNAKE: (80, 200, 120),
            Cell.HEAD: (150, 240, 170),
        }
        self._text = (230, 230, 230)

        pygame.font.init()
        self._font_large = pygame.font.Font(None, 32)
        self._font_small = pygame.font.Font(None, 22)

    @property
    def window_size(self):
        side = self._grid_size * self._cell_px
        return (side, side + self._top_ui_height)

    def render(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        screen.fill(self._bg)
        self._draw_cells(screen, snapshot)
        self._draw_top_bar(screen, snapshot)

    def _draw_cells(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        px = self._cell_px
        top = self._top_ui_height
        for y, row in enumerate(snapshot.board):
            for x, value in enumerate(row):
                rect = pygame.Rect(x * px, top + y * px, px, px)
                color = self._colors.get(Cell(int(value)))
                if color is None:
                    pygame.draw.rect(screen, self._grid_line, rect, 1)
                else:
                    pygame.draw.rect(screen, color, rect.inflate(-2, -2))

    def _draw_top_bar(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        score = self._font_large.render(f"Score: {snapshot.score}", True, self._text)
        screen.blit(score, (10, 12))
        if snapshot.status:
            status = self._font_small.render(snapshot.status, True, self._text)
            screen.blit(status, (score.get_width() + 24, 18))


class HumanPlayer:
    """
    Human-playable Snake. The pygame clock drives the frame rate; ticks are
    fed to the engine at the configured fixed period from an accumulator.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        cell_px: int = 28,
        target_fps: int = 60
    ):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required. Install: pip install pygame")

        if config is None:
            config = load_config()

        self._config = config
        self._seed = seed
        self._target_fps = target_fps
        self._tick_ms = config.timing.tick_ms

        self._game = CoreGame(config=config, seed=seed)

        pygame.init()
        self._renderer = SnakeRenderer(config, cell_px)
        self._screen = pygame.display.set_mode(self._renderer.window_size)
        pygame.display.set_caption("Snake")
        self._clock = pygame.time.Clock()

        self._running = True
        self._accumulator_ms = 0
        self._reported_over = False

    def run(self) -> int:
        """Run the game loop. Returns final score."""
        print("=== Snake ===")
        print("Arrow keys or WASD to move, Space to pause")
        print("R to restart, ESC to quit")
        print()

        while self._running:
            elapsed_ms = self._clock.tick(self._target_fps)
            self._handle_events()
            self._update(elapsed_ms)
            self._render()

        pygame.quit()
        return self._game.score

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._running = False
                elif event.key == pygame.K_r:
                    self._restart()
                elif event.key == pygame.K_SPACE:
                    self._game.toggle_pause()
                elif event.key in KEY_DIRECTIONS:
                    self._game.turn(KEY_DIRECTIONS[event.key])

    def _update(self, elapsed_ms: int) -> None:
        """Feed whole tick periods to the engine."""
        self._accumulator_ms += elapsed_ms

        # Limit to prevent spiral after a stall
        if self._accumulator_ms > self._tick_ms * 4:
            self._accumulator_ms = self._tick_ms * 4

        while self._accumulator_ms >= self._tick_ms:
            self._accumulator_ms -= self._tick_ms
            score_before = self._game.score
            state = self._game.tick()

            if state.score > score_before:
                print(f"  +1 (Total: {state.score})")

            if state.game_over and not self._reported_over:
                self._reported_over = True
                print(f"\nGAME OVER - Score: {state.score}")
                return

    def _restart(self) -> None:
        """Restart the game with a fresh seed unless one was given."""
        self._game.reset(seed=self._seed)
        self._accumulator_ms = 0
        self._reported_over = False
        print("\n=== Game Restarted ===\n")

    def _render(self) -> None:
        snapshot = GameSnapshot.from_state(self._game.state)
        self._renderer.render(self._screen, snapshot)
        pygame.display.flip()


def main():
    parser = argparse.ArgumentParser(description="Play Snake interactively")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--cell", type=int, default=28, help="Cell size in pixels (default: 28)")
    parser.add_argument("--fps", type=int, default=60, help="Target FPS")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )

    try:
        config = load_config()
        player = HumanPlayer(
            config=config,
            seed=args.seed,
            cell_px=args.cell,
            target_fps=args.fps
        )
        score = player.run()
        print(f"\nFinal Score: {score}")
        return 0
    except ImportError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
