"""
Змейка в окне pygame.

Использование:
    python play.py                  # поле 10x10, ход раз в 100 мс
    python play.py --size 15 --tick-ms 150
    python play.py --seed 42        # одинаковая еда от запуска к запуску

Управление: SPACE - старт / новая игра, стрелки - направление, ESC - выход.
"""
import argparse
import logging

import numpy as np
import pygame

from board import EMPTY, SNAKE, FOOD
from renderer import Renderer
from scheduler import Scheduler, TickTimer
from session import GameSession, GameStatus
from config import (BOARD_SIZE, TICK_MS, FPS, GRID_SIZE, PANEL_WIDTH, QUIT_KEY,
                    BACKGROUND, SNAKE as SNAKE_COLOR, FOOD as FOOD_COLOR, GRID,
                    BLACK, GREEN, RED, PANEL_BG, DISABLED, TEXT_COLOR)

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

CELL_COLORS = {EMPTY: BACKGROUND, SNAKE: SNAKE_COLOR, FOOD: FOOD_COLOR}


class PygameTimer(TickTimer):
    """Таймер на pygame.time.set_timer: тики приходят событиями TICK_EVENT"""

    def __init__(self):
        self.callback = None

    def start(self, period_ms, callback):
        self.callback = callback
        pygame.time.set_timer(TICK_EVENT, period_ms)

    def cancel(self):
        pygame.time.set_timer(TICK_EVENT, 0)
        self.callback = None

    def handle(self, event):
        # Событие могло остаться в очереди pygame после cancel()
        if event.type == TICK_EVENT and self.callback is not None:
            self.callback()


class PygameRenderer(Renderer):
    def __init__(self, size):
        self.size = size
        self.width = size * GRID_SIZE
        self.height = size * GRID_SIZE

        self.screen = pygame.display.set_mode((self.width + PANEL_WIDTH, self.height))
        pygame.display.set_caption('Snake')
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 28)

        # Копия состояния клеток для перерисовки кадра
        self.cells = np.zeros((size, size), dtype=np.int8)
        self.score = 0
        self.banner = None
        self.start_enabled = True

    def render_cell(self, cell, state):
        self.cells[cell] = state

    def render_score(self, score):
        self.score = score

    def show_game_over(self, won=False):
        self.banner = "YOU WIN!" if won else "GAME OVER"

    def hide_game_over(self):
        self.banner = None

    def set_start_enabled(self, enabled):
        self.start_enabled = enabled

    def draw_grid(self):
        """Рисуем сетку"""
        for x in range(0, self.width, GRID_SIZE):
            pygame.draw.line(self.screen, GRID, (x, 0), (x, self.height))
        for y in range(0, self.height, GRID_SIZE):
            pygame.draw.line(self.screen, GRID, (0, y), (self.width, y))

    def draw_cells(self):
        """Змейка и еда"""
        rows, cols = np.nonzero(self.cells)
        for row, col in zip(rows, cols):
            rect = pygame.Rect(col * GRID_SIZE, row * GRID_SIZE, GRID_SIZE - 1, GRID_SIZE - 1)
            pygame.draw.rect(self.screen, CELL_COLORS[int(self.cells[row, col])], rect)
            pygame.draw.rect(self.screen, BLACK, rect, 1)

    def draw_panel(self):
        """Панель со счётом"""
        panel = pygame.Rect(self.width, 0, PANEL_WIDTH, self.height)
        pygame.draw.rect(self.screen, PANEL_BG, panel)

        lines = [
            (f"Score: {self.score}", TEXT_COLOR),
            ("", TEXT_COLOR),
            ("SPACE  Start", TEXT_COLOR if self.start_enabled else DISABLED),
            ("Arrows  Move", TEXT_COLOR),
            ("ESC  Quit", TEXT_COLOR),
        ]
        for i, (text, color) in enumerate(lines):
            surf = self.font.render(text, True, color)
            self.screen.blit(surf, (self.width + 10, 20 + i * 25))

    def draw_banner(self):
        if self.banner is None:
            return
        color = GREEN if self.banner == "YOU WIN!" else RED
        text = self.big_font.render(self.banner, True, color)
        rect = text.get_rect(center=(self.width // 2, self.height // 2))
        pygame.draw.rect(self.screen, BLACK, rect.inflate(20, 10))
        self.screen.blit(text, rect)

    def draw(self):
        self.screen.fill(BACKGROUND)
        self.draw_grid()
        self.draw_cells()
        self.draw_panel()
        self.draw_banner()
        pygame.display.flip()


class SnakeGame:
    def __init__(self, size=None, tick_ms=None, seed=None):
        pygame.init()
        self.clock = pygame.time.Clock()

        size = size or BOARD_SIZE
        self.renderer = PygameRenderer(size)
        self.timer = PygameTimer()
        self.session = GameSession(self.renderer, size=size,
                                   rng=np.random.default_rng(seed))
        self.scheduler = Scheduler(self.session, self.timer, tick_ms or TICK_MS,
                                   on_finish=self._game_finished)
        logger.info("Board %dx%d, one move every %d ms", size, size, self.scheduler.tick_ms)

        self.games = 0
        self.best = 0
        self.wins = 0

    def handle_events(self):
        """Все события pygame -> команды планировщика. False = выход"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == TICK_EVENT:
                self.timer.handle(event)
            elif event.type == pygame.KEYDOWN:
                key = pygame.key.name(event.key)
                if key == QUIT_KEY:
                    return False
                self.scheduler.post_key(key)
        return True

    def play(self):
        running = True
        while running:
            running = self.handle_events()
            self.scheduler.drain()
            self.renderer.draw()
            self.clock.tick(FPS)

        self.timer.cancel()
        pygame.quit()

        if self.games > 0:
            print(f"\nResults: {self.games} games")
            print(f"Best: {self.best}")
            print(f"Wins: {self.wins}")

    def _game_finished(self, status):
        self.games += 1
        score = self.session.score
        self.best = max(self.best, score)
        if status is GameStatus.WON:
            self.wins += 1
            print(f"Game {self.games}: WIN! Score {score}")
        else:
            print(f"Game {self.games}: Score {score}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Snake game")
    parser.add_argument("--size", type=int, default=BOARD_SIZE,
                        help="Board size in cells (default: %(default)s)")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS,
                        help="Milliseconds between snake moves (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.size < 5:
        parser.error("--size must be at least 5")
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    SnakeGame(args.size, args.tick_ms, args.seed).play()


if __name__ == "__main__":
    main()
