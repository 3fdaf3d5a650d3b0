"""
Игровая сессия: поле, змейка, счёт, направление и состояние игры.

Один вызов tick() = один ход змейки:
  1. отложенное направление становится текущим
  2. считаем новую клетку головы и проверяем её
     (переход через край строки, выход за поле, врезались в себя)
  3. еда  -> змейка растёт, счёт +1, новая еда
     пусто -> хвост убирается
  4. изменённые клетки отдаются рендереру

Сессия ничего не знает о таймере: остановить его после конца игры должен
тот, кто присылает ходы (см. scheduler.py).
"""
import logging
from collections import namedtuple
from enum import Enum

from board import Board, NoEmptyCellsError, EMPTY, SNAKE, FOOD
from snake import Snake
from controls import Direction, InputController
from renderer import Renderer
from config import BOARD_SIZE, INITIAL_SNAKE, INITIAL_DIRECTION

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"
    WON = "won"


class InvalidMove(Exception):
    """Ход невозможен: reason = 'wrap' | 'wall' | 'self'"""

    def __init__(self, reason, cell):
        super().__init__(f"invalid move to {cell}: {reason}")
        self.reason = reason
        self.cell = cell


TickResult = namedtuple("TickResult", ["moved", "grew", "over", "won"])
IGNORED = TickResult(False, False, False, False)


class GameSession:
    def __init__(self, renderer=None, size=None, rng=None,
                 initial_snake=None, initial_direction=None):
        self.renderer = renderer or Renderer()
        self.size = size or BOARD_SIZE
        self.rng = rng
        self.initial_snake = tuple(tuple(cell) for cell in initial_snake or INITIAL_SNAKE)
        self.initial_direction = initial_direction or Direction.from_name(INITIAL_DIRECTION)

        # Начальная змейка: соседние клетки, все внутри поля
        Snake(self.initial_snake)
        outside = [(row, col) for row, col in self.initial_snake
                   if not (0 <= row < self.size and 0 <= col < self.size)]
        if outside:
            raise ValueError(f"initial snake cells {outside} are outside "
                             f"{self.size}x{self.size} board")

        self.status = GameStatus.IDLE
        self.board = None
        self.snake = None
        self.score = 0
        self.food = None
        self.controls = InputController(self.initial_direction)

    @property
    def running(self):
        return self.status is GameStatus.RUNNING

    @property
    def direction(self):
        return self.controls.active

    def start(self):
        """Новая игра. Если игра уже идёт - ничего не делаем. Возвращает True если начали"""
        if self.running:
            return False

        # Поле и змейка каждый раз новые
        self.board = Board(self.size, rng=self.rng)
        self.snake = Snake(self.initial_snake)
        self.score = len(self.snake)
        self.food = None
        self.controls.reset(self.initial_direction)

        for row in range(self.size):
            for col in range(self.size):
                self.renderer.render_cell((row, col), EMPTY)
        for cell in self.snake:
            self._mark(cell, SNAKE)

        self.renderer.hide_game_over()
        self.renderer.set_start_enabled(False)
        self.renderer.render_score(self.score)
        logger.info("Game started: %dx%d board, snake %s",
                    self.size, self.size, self.snake.cells())

        # Статус меняем только когда поле полностью размечено
        self.status = GameStatus.RUNNING
        if not self._place_food():
            self._finish(GameStatus.WON)
        return True

    def handle_key(self, key):
        return self.controls.handle_key(key)

    def tick(self):
        if not self.running:
            return IGNORED

        direction = self.controls.apply()
        try:
            candidate = self._next_head(direction)
        except InvalidMove as e:
            logger.info("Game over: %s (score %d)", e, self.score)
            self._finish(GameStatus.OVER)
            return TickResult(False, False, True, False)

        ate = self.board.state(candidate) == FOOD
        self._mark(candidate, SNAKE)
        self.snake.advance_head(candidate)

        if ate:
            # Хвост не трогаем - змейка выросла на одну клетку
            self.score += 1
            self.food = None
            self.renderer.render_score(self.score)
            if not self._place_food():
                self._finish(GameStatus.WON)
                return TickResult(True, True, False, True)
        else:
            tail = self.snake.retract_tail()
            self._mark(tail, EMPTY)

        return TickResult(True, ate, False, False)

    def _next_head(self, direction):
        row, col = self.snake.head()
        last = self.size - 1

        # Вправо с последнего столбца / влево с первого - это не переход
        # на соседнюю строку, а стена
        if (direction is Direction.RIGHT and col == last) or \
                (direction is Direction.LEFT and col == 0):
            raise InvalidMove("wrap", (row, col + direction.delta[1]))

        drow, dcol = direction.delta
        candidate = (row + drow, col + dcol)
        if not self.board.in_bounds(candidate):
            raise InvalidMove("wall", candidate)
        if self.board.state(candidate) == SNAKE:
            raise InvalidMove("self", candidate)
        return candidate

    def _place_food(self):
        """Еда в случайную пустую клетку. False если пустых клеток нет"""
        try:
            cell = self.board.pick_random_empty_cell()
        except NoEmptyCellsError:
            return False
        self._mark(cell, FOOD)
        self.food = cell
        logger.debug("Food placed at %s", cell)
        return True

    def _finish(self, status):
        self.status = status
        won = status is GameStatus.WON
        if won:
            logger.info("Board filled, game won with score %d", self.score)
        self.renderer.show_game_over(won=won)
        self.renderer.set_start_enabled(True)

    def _mark(self, cell, state):
        self.board.set_cell_state(cell, state)
        self.renderer.render_cell(cell, state)

    def __repr__(self):
        return (f"<GameSession status={self.status.value}, score={self.score}, "
                f"direction={self.direction.name}>")
