"""
Игровое поле N x N.

Матрица поля:
  0 = пусто
  1 = тело змейки
  2 = еда

Помимо матрицы поле хранит список пустых клеток, чтобы еду можно было
ставить в случайную пустую клетку за O(1), без обхода всей матрицы.
"""
import logging

import numpy as np

from config import BOARD_SIZE

logger = logging.getLogger(__name__)

EMPTY = 0
SNAKE = 1
FOOD = 2

STATE_NAMES = {EMPTY: "empty", SNAKE: "snake", FOOD: "food"}


class NoEmptyCellsError(LookupError):
    """Нет ни одной пустой клетки (поле заполнено)."""


class Board:
    def __init__(self, size=None, rng=None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.initialize(size or BOARD_SIZE)

    def initialize(self, size):
        """Все клетки пустые"""
        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int8)

        # Пустые клетки: список + позиция каждой клетки в списке
        self._empty = [(row, col) for row in range(size) for col in range(size)]
        self._empty_index = {cell: i for i, cell in enumerate(self._empty)}

    def in_bounds(self, cell):
        row, col = cell
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, cell):
        if not self.in_bounds(cell):
            raise IndexError(f"cell {cell} is outside {self.size}x{self.size} board")

    def state(self, cell):
        self._check(cell)
        row, col = cell
        return int(self.grid[row, col])

    def set_cell_state(self, cell, state):
        """Меняет состояние клетки и поддерживает список пустых клеток"""
        self._check(cell)
        if state not in STATE_NAMES:
            raise ValueError(f"unknown cell state: {state!r}")

        cell = (int(cell[0]), int(cell[1]))
        self.grid[cell] = state

        if state == EMPTY:
            self._add_empty(cell)
        else:
            self._remove_empty(cell)

    def _add_empty(self, cell):
        if cell in self._empty_index:
            return
        self._empty_index[cell] = len(self._empty)
        self._empty.append(cell)

    def _remove_empty(self, cell):
        i = self._empty_index.pop(cell, None)
        if i is None:
            return
        # Переносим последний элемент на место удалённого
        last = self._empty.pop()
        if last != cell:
            self._empty[i] = last
            self._empty_index[last] = i

    def pick_random_empty_cell(self):
        """Случайная пустая клетка (равновероятно)"""
        if not self._empty:
            raise NoEmptyCellsError("board is full")
        return self._empty[int(self.rng.integers(len(self._empty)))]

    @property
    def empty_count(self):
        return len(self._empty)

    def empty_cells(self):
        return set(self._empty)

    def food_cells(self):
        rows, cols = np.nonzero(self.grid == FOOD)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def __repr__(self):
        return f"<Board {self.size}x{self.size}, empty={self.empty_count}>"
