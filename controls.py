"""
Направления и обработка клавиш.

Разворот на 180 градусов запрещён: новое направление сравнивается с тем,
которое реально применилось на последнем ходу, а не с последним нажатием.
Поэтому быстрое "вверх, влево" при движении вправо не убивает змейку.
"""
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Direction(Enum):
    # (строка, столбец)
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self):
        return self.value

    @property
    def opposite(self):
        drow, dcol = self.value
        return Direction((-drow, -dcol))

    @classmethod
    def from_name(cls, name):
        return cls[name.upper()]


# Имена клавиш как их отдаёт pygame.key.name()
KEY_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


class InputController:
    def __init__(self, initial=Direction.RIGHT):
        self.reset(initial)

    def reset(self, initial):
        self.active = initial
        self.pending = initial

    def request(self, direction):
        """Запоминает направление, если это не разворот. Возвращает True если принято"""
        if direction == self.active.opposite:
            return False
        self.pending = direction
        return True

    def handle_key(self, key):
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            logger.debug("Ignoring key %r", key)
            return False
        return self.request(direction)

    def apply(self):
        """Вызывается в начале хода: отложенное направление становится текущим"""
        self.active = self.pending
        return self.active
