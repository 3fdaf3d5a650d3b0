"""
Змейка: упорядоченная последовательность клеток (строка, столбец).
Хвост - первый элемент, голова - последний.

Поле змейка не трогает: отмечать клетки на Board должен вызывающий код.
"""
from collections import deque


class Snake:
    def __init__(self, start_cells):
        self.initialize(start_cells)

    def initialize(self, start_cells):
        cells = [tuple(cell) for cell in start_cells]
        if not cells:
            raise ValueError("snake needs at least one cell")
        if len(set(cells)) != len(cells):
            raise ValueError(f"snake cells overlap: {cells}")
        for (r1, c1), (r2, c2) in zip(cells, cells[1:]):
            if abs(r1 - r2) + abs(c1 - c2) != 1:
                raise ValueError(f"snake cells {(r1, c1)} and {(r2, c2)} are not adjacent")

        self.body = deque(cells)

    def head(self):
        return self.body[-1]

    def tail(self):
        return self.body[0]

    def advance_head(self, new_head):
        self.body.append(tuple(new_head))

    def retract_tail(self):
        return self.body.popleft()

    def cells(self):
        return list(self.body)

    def __len__(self):
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    def __contains__(self, cell):
        return tuple(cell) in self.body

    def __repr__(self):
        return f"<Snake len={len(self.body)} head={self.head()}>"
