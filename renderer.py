"""
Интерфейс отрисовки, который использует игровая сессия.

Сессия только сообщает "клетка C теперь S", "счёт такой-то" и т.п.
Как это рисовать - дело реализации (pygame-окно в play.py).
"""


class Renderer:
    """Рендерер без вывода: все методы ничего не делают"""

    def render_cell(self, cell, state):
        pass

    def render_score(self, score):
        pass

    def show_game_over(self, won=False):
        pass

    def hide_game_over(self):
        pass

    def set_start_enabled(self, enabled):
        pass
