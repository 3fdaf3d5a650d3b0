# Настройки игры
# Поле 10x10, змейка стартует в левом верхнем углу и ползёт вправо
BOARD_SIZE = 10

# Сетка
GRID_SIZE = 30                  # пикселей на клетку
PANEL_WIDTH = 200               # панель со счётом справа от поля

# Цвета
BLUE = (0, 139, 139)
GREEN = (124, 252, 0)
RED = (255, 0, 0)
GRAY = (102, 205, 170)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
PANEL_BG = (40, 40, 40)
DISABLED = (150, 150, 150)

SNAKE = GREEN
FOOD = RED
GRID = GRAY
BACKGROUND = BLUE
TEXT_COLOR = WHITE

# Скорость: один ход змейки раз в TICK_MS миллисекунд
TICK_MS = 100
FPS = 60  # частота отрисовки, не влияет на скорость змейки

# Начальная змейка (строка, столбец), голова последняя
INITIAL_SNAKE = ((0, 0), (0, 1), (0, 2), (0, 3))
INITIAL_DIRECTION = "right"

# Клавиши (имена как в pygame.key.name)
START_KEY = "space"
QUIT_KEY = "escape"
