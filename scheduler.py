"""
Очередь команд и таймер ходов.

Все события (старт, нажатия клавиш, тики таймера) складываются в одну
очередь и выполняются по одному в drain(). Каждая команда отрабатывает
целиком до следующей, поэтому блокировки не нужны.

Таймер:
  - перед каждым запуском старый таймер останавливается
  - у каждого запуска свой номер (generation); тики от остановленного
    таймера, которые уже лежат в очереди, выбрасываются
Так рестарт не может удвоить скорость змейки.
"""
import logging
from collections import deque, namedtuple

from config import START_KEY, TICK_MS

logger = logging.getLogger(__name__)

StartGame = namedtuple("StartGame", [])
KeyPress = namedtuple("KeyPress", ["key"])
Tick = namedtuple("Tick", ["generation"])


class TickTimer:
    """Интерфейс таймера: вызывает callback раз в period_ms, пока не отменён"""

    def start(self, period_ms, callback):
        raise NotImplementedError

    def cancel(self):
        raise NotImplementedError


class ManualTimer(TickTimer):
    """Таймер без часов: тик происходит только при вызове fire(). Для тестов и headless"""

    def __init__(self):
        self.period_ms = None
        self.callback = None
        self.starts = 0

    @property
    def active(self):
        return self.callback is not None

    def start(self, period_ms, callback):
        if self.active:
            raise RuntimeError("timer is already running")
        self.period_ms = period_ms
        self.callback = callback
        self.starts += 1

    def cancel(self):
        self.callback = None

    def fire(self, times=1):
        for _ in range(times):
            if self.callback is None:
                return
            self.callback()


class Scheduler:
    def __init__(self, session, timer, tick_ms=None, on_finish=None):
        self.session = session
        self.timer = timer
        self.tick_ms = tick_ms or TICK_MS
        # on_finish(status) вызывается сразу после конца каждой игры,
        # даже если в той же пачке команд уже лежит новый старт
        self.on_finish = on_finish
        self.queue = deque()
        self.generation = 0

    def post(self, command):
        self.queue.append(command)

    def post_key(self, key):
        if key == START_KEY:
            self.post(StartGame())
        else:
            self.post(KeyPress(key))

    def drain(self):
        """Выполнить все накопившиеся команды по порядку. Возвращает их число"""
        handled = 0
        while self.queue:
            self._dispatch(self.queue.popleft())
            handled += 1
        return handled

    def _dispatch(self, command):
        if isinstance(command, StartGame):
            self._start()
        elif isinstance(command, KeyPress):
            self.session.handle_key(command.key)
        elif isinstance(command, Tick):
            self._tick(command.generation)
        else:
            raise TypeError(f"unknown command: {command!r}")

    def _start(self):
        if not self.session.start():
            logger.debug("Start ignored, game is already running")
            return
        self._restart_timer()
        if not self.session.running:
            # Поле заполнилось ещё до первого хода
            self._finished()

    def _restart_timer(self):
        self.timer.cancel()
        self.generation += 1
        generation = self.generation
        self.timer.start(self.tick_ms, lambda: self.post(Tick(generation)))
        logger.debug("Tick timer #%d started (%d ms)", generation, self.tick_ms)

    def _tick(self, generation):
        if generation != self.generation:
            logger.debug("Dropping stale tick from timer #%d", generation)
            return
        result = self.session.tick()
        if result.over or result.won:
            self._finished()

    def _finished(self):
        self.timer.cancel()
        if self.on_finish is not None:
            self.on_finish(self.session.status)
