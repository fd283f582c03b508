import typing as tp
from datetime import datetime

from textual import log
from textual.timer import Timer

from .stopwatch import Clock, localNow

ACTIVE_HZ = 120.0
IDLE_HZ = 1.0

class IntervalOwner(tp.Protocol):
    def set_interval(
        self, interval: float, callback: tp.Callable[[], tp.Any],
    ) -> Timer: ...

class RefreshDriver:
    def __init__(
        self,
        owner: IntervalOwner,
        onTick: tp.Callable[[datetime], None],
        clock: Clock = localNow,
        active_hz: float = ACTIVE_HZ,
        idle_hz: float = IDLE_HZ,
    ) -> None:
        '''
        Ticks `onTick(now)` at `active_hz` while the app has focus,
        and at `idle_hz` while it is in the background.
        `owner` is usually the App, whose event loop runs the ticks.
        '''
        self.owner = owner
        self.onTick = onTick
        self.clock = clock
        self.active_hz = active_hz
        self.idle_hz = idle_hz

        self.is_active = True
        self.timer: Timer | None = None

    @property
    def interval(self) -> float:
        return 1.0 / (self.active_hz if self.is_active else self.idle_hz)

    @property
    def is_running(self) -> bool:
        return self.timer is not None

    def start(self) -> None:
        if self.timer is not None:
            return
        self.timer = self.owner.set_interval(self.interval, self.fire)

    def stop(self) -> None:
        if self.timer is None:
            return
        self.timer.stop()
        self.timer = None

    def setActive(self, active: bool) -> None:
        if active == self.is_active:
            return
        self.is_active = active
        log.debug(f'Refreshing at {1.0 / self.interval:g} Hz.')
        if self.timer is not None:
            self.stop()
            self.start()

    def fire(self) -> None:
        self.onTick(self.clock())
