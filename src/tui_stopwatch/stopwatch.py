import typing as tp
from datetime import datetime, timezone

from textual import log

from .timer_state import TimerState

Clock = tp.Callable[[], datetime]
Listener = tp.Callable[[TimerState], None]

def localNow() -> datetime:
    '''
    An absolute instant carrying the local UTC offset, so that
    differences stay correct across daylight-saving changes.
    '''
    return datetime.now(timezone.utc).astimezone()

class Stopwatch:
    def __init__(self, clock: Clock = localNow) -> None:
        '''
        `clock` supplies the instant for every action that is not
        given one explicitly.
        '''
        self.clock = clock
        self.state = TimerState()
        self.listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self.listeners.append(listener)

    @property
    def phase(self) -> str:
        return self.state.phase

    @property
    def actionLabel(self) -> str:
        return self.state.actionLabel

    def elapsedSeconds(self, now: datetime | None = None) -> float:
        return self.state.elapsedSeconds(self.clock() if now is None else now)

    def transit(self, new_state: TimerState) -> bool:
        if new_state is self.state:
            return False
        log.info(f'{self.state.phase} -> {new_state.phase}')
        self.state = new_state
        for listener in self.listeners:
            listener(new_state)
        return True

    def onStart(self, now: datetime | None = None) -> bool:
        return self.transit(self.state.start(
            self.clock() if now is None else now,
        ))

    def onPauseOrResume(self, now: datetime | None = None) -> bool:
        if self.state.start_instant is None:
            log.debug('Pause/resume ignored while Stopped.')
            return False
        return self.onPress(now)

    def onPress(self, now: datetime | None = None) -> bool:
        return self.transit(self.state.press(
            self.clock() if now is None else now,
        ))

    def onStop(self) -> bool:
        if self.state == TimerState():
            return False
        return self.transit(self.state.stop())
