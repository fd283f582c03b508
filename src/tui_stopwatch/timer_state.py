from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, model_validator
from textual import log

PHASES = ('Stopped', 'Running', 'Paused')

class TimerState(BaseModel):
    start_instant: datetime | None = None
    pause_instant: datetime | None = None
    accumulated: timedelta = timedelta()
    is_paused: bool = False

    model_config = ConfigDict(
        frozen=True,
    )

    @model_validator(mode='after')
    def checkInvariants(self) -> TimerState:
        if self.accumulated < timedelta():
            raise ValueError('accumulated duration cannot be negative')
        if self.start_instant is None:
            if self.is_paused or self.pause_instant is not None:
                raise ValueError('a stopped timer cannot be paused')
            if self.accumulated:
                raise ValueError('a stopped timer has no accumulated duration')
        if self.is_paused != (self.pause_instant is not None):
            raise ValueError('pause_instant is set exactly while paused')
        return self

    @property
    def phase(self) -> str:
        if self.start_instant is None:
            return 'Stopped'
        if self.is_paused:
            return 'Paused'
        return 'Running'

    @property
    def actionLabel(self) -> str:
        if self.start_instant is None:
            return 'Start'
        if self.is_paused:
            return 'Resume'
        return 'Pause'

    def start(self, now: datetime) -> TimerState:
        if self.start_instant is not None:
            log.debug(f'Start ignored while {self.phase}.')
            return self
        return TimerState(start_instant=now)

    def pause(self, now: datetime) -> TimerState:
        if self.phase != 'Running':
            log.debug(f'Pause ignored while {self.phase}.')
            return self
        return TimerState(
            start_instant=self.start_instant,
            pause_instant=now,
            accumulated=self.accumulated,
            is_paused=True,
        )

    def resume(self, now: datetime) -> TimerState:
        if self.phase != 'Paused':
            log.debug(f'Resume ignored while {self.phase}.')
            return self
        assert self.start_instant is not None
        assert self.pause_instant is not None
        return TimerState(
            start_instant=now,
            pause_instant=None,
            accumulated=self.accumulated + (
                self.pause_instant - self.start_instant
            ),
            is_paused=False,
        )

    def stop(self) -> TimerState:
        return TimerState()

    def press(self, now: datetime) -> TimerState:
        '''
        The contextual action button: Start, Resume or Pause,
        whichever `actionLabel` currently reads.
        '''
        match self.actionLabel:
            case 'Start':
                return self.start(now)
            case 'Resume':
                return self.resume(now)
            case _:
                return self.pause(now)

    def elapsed(self, now: datetime) -> timedelta:
        if self.start_instant is None:
            return timedelta()
        if self.is_paused:
            assert self.pause_instant is not None
            return self.pause_instant - self.start_instant + self.accumulated
        return now - self.start_instant + self.accumulated

    def elapsedSeconds(self, now: datetime) -> float:
        return self.elapsed(now).total_seconds()
