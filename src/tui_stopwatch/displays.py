from datetime import datetime

from textual.reactive import reactive
from textual.widgets import Static

from .time_format import formatClock, formatElapsedOrNone

class ClockDisplay(Static):
    now: reactive[datetime | None] = reactive(None)

    def __init__(self, time_format: str = '%X', *args, **kw) -> None:
        super().__init__('', *args, **kw)

        self.time_format = time_format
        self.displayed = ''

    def watch_now(self, _, new_now: datetime | None) -> None:
        if new_now is None:
            return
        self.displayed = formatClock(new_now, self.time_format)
        self.update(self.displayed)

class ElapsedDisplay(Static):
    seconds: reactive[float] = reactive(0.0)

    def __init__(
        self, placeholder: str = '--:--.---',
        decimal_separator: str | None = None, *args, **kw,
    ) -> None:
        '''
        Shows `placeholder` whenever `seconds` cannot be formatted,
        e.g. after the wall clock steps backwards.
        '''
        super().__init__('', *args, **kw)

        self.placeholder = placeholder
        self.decimal_separator = decimal_separator
        self.displayed = ''

    def on_mount(self) -> None:
        self.watch_seconds(self.seconds, self.seconds)

    def watch_seconds(self, _, new_seconds: float) -> None:
        text = formatElapsedOrNone(new_seconds, self.decimal_separator)
        self.displayed = self.placeholder if text is None else text
        self.update(self.displayed)
