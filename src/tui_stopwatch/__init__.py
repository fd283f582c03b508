from .UI import UI as StopwatchUI
from .config import StopwatchConfig
from .stopwatch import Stopwatch
from .timer_state import TimerState
from .time_format import (
    FormattingError, formatClock, formatElapsed, formatElapsedOrNone,
)
from .refresh_driver import RefreshDriver

__all__ = [
    "StopwatchUI", "StopwatchConfig", "Stopwatch", "TimerState",
    "FormattingError", "formatClock", "formatElapsed",
    "formatElapsedOrNone", "RefreshDriver",
]
