import locale
import math
from datetime import datetime

from textual import log

class FormattingError(ValueError):
    pass

def localeDecimalSeparator() -> str:
    return locale.localeconv()['decimal_point'] or '.'

def checkDuration(seconds: float) -> float:
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise FormattingError(f'Not a duration: {seconds!r}')
    if not math.isfinite(seconds):
        raise FormattingError(f'Duration is not finite: {seconds}')
    if seconds < 0:
        raise FormattingError(f'Duration is negative: {seconds}')
    return float(seconds)

def formatMinutesSeconds(seconds: float) -> str:
    '''
    `M:SS`. Minutes are unbounded, i.e. there is no hour field.
    '''
    minutes, secs = divmod(math.floor(checkDuration(seconds)), 60)
    return f'{minutes}:{secs:02d}'

def formatElapsed(
    seconds: float, decimal_separator: str | None = None,
) -> str:
    '''
    `M:SS<sep>mmm`. Milliseconds are truncated, not rounded.
    `decimal_separator` defaults to the current locale's.
    Raises `FormattingError` for negative or non-finite durations.
    '''
    minutes_seconds = formatMinutesSeconds(seconds)
    # Truncated on purpose: 1.234 shows as .233 since fmod gives 0.23399...
    # fmod(x, 1.0) * 1000 can also round up to exactly 1000.0
    milliseconds = min(math.floor(math.fmod(seconds, 1.0) * 1000), 999)
    if decimal_separator is None:
        decimal_separator = localeDecimalSeparator()
    return f'{minutes_seconds}{decimal_separator}{milliseconds:03d}'

def formatElapsedOrNone(
    seconds: float, decimal_separator: str | None = None,
) -> str | None:
    try:
        return formatElapsed(seconds, decimal_separator)
    except FormattingError as e:
        log.warning(f'Cannot display elapsed time: {e}')
        return None

def expandTimeFormat(time_format: str) -> str:
    '''
    Spells out the composite directives so the seconds field can be
    located, e.g. `%X` becomes `%I:%M:%S %p` under en_US.
    '''
    if '%X' in time_format and hasattr(locale, 'nl_langinfo'):
        time_format = time_format.replace(
            '%X', locale.nl_langinfo(locale.T_FMT),
        )
    return (
        time_format
        .replace('%T', '%H:%M:%S')
        .replace('%r', '%I:%M:%S %p')
    )

def formatClock(instant: datetime, time_format: str = '%X') -> str:
    '''
    `HH:MM:SS.mmm` in the C locale. The time follows `time_format`,
    which is locale-aware by default; the milliseconds go right after
    the seconds field, or at the end when there is none.
    Aware instants are shown in local time.
    '''
    if instant.tzinfo is not None:
        instant = instant.astimezone()
    milliseconds = f'.{instant.microsecond // 1000:03d}'
    time_format = expandTimeFormat(time_format)
    if '%S' in time_format:
        time_format = time_format.replace('%S', '%S' + milliseconds, 1)
    else:
        time_format += milliseconds
    return instant.strftime(time_format)
