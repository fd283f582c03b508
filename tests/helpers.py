import re
from datetime import datetime, timedelta

ELAPSED_PATTERN = re.compile(r'\d+:\d{2}[.,]\d{3}')

T0 = datetime(2024, 3, 1, 9, 30, 0)

class FakeClock:
    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> datetime:
        self.now += timedelta(seconds=seconds)
        return self.now

def at(seconds: float) -> datetime:
    return T0 + timedelta(seconds=seconds)
