from __future__ import annotations

import json
import typing as tp

from pydantic import BaseModel, ConfigDict, PositiveFloat, model_validator

from .refresh_driver import ACTIVE_HZ, IDLE_HZ

class StopwatchConfig(BaseModel):
    active_hz: PositiveFloat = ACTIVE_HZ
    idle_hz: PositiveFloat = IDLE_HZ
    decimal_separator: tp.Literal['.', ','] | None = None    # None: follow the locale
    clock_format: str = '%X'
    placeholder: str = '--:--.---'
    title: str = 'Stopwatch'

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )

    @model_validator(mode='after')
    def checkRates(self) -> StopwatchConfig:
        if self.idle_hz > self.active_hz:
            raise ValueError('idle_hz cannot exceed active_hz')
        return self

    @classmethod
    def fromFile(cls, abs_file_path: str) -> StopwatchConfig:
        with open(abs_file_path, 'r', encoding='utf-8') as f:
            j = json.load(f)
        return cls.model_validate(j)
