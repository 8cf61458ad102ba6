from typing import Iterable, List

import pytest

from flakeid.core.clock import ClockSource
from flakeid.core.epoch import epoch_config


class ScriptedClock(ClockSource):
    """Returns the given millisecond readings in order, then repeats the last one."""

    def __init__(self, readings: Iterable[int]) -> None:
        super().__init__()
        self.readings: List[int] = list(readings)
        self.reads = 0

    def millis(self) -> int:
        index = min(self.reads, len(self.readings) - 1)
        self.reads += 1
        return self.readings[index]


@pytest.fixture(autouse=True)
def default_epoch():
    epoch_config.reset()
    yield
    epoch_config.reset()


@pytest.fixture
def scripted_clock():
    return ScriptedClock
