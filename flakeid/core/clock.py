"""Millisecond clock measured from the configured epoch."""

from __future__ import annotations

import time
from typing import Optional

from .epoch import EpochConfig, epoch_config


class ClockSource:
    """Wall clock read in milliseconds since an EpochConfig's epoch.

    The epoch is looked up on every read, so a change made through
    ``set_epoch`` is seen by the next sample of every generator.
    """

    def __init__(self, epoch: Optional[EpochConfig] = None) -> None:
        self._epoch = epoch if epoch is not None else epoch_config

    @property
    def epoch_config(self) -> EpochConfig:
        return self._epoch

    def unix_millis(self) -> int:
        return time.time_ns() // 1_000_000

    def millis(self) -> int:
        return self.unix_millis() - self._epoch.unix_millis
