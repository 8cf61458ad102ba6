"""Process-wide reference instant for every embedded timestamp."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import NamedTuple, Optional

from .exceptions import EpochInFutureError, EpochIsZeroError

logger = logging.getLogger(__name__)

# 2012-03-28T00:00:00Z
DEFAULT_EPOCH = datetime(2012, 3, 28, tzinfo=timezone.utc)


class _Snapshot(NamedTuple):
    epoch: datetime
    unix_millis: int


def _to_unix_millis(value: datetime) -> int:
    delta = value - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def _is_zero(candidate: Optional[datetime]) -> bool:
    return candidate is None or candidate.replace(tzinfo=None) == datetime.min


def _as_utc(candidate: datetime) -> datetime:
    if candidate.tzinfo is None:
        return candidate.replace(tzinfo=timezone.utc)
    return candidate.astimezone(timezone.utc)


class EpochConfig:
    """Validated epoch cell.

    The epoch and its millisecond value are stored together and replaced in
    a single assignment, so readers never see one without the other. Readers
    take no lock.
    """

    def __init__(self, epoch: datetime = DEFAULT_EPOCH) -> None:
        self._lock = threading.Lock()
        self._snapshot = self._validate(epoch)

    @property
    def epoch(self) -> datetime:
        return self._snapshot.epoch

    @property
    def unix_millis(self) -> int:
        """Epoch expressed as milliseconds since the Unix epoch."""
        return self._snapshot.unix_millis

    def set(self, candidate: Optional[datetime]) -> None:
        """Replace the epoch.

        Raises EpochIsZeroError for an unset instant and EpochInFutureError
        for an instant later than now. The current epoch is kept on error.
        """
        snapshot = self._validate(candidate)
        with self._lock:
            previous = self._snapshot.epoch
            self._snapshot = snapshot
        if previous != snapshot.epoch:
            logger.info(
                f"Epoch changed from {previous.isoformat()} to {snapshot.epoch.isoformat()}"
            )

    def reset(self) -> None:
        self.set(DEFAULT_EPOCH)

    @staticmethod
    def _validate(candidate: Optional[datetime]) -> _Snapshot:
        if _is_zero(candidate):
            raise EpochIsZeroError()
        try:
            candidate = _as_utc(candidate)
        except OverflowError as exc:
            # before 0001-01-01T00:00:00Z, i.e. below the zero instant
            raise EpochIsZeroError() from exc
        if candidate > datetime.now(timezone.utc):
            raise EpochInFutureError(candidate)
        return _Snapshot(candidate, _to_unix_millis(candidate))


epoch_config = EpochConfig()


def get_epoch() -> datetime:
    """Return the process-wide epoch as an aware UTC datetime."""
    return epoch_config.epoch


def set_epoch(candidate: Optional[datetime]) -> None:
    """Change the process-wide epoch used by every generator and parser."""
    epoch_config.set(candidate)
