"""Snowflake-style ID generators."""

from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence, Tuple

from .clock import ClockSource
from .codec import DUAL_FIELD, SINGLE_FIELD, BitLayout, encode

logger = logging.getLogger(__name__)


class Generator:
    """Generate sortable identifiers for a fixed set of discriminators.

    ``next_id`` runs under a per-instance lock. Within one millisecond the
    sequence counts up; once all values are used the stored timestamp is
    advanced by one millisecond without waiting, so it may briefly run
    ahead of the clock. A clock that moves backwards is treated as not
    having advanced, so emitted timestamps never decrease and the call
    never blocks.
    """

    def __init__(
        self,
        layout: BitLayout,
        discriminators: Sequence[int],
        clock: Optional[ClockSource] = None,
    ) -> None:
        if len(discriminators) != len(layout.discriminator_bits):
            raise ValueError(
                f"layout expects {len(layout.discriminator_bits)} discriminator(s), "
                f"got {len(discriminators)}"
            )
        self._layout = layout
        self._discriminators = tuple(discriminators)
        self._clock = clock if clock is not None else ClockSource()
        self._lock = threading.Lock()
        self._last_timestamp = -1
        self._sequence = 0

        for position, (value, maximum) in enumerate(
            zip(self._discriminators, layout.max_discriminators), start=1
        ):
            if not 0 <= value <= maximum:
                logger.warning(
                    f"Discriminator #{position} ({value}) exceeds 0..{maximum}; "
                    "it will be encoded as 0"
                )

    @property
    def layout(self) -> BitLayout:
        return self._layout

    @property
    def discriminators(self) -> Tuple[int, ...]:
        return self._discriminators

    def next_id(self) -> int:
        """Return a unique, time-ordered unsigned 64-bit integer."""
        with self._lock:
            timestamp = self._clock.millis()

            if timestamp <= self._last_timestamp:
                self._sequence = (self._sequence + 1) & self._layout.max_sequence
                timestamp = self._last_timestamp
                if self._sequence == 0:
                    # all sequence values used: borrow the next millisecond
                    timestamp += 1
                    logger.debug(f"Sequence exhausted, advancing to {timestamp} ms")
            else:
                self._sequence = 0

            self._last_timestamp = timestamp
            return encode(timestamp, self._discriminators, self._sequence, self._layout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._discriminators!r}"


class SingleFieldGenerator(Generator):
    """Generator with one 10-bit discriminator (0..1023)."""

    def __init__(self, discriminator: int, clock: Optional[ClockSource] = None) -> None:
        super().__init__(SINGLE_FIELD, (discriminator,), clock)

    @property
    def discriminator(self) -> int:
        return self._discriminators[0]


class DualFieldGenerator(Generator):
    """Generator with two 5-bit discriminators (0..31 each), e.g. machine and process."""

    def __init__(
        self,
        discriminator1: int,
        discriminator2: int,
        clock: Optional[ClockSource] = None,
    ) -> None:
        super().__init__(DUAL_FIELD, (discriminator1, discriminator2), clock)


def new(discriminator: int) -> SingleFieldGenerator:
    return SingleFieldGenerator(discriminator)


def new2(discriminator1: int, discriminator2: int) -> DualFieldGenerator:
    return DualFieldGenerator(discriminator1, discriminator2)
