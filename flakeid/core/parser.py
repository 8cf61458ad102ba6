"""Decoding identifiers back into their fields."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .codec import (
    DUAL_FIELD,
    SINGLE_FIELD,
    decode_discriminator,
    decode_discriminator1,
    decode_discriminator2,
    decode_sequence,
    decode_timestamp,
)

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class ParsedID:
    timestamp: int  # ms since the Unix epoch
    sequence: int
    discriminator: int

    @property
    def created_at(self) -> datetime:
        return _UNIX_EPOCH + timedelta(milliseconds=self.timestamp)


@dataclass(frozen=True)
class ParsedID2:
    timestamp: int  # ms since the Unix epoch
    sequence: int
    discriminator1: int
    discriminator2: int

    @property
    def created_at(self) -> datetime:
        return _UNIX_EPOCH + timedelta(milliseconds=self.timestamp)


def parse(sid: int) -> ParsedID:
    """Decode an identifier produced with a single discriminator.

    The timestamp is rebuilt from the epoch configured at call time.
    """
    return ParsedID(
        timestamp=decode_timestamp(sid, SINGLE_FIELD),
        sequence=decode_sequence(sid, SINGLE_FIELD),
        discriminator=decode_discriminator(sid),
    )


def parse2(sid: int) -> ParsedID2:
    """Decode an identifier produced with two discriminators."""
    return ParsedID2(
        timestamp=decode_timestamp(sid, DUAL_FIELD),
        sequence=decode_sequence(sid, DUAL_FIELD),
        discriminator1=decode_discriminator1(sid),
        discriminator2=decode_discriminator2(sid),
    )
