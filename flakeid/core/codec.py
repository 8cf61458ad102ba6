"""Packing and unpacking of the 64-bit identifier fields.

Layout, most significant bit first::

    |--------- timestamp (41) ---------|-- discriminator(s) (10) --|-- sequence (12) --|

The single-field layout uses one 10-bit discriminator. The dual-field layout
splits it in two 5-bit halves: discriminator #1 sits directly above the
sequence and discriminator #2 above that.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .epoch import EpochConfig, epoch_config

UINT64_MASK = (1 << 64) - 1
SEQUENCE_BITS = 12


@dataclass(frozen=True)
class BitLayout:
    """Widths of the discriminator fields, least significant field first."""

    discriminator_bits: Tuple[int, ...]
    sequence_bits: int = SEQUENCE_BITS

    @property
    def max_sequence(self) -> int:
        return (1 << self.sequence_bits) - 1

    @property
    def timestamp_shift(self) -> int:
        return self.sequence_bits + sum(self.discriminator_bits)

    @property
    def shifts(self) -> Tuple[int, ...]:
        shifts = []
        offset = self.sequence_bits
        for width in self.discriminator_bits:
            shifts.append(offset)
            offset += width
        return tuple(shifts)

    @property
    def max_discriminators(self) -> Tuple[int, ...]:
        return tuple((1 << width) - 1 for width in self.discriminator_bits)


SINGLE_FIELD = BitLayout((10,))
DUAL_FIELD = BitLayout((5, 5))


def encode(
    timestamp_ms: int,
    discriminators: Sequence[int],
    sequence: int,
    layout: BitLayout = SINGLE_FIELD,
) -> int:
    """Pack the fields into one unsigned 64-bit integer.

    A discriminator larger than its field's maximum is written as zero.
    """
    if len(discriminators) != len(layout.discriminator_bits):
        raise ValueError(
            f"layout expects {len(layout.discriminator_bits)} discriminator(s), "
            f"got {len(discriminators)}"
        )

    value = timestamp_ms << layout.timestamp_shift
    for discriminator, shift, maximum in zip(
        discriminators, layout.shifts, layout.max_discriminators
    ):
        if 0 <= discriminator <= maximum:
            value |= discriminator << shift
    value |= sequence & layout.max_sequence
    return value & UINT64_MASK


def decode_timestamp(
    sid: int,
    layout: BitLayout = SINGLE_FIELD,
    epoch: Optional[EpochConfig] = None,
) -> int:
    """Milliseconds since the Unix epoch, using the epoch configured now."""
    epoch = epoch if epoch is not None else epoch_config
    return ((sid & UINT64_MASK) >> layout.timestamp_shift) + epoch.unix_millis


def decode_sequence(sid: int, layout: BitLayout = SINGLE_FIELD) -> int:
    return sid & layout.max_sequence


def _decode_field(sid: int, layout: BitLayout, index: int) -> int:
    return ((sid & UINT64_MASK) >> layout.shifts[index]) & layout.max_discriminators[index]


def decode_discriminator(sid: int) -> int:
    return _decode_field(sid, SINGLE_FIELD, 0)


def decode_discriminator1(sid: int) -> int:
    return _decode_field(sid, DUAL_FIELD, 0)


def decode_discriminator2(sid: int) -> int:
    return _decode_field(sid, DUAL_FIELD, 1)
