"""Coordination-free, time-ordered 64-bit identifiers."""

import logging

from .core.clock import ClockSource
from .core.epoch import DEFAULT_EPOCH, EpochConfig, epoch_config, get_epoch, set_epoch
from .core.exceptions import EpochError, EpochInFutureError, EpochIsZeroError
from .core.id_generator import (
    DualFieldGenerator,
    Generator,
    SingleFieldGenerator,
    new,
    new2,
)
from .core.parser import ParsedID, ParsedID2, parse, parse2

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ClockSource",
    "DEFAULT_EPOCH",
    "DualFieldGenerator",
    "EpochConfig",
    "EpochError",
    "EpochInFutureError",
    "EpochIsZeroError",
    "Generator",
    "ParsedID",
    "ParsedID2",
    "SingleFieldGenerator",
    "epoch_config",
    "get_epoch",
    "new",
    "new2",
    "parse",
    "parse2",
    "set_epoch",
]
