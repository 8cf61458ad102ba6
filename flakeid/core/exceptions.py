"""Errors raised when configuring the identifier epoch."""


class EpochError(ValueError):
    """Base class for rejected epoch changes."""


class EpochIsZeroError(EpochError):
    def __init__(self) -> None:
        super().__init__("epoch is zero")


class EpochInFutureError(EpochError):
    def __init__(self, candidate) -> None:
        super().__init__(f"epoch is in the future: {candidate.isoformat()}")
        self.candidate = candidate
