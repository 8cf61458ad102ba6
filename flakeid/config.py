from datetime import datetime
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.epoch import set_epoch
from .core.id_generator import DualFieldGenerator, Generator, SingleFieldGenerator


class Settings(BaseSettings):
    # Epoch (unset keeps the process-wide default)
    epoch: Optional[datetime] = None

    # Discriminators
    machine_id: int = 1
    process_id: Optional[int] = None

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="FLAKEID_", env_file=".env", case_sensitive=False
    )


def generator_from_settings(settings: Optional[Settings] = None) -> Generator:
    """Apply the configured epoch and build a generator for the configured IDs.

    A process_id selects the two-field layout (machine_id, process_id).
    """
    settings = settings if settings is not None else Settings()
    if settings.epoch is not None:
        set_epoch(settings.epoch)
    if settings.process_id is not None:
        return DualFieldGenerator(settings.machine_id, settings.process_id)
    return SingleFieldGenerator(settings.machine_id)
