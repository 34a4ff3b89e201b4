"""Config settings – Settings base class and SagaStorageSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from saga_storage.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class SagaStorageSettings(Settings):
    """Runtime knobs for the saga storage and its callers.

    Read from ``SAGA_STORAGE_*`` environment variables by
    :class:`~saga_storage.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "SAGA_STORAGE"

    log_level: str = "INFO"
    json_logs: bool = True
    retry_max_attempts: int = 5
    retry_max_wait_seconds: float = 0.5

    def _validate(self) -> None:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        if self.retry_max_attempts < 1:
            raise InvalidSettingValueError(
                "retry_max_attempts", self.retry_max_attempts, "must be at least 1"
            )
        if self.retry_max_wait_seconds < 0:
            raise InvalidSettingValueError(
                "retry_max_wait_seconds", self.retry_max_wait_seconds, "must not be negative"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["SagaStorageSettings", "Settings"]
