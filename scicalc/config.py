"""Window settings."""

import logging
from dataclasses import dataclass

from .history import DEFAULT_EXPORT_NAME
from .state import AngleUnit, Mode

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Settings:
    dark_mode: bool = True
    start_mode: Mode = Mode.NORMAL
    angle_unit: AngleUnit = AngleUnit.DEGREES
    export_filename: str = DEFAULT_EXPORT_NAME
    log_level: str = "WARNING"

    def validate(self) -> None:
        try:
            self.start_mode = Mode(self.start_mode)
            self.angle_unit = AngleUnit(self.angle_unit)
        except ValueError as exc:
            raise ValueError(f"invalid setting: {exc}") from None
        if not self.export_filename.strip():
            raise ValueError("export_filename must not be empty")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())
