"""Config settings – FlowSettings for controllers and logging."""
from __future__ import annotations

import dataclasses
import logging

from flowware.config.settings.base import Settings
from flowware.config.validation import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class FlowSettings(Settings):
    """Runtime knobs read from ``FLOWWARE_*`` environment variables.

    * ``log_level`` – root log level applied by ``configure_logging``.
    * ``json_logs`` – render JSON lines (``True``) or console output.
    * ``trace_calls`` – log registrations, scope creation and the completion /
      failure of every flow call.
    """

    _prefix: dataclasses.ClassVar[str] = "FLOWWARE"

    log_level: str = "INFO"
    json_logs: bool = True
    trace_calls: bool = False

    def _validate(self) -> None:
        level = self.log_level.upper()
        if level not in _LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LEVELS)}"
            )
        self.log_level = level

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["FlowSettings"]
