"""Config – library-wide settings read from ``VALKIT_*`` variables."""
from __future__ import annotations

import dataclasses
import functools
import logging

from valkit.config.settings import EnvSettingsLoader, Settings
from valkit.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class ValkitSettings(Settings):
    """Settings honoured by valkit itself.

    Attributes:
        log_level: Stdlib level name applied by :func:`configure_logging`.
        log_json: Render log events as JSON (``False`` selects the console renderer).
        log_misuse: Emit a ``valkit.unwrap_misuse`` event before an
            :class:`~valkit.kernel.errors.UnwrapError` is raised.
    """

    _prefix = "valkit"

    log_level: str = "INFO"
    log_json: bool = True
    log_misuse: bool = True

    def _validate(self) -> None:
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError(self.env_key("log_level"), self.log_level, "unknown logging level")

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level.upper()]


@functools.lru_cache(maxsize=1)
def get_settings() -> ValkitSettings:
    """Load :class:`ValkitSettings` from the environment once and cache it."""
    return EnvSettingsLoader().load(ValkitSettings)


def reset_settings() -> None:
    """Drop the cached settings so the next :func:`get_settings` re-reads the environment."""
    get_settings.cache_clear()


__all__ = ["ValkitSettings", "get_settings", "reset_settings"]
