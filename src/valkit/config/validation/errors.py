"""Errors raised while reading ``VALKIT_*`` (or any prefixed) settings.

Each carries the offending environment key in ``context["setting"]``.
"""
from __future__ import annotations

from valkit.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded."""
    code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without default has no environment variable."""
    code = "missing_required_setting"

    def __init__(self, setting: str) -> None:
        super().__init__(f"{setting} is not set", setting=setting)
        self.setting = setting


class InvalidSettingValueError(ConfigError):
    """An environment variable is set but cannot be used."""
    code = "invalid_setting_value"

    def __init__(self, setting: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting}={value!r} is invalid: {reason}", setting=setting, value=value, reason=reason
        )
        self.setting = setting
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
