"""Config validation errors.

Every error names the environment variable involved and, when known, the
settings class being loaded, both in its message and in ``detail``.
"""
from __future__ import annotations

from typing import Any

from searchbase.kernel.errors import BaseError

_MASK = "'***'"


class ConfigError(BaseError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"

    def __init__(self, message: str, *, settings_class: str | None = None, **kwargs: Any) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if settings_class is not None:
            detail["settings_class"] = settings_class
        super().__init__(message, detail=detail, **kwargs)
        self.settings_class = settings_class


class MissingRequiredSettingError(ConfigError):
    """A required environment variable is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, settings_class: str | None = None) -> None:
        owner = f" for {settings_class}" if settings_class else ""
        super().__init__(
            f"Required setting '{setting_name}'{owner} is missing",
            settings_class=settings_class,
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but unusable.

    With ``secret=True`` the offending value is kept on the instance but
    never rendered into the message.
    """
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        settings_class: str | None = None,
        secret: bool = False,
    ) -> None:
        shown = _MASK if secret else repr(value)
        super().__init__(
            f"Setting '{setting_name}' has invalid value {shown}: {reason}",
            settings_class=settings_class,
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
