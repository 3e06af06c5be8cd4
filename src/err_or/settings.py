"""Environment-driven settings for err-or.

The library itself needs no configuration to convert values; settings only
control how its diagnostics are logged.

Features:
    - **ErrOrSettings:** log level, renderer and service name
    - **env_prefix:** ``ERR_OR_`` namespacing (``ERR_OR_LOG_LEVEL=DEBUG``)
    - **.env file support:** Automatic loading via pydantic-settings
    - **Extra ignore:** Unknown env vars don't cause startup failures

Examples:
    >>> from err_or.settings import ErrOrSettings
    >>> ErrOrSettings(log_level="debug").log_level
    'DEBUG'

Tags:
    settings, configuration, pydantic, environment, err-or

Requires the ``pydantic-settings`` optional extra::

    pip install err-or[settings]
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "err_or.settings requires pydantic-settings. Install it with: pip install err-or[settings]"
    ) from exc

from pydantic import Field, field_validator


class ErrOrSettings(BaseSettings):
    """Settings read from ``ERR_OR_*`` environment variables.

    Fields
    ──────
    log_level     : Structlog log level
    log_json      : JSON renderer if True, console if False, auto-detect if unset
    service_name  : ``service.name`` attached to every log event
    """

    model_config = SettingsConfigDict(
        env_prefix="ERR_OR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="WARNING")
    log_json: bool | None = Field(
        default=None,
        description="Render JSON logs; None picks JSON when stdout is not a TTY",
    )
    service_name: str = Field(default="err-or")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, ErrOrSettings] = {}


def get_settings(*, force_reload: bool = False) -> ErrOrSettings:
    """Load and cache an :class:`ErrOrSettings` instance.

    Pass ``force_reload=True`` after changing the environment.
    """
    if force_reload or "default" not in _settings_cache:
        _settings_cache["default"] = ErrOrSettings()
    return _settings_cache["default"]


def clear_settings_cache() -> None:
    """Drop the cached settings (used by tests)."""
    _settings_cache.clear()


__all__ = ["ErrOrSettings", "get_settings", "clear_settings_cache"]
