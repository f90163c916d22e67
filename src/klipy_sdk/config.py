"""Extension preferences backed by pydantic-settings.

Every value can be supplied as a keyword argument (the launcher's stored
preferences) or through an environment variable with the ``KLIPY_``
prefix, e.g. ``KLIPY_API_KEY`` or ``KLIPY_RESULT_LIMIT``.  Blank strings are
treated as "not set": optional fields become ``None`` and fields with a
default fall back to it.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from klipy_sdk.models.enums import DefaultAction

DEFAULT_BASE_URL = "https://api.klipy.com"
DEFAULT_RESULT_LIMIT = 30
MAX_RESULT_LIMIT = 50


class Preferences(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KLIPY_", frozen=True)

    api_key: str = ""
    client_key: str | None = None
    api_base_url: str = DEFAULT_BASE_URL
    default_action: DefaultAction = DefaultAction.copy
    open_with_app: str | None = None
    default_media_format: str = "gif"
    media_filter: str = "gif,tinygif,mp4,tinymp4,nanogif"
    content_filter: str = "medium"
    result_limit: int = DEFAULT_RESULT_LIMIT
    country: str | None = None
    locale: str | None = None

    @field_validator("api_key", mode="before")
    @classmethod
    def _strip_key(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value

    @field_validator("client_key", "open_with_app", "country", "locale", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator(
        "api_base_url", "default_media_format", "media_filter", "content_filter", mode="before"
    )
    @classmethod
    def _blank_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.model_fields[info.field_name].default
        return value.strip() if isinstance(value, str) else value

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slashes(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("default_action", mode="before")
    @classmethod
    def _default_action(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DefaultAction.copy
        return value

    @field_validator("result_limit", mode="before")
    @classmethod
    def _clamp_limit(cls, value: Any) -> int:
        try:
            parsed = int(str(value).strip())
        except (TypeError, ValueError):
            parsed = 0
        if parsed <= 0:
            parsed = DEFAULT_RESULT_LIMIT
        return min(parsed, MAX_RESULT_LIMIT)

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def get_preferences(**overrides: Any) -> Preferences:
    """Return a fresh, immutable preferences snapshot (env + overrides)."""
    return Preferences(**overrides)
