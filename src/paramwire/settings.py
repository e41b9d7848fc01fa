from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParamwireSettings(BaseSettings):
    """Converter configuration, read from ``PARAMWIRE_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="PARAMWIRE_", extra="ignore")

    default_identifier: str = Field(
        default="id",
        description="Request attribute holding the identifier when no ``id`` option is set.",
    )
    identifier_field: str = Field(
        default="id",
        description="Criteria field the identifier value is looked up by.",
    )
    require_finder_marker: bool = Field(
        default=False,
        description="Only invoke repository methods decorated with ``@finder``.",
    )
    converter_name: str = Field(default="odm")
    converter_priority: int = Field(default=0)


@lru_cache(maxsize=1)
def get_settings() -> ParamwireSettings:
    return ParamwireSettings()


__all__ = ["ParamwireSettings", "get_settings"]
