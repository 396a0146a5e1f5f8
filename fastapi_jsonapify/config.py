"""Configuration for the JSON:API hook."""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults loaded from environment variables with JSONAPIFY_ prefix."""

    # Plain records without model metadata
    identifier_key: str | None = None
    type_key: str | None = None
    # Pagination links
    skip_param: str = "$skip"
    # Responses
    media_type: str = "application/vnd.api+json"

    model_config = SettingsConfigDict(env_prefix="JSONAPIFY_")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


class HookOptions(BaseModel):
    """Options recognized by :class:`fastapi_jsonapify.hooks.JSONAPIHook`.

    Accepts both ``identifierKey``/``typeKey`` and their snake_case names.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    identifier_key: str | None = Field(default=None, alias="identifierKey")
    type_key: str | None = Field(default=None, alias="typeKey")
    skip_param: str = Field(default="$skip", alias="skipParam")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "HookOptions":
        settings = settings or get_settings()
        return cls(
            identifier_key=settings.identifier_key,
            type_key=settings.type_key,
            skip_param=settings.skip_param,
        )
