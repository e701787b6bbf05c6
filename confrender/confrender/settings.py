from __future__ import annotations

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.errors import SettingsError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CONFRENDER_", case_sensitive=False)

    properties_file: str = "properties.yml"
    config_dir: str = "config"
    template_suffix: str = ".tmpl"
    output_suffix: str = ".clj"
    file_mode: int = 0o644

    @field_validator("file_mode", mode="before")
    @classmethod
    def _parse_octal(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                return int(value, 8)
            except ValueError as e:
                raise ValueError(f"Invalid octal mode: {value!r}") from e
        return value


def load_settings() -> Settings:
    """Read settings from the environment."""
    try:
        return Settings()
    except ValidationError as e:
        raise SettingsError(f"Invalid settings: {e}") from e
