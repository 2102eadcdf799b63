"""Library settings powered by Pydantic BaseSettings."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EeveeSettings(BaseSettings):
    """Environment configuration for eevee's own logging behavior."""

    model_config = SettingsConfigDict(env_prefix="EEVEE_", case_sensitive=False)

    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)
    log_values: bool = Field(
        default=False,
        description="Include non-secret values in lookup log events.",
    )

    def log_level_number(self) -> int:
        """Return the configured level as a ``logging`` level number."""
        level = logging.getLevelName(self.log_level.upper())
        if isinstance(level, int):
            return level
        return logging.INFO


def get_settings() -> EeveeSettings:
    """Get a settings instance."""
    return EeveeSettings()
