"""Configuration management using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="ROBTOOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Study defaults
    default_study_type: str = Field(
        "caseControl",
        pattern="^(caseControl|cohort)$",
        description="Design assigned to studies added without an explicit type",
    )
    study_name_template: str = Field(
        "Study {id}",
        description="Format string for default study names; receives ``id``",
    )

    # Logging
    log_level: str = Field("INFO")
    log_format: str = Field("json", pattern="^(json|text)$")

    @field_validator("study_name_template")
    @classmethod
    def _check_template(cls, v: str) -> str:
        try:
            v.format(id=1)
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(f"Invalid study name template {v!r}: {exc}") from exc
        return v


# Instantiate global settings
settings = Settings()
