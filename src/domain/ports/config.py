"""Config Port - interface for configuration access."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SigningAlgorithm = Literal["HS256", "HS384", "HS512"]


class WizardConfig(BaseModel):
    """Conversation settings."""

    # Fields that must be entered before a token can be emitted
    required_fields: list[str] = ["user_id", "email"]

    model_config = ConfigDict(extra="ignore")

    @field_validator("required_fields")
    @classmethod
    def _strip_fields(cls, value: list[str]) -> list[str]:
        return [f.strip() for f in value if f and f.strip()]


class SigningConfig(BaseModel):
    """Token signing settings."""

    algorithm: SigningAlgorithm = "HS256"
    # Empty = generate a random secret for this run
    secret: str = ""
    secret_bytes: int = Field(default=64, ge=32, le=512)

    model_config = ConfigDict(extra="ignore")


class AppConfig(BaseModel):
    """Full application configuration."""

    wizard: WizardConfig = WizardConfig()
    signing: SigningConfig = SigningConfig()
    log_level: str = "WARNING"
