"""Configuration for the elective share engine.

Pydantic Settings based configuration with environment variable and .env
support. The statutory tables (marriage tiers, asset rules) are fixed in
``elective_share.rules``; only the procedural windows are tunable here.

Usage:
    from elective_share.config import load_config

    config = load_config()
    print(config.rules.deadline_months)
"""

from datetime import date

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class RulesConfig(BaseSettings):
    """Procedural rule settings.

    Environment Variables:
        ELECTIVE_SHARE_RULES_DEADLINE_MONTHS: Months after letters issue
            before the claim must be filed
        ELECTIVE_SHARE_RULES_URGENT_THRESHOLD_DAYS: Remaining days at or
            below which the deadline is flagged as urgent
        ELECTIVE_SHARE_RULES_PROCEDURAL_CUTOVER_DATE: First filing date under
            the revised petition and service procedure
    """

    model_config = SettingsConfigDict(
        env_prefix="ELECTIVE_SHARE_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    deadline_months: int = Field(
        default=6,
        ge=1,
        le=24,
        description="Months after letters issue before the filing deadline",
    )
    urgent_threshold_days: int = Field(
        default=30,
        ge=0,
        le=365,
        description="Remaining days at or below which the deadline is urgent",
    )
    procedural_cutover_date: date = Field(
        default=date(2026, 1, 1),
        description="Claims filed on or after this date follow the revised procedure",
    )


class ElectiveShareConfig(BaseSettings):
    """Root configuration for the elective share engine.

    Environment Variables:
        ELECTIVE_SHARE_ENV: Environment name (development, staging, production, test)
        ELECTIVE_SHARE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ELECTIVE_SHARE_JSON_LOGS: Render logs as JSON instead of console output

    Example:
        config = ElectiveShareConfig(rules=RulesConfig(urgent_threshold_days=45))
    """

    model_config = SettingsConfigDict(
        env_prefix="ELECTIVE_SHARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: str = Field(
        default="development",
        description="Environment name (development, staging, production, test)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render structured logs as JSON",
    )

    rules: RulesConfig = Field(default_factory=RulesConfig)

    @field_validator("env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment name."""
        valid_envs = {"development", "staging", "production", "test"}
        v_lower = v.lower().strip()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid environment: {v}. Must be one of: {valid_envs}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper().strip()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {valid_levels}")
        return v_upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"

    @property
    def is_debug(self) -> bool:
        return self.log_level == "DEBUG"


def load_config(**overrides) -> ElectiveShareConfig:
    """Load configuration from the environment.

    Raises:
        ConfigurationError: If any setting fails validation.
    """
    try:
        return ElectiveShareConfig(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid elective share configuration for {key or 'settings'}",
            config_key=key or None,
            expected=first.get("msg"),
            actual=first.get("input"),
            details={"error_count": e.error_count()},
        ) from e
