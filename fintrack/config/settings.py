"""
Configuration Management for fintrack

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Storage keys, display options and simulator defaults live in one place
and are validated at startup.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Document storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FINTRACK_STORAGE_",
        extra="ignore"
    )

    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding the JSON documents"
    )

    # One document per key
    transactions_key: str = Field(
        default="finance-mvc-transactions",
        min_length=1,
        description="Key of the transaction list document"
    )
    meta_key: str = Field(
        default="finance-mvc-meta",
        min_length=1,
        description="Key of the insight meta snapshot document"
    )
    habits_key: str = Field(
        default="finance-mvc-habits",
        min_length=1,
        description="Key of the habit map document"
    )

    @field_validator('transactions_key', 'meta_key', 'habits_key')
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Keys become file names, so path separators are not allowed."""
        if "/" in v or "\\" in v:
            raise ValueError(f"Storage key must not contain path separators: {v}")
        return v


class DisplaySettings(BaseSettings):
    """Presentation configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FINTRACK_DISPLAY_",
        extra="ignore"
    )

    currency_symbol: str = Field(
        default="₹",
        max_length=5,
        description="Symbol prefixed to formatted amounts"
    )
    chart_width: int = Field(
        default=640,
        ge=100,
        le=4000,
        description="Projection chart width in pixels"
    )
    chart_height: int = Field(
        default=240,
        ge=60,
        le=2000,
        description="Projection chart height in pixels"
    )
    chart_padding: int = Field(
        default=20,
        ge=0,
        le=200,
        description="Padding around the projection chart"
    )
    chart_frames: int = Field(
        default=40,
        ge=1,
        le=240,
        description="Number of eased frames in the chart animation"
    )
    chart_frame_delay_ms: int = Field(
        default=16,
        ge=0,
        le=1000,
        description="Delay between animation frames"
    )


class SimulatorSettings(BaseSettings):
    """Net-worth simulator slider defaults and ranges."""

    model_config = SettingsConfigDict(
        env_prefix="FINTRACK_SIMULATOR_",
        extra="ignore"
    )

    default_months: int = Field(default=12, ge=1, le=120)
    max_months: int = Field(default=60, ge=1, le=600)
    default_income_growth: float = Field(default=2.0, ge=-100.0, le=100.0)
    default_expense_growth: float = Field(default=1.5, ge=-100.0, le=100.0)
    max_growth_percent: float = Field(
        default=10.0,
        gt=0.0,
        le=100.0,
        description="Upper bound of the growth sliders (lower bound is its negative)"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    debug_mode: bool = Field(
        default=False,
        description="Log at DEBUG regardless of log_level"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root log level"
    )

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug_mode else self.log_level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def display(self) -> DisplaySettings:
        return DisplaySettings()

    @property
    def simulator(self) -> SimulatorSettings:
        return SimulatorSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings sections.

    Returns a dict of {section_name: is_valid} plus a
    "<section>_error" entry for every invalid section.
    """
    results = {}
    settings = get_settings()

    for section in ("storage", "display", "simulator", "app"):
        try:
            getattr(settings, section)
            results[section] = True
        except ValueError as e:
            results[section] = False
            results[f"{section}_error"] = str(e)

    return results
