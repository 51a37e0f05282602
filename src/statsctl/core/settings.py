"""Configuration settings for statsctl."""

from __future__ import annotations

import threading

from pydantic import Field
from pydantic_settings import BaseSettings


class StatsctlSettings(BaseSettings):
    """Configuration settings for statsctl operations.

    Settings are organized into categories:

    Plot sizing (character cells, clamped again by each plot):
    - histogram_width / histogram_height
    - boxplot_width
    - scatter_width / scatter_height

    Analysis defaults:
    - correlation_threshold: minimum |r| reported as a high correlation

    Data loading limits:
    - max_rows: hard limit for loaded row count
    """

    # Plot sizing
    histogram_width: int = Field(default=50, description="Histogram width budget in characters")
    histogram_height: int = Field(default=12, description="Histogram height budget in rows")
    boxplot_width: int = Field(default=50, description="Boxplot width budget in characters")
    scatter_width: int = Field(default=50, description="Scatter plot width budget in characters")
    scatter_height: int = Field(default=15, description="Scatter plot height budget in rows")

    # Analysis defaults
    correlation_threshold: float = Field(
        default=0.5, description="Minimum absolute correlation reported as a high correlation"
    )

    # Data loading limits
    max_rows: int = Field(
        default=1_000_000,
        description="Maximum rows per dataset (hard limit, loading fails if exceeded)",
    )

    log_level: str = Field(default="INFO", description="Log level for the statsctl logger")

    model_config = {"env_prefix": "STATSCTL_", "case_sensitive": False}


_settings: StatsctlSettings | None = None
_lock = threading.Lock()


def create_settings() -> StatsctlSettings:
    """Create a new statsctl settings instance."""
    return StatsctlSettings()


def get_settings() -> StatsctlSettings:
    """Create or get the global statsctl settings instance."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        with _lock:
            if _settings is None:
                _settings = create_settings()
    return _settings


def reset_settings() -> None:
    """Reset the global statsctl settings instance."""
    global _settings  # noqa: PLW0603
    with _lock:
        _settings = None
