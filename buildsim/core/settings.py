"""Simulator settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from buildsim.core.improvement_constants import DEFAULT_EFFICIENCY_CAP


class SimSettings(BaseSettings):
    """Simulator configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON lines")
    log_file: Optional[str] = Field(default=None, description="Optional rotating log file path")

    # Efficiency policy
    cap_efficiency: bool = Field(default=True, description="Clamp efficiency on every update")
    efficiency_cap: float = Field(default=DEFAULT_EFFICIENCY_CAP, gt=0, description="Upper bound for efficiency")

    model_config = {
        "env_prefix": "BUILDSIM_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def effective_efficiency_cap(self) -> float | None:
        """Cap handed to new buildings, None under the uncapped policy."""
        return self.efficiency_cap if self.cap_efficiency else None


@lru_cache
def get_settings() -> SimSettings:
    """Get cached simulator settings."""
    return SimSettings()
