"""Commercial assumptions behind every projection.

Values can be overridden through ``ROI_*`` environment variables or a
``.env`` file, or by constructing ``SystemConstants`` directly.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SystemConstants(BaseSettings):
    """Injectable constants for the ROI, ROAS and ICP models."""

    model_config = SettingsConfigDict(
        env_prefix="ROI_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    system_cost: float = Field(
        default=15_000.0, gt=0, description="Monthly platform cost"
    )
    revenue_per_campaign: float = Field(
        default=800.0, ge=0, description="Revenue attributed to each extra campaign"
    )
    hours_per_month: float = Field(
        default=160.0, gt=0, description="Working hours per employee per month"
    )
    productivity_gain: float = Field(
        default=4.0, ge=1.0, description="Campaign throughput multiplier with automation"
    )
    manual_work_share: float = Field(
        default=0.5,
        gt=0,
        le=1.0,
        description="Share of team time-cost spent on automatable work",
    )
    automated_team_size: float = Field(
        default=2.0, ge=0, description="Dedicated staff kept to run the platform"
    )
    base_roas: float = Field(
        default=2.0, gt=0, description="ROAS of untested ad spend"
    )
    agency_cost_spend_threshold: float = Field(
        default=10_000.0,
        ge=0,
        description="Monthly spend from which 'agency-cost' is inferred",
    )

    @model_validator(mode="after")
    def automated_team_is_whole_people(self) -> SystemConstants:
        if not float(self.automated_team_size).is_integer():
            raise ValueError(
                f"automated_team_size must be a whole number of people, "
                f"got {self.automated_team_size}"
            )
        return self


@lru_cache(maxsize=1)
def get_default_constants() -> SystemConstants:
    """Return the process-wide default constants."""
    return SystemConstants()
