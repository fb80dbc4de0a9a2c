"""Input snapshots handed to the engine by the calculator UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .enums import ChannelsBucket, TeamSizeBucket


@dataclass(frozen=True)
class CalculatorInputs:
    """One snapshot of the calculator form.

    ``marketing_spend`` only feeds ICP pain-point inference;
    ``monthly_ad_budget`` is paid media and is modelled separately.
    """

    team_size: int
    avg_salary: float
    campaigns_per_month: int
    channels: ChannelsBucket
    marketing_spend: float = 0.0
    monthly_ad_budget: float = 0.0
    testing_level: int = 0


@dataclass(frozen=True)
class ICPInputData:
    """Bucketed lead attributes used for ICP scoring."""

    team_size: TeamSizeBucket
    channels: ChannelsBucket
    pain_points: list[str] = field(default_factory=list)
    industry: str = "other"
    current_spend: Optional[float] = None


@dataclass(frozen=True)
class JourneyContext:
    """How deeply a visitor has engaged with the site."""

    completed_steps: int = 0
    time_on_site: float = 0.0  # seconds
    explored_modules: int = 0
    calculator_completed: bool = False
