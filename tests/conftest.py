"""Shared test fixtures for the projection engine test suite."""

import pytest

from roi_engine.config.settings import SystemConstants
from roi_engine.models.enums import ChannelsBucket, TeamSizeBucket
from roi_engine.models.inputs import CalculatorInputs, ICPInputData


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    """Keep ROI_* variables and stray .env files out of the constants."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "ROI_SYSTEM_COST",
        "ROI_REVENUE_PER_CAMPAIGN",
        "ROI_HOURS_PER_MONTH",
        "ROI_PRODUCTIVITY_GAIN",
        "ROI_MANUAL_WORK_SHARE",
        "ROI_AUTOMATED_TEAM_SIZE",
        "ROI_BASE_ROAS",
        "ROI_AGENCY_COST_SPEND_THRESHOLD",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def constants() -> SystemConstants:
    return SystemConstants()


@pytest.fixture
def small_team() -> CalculatorInputs:
    """Five marketers on EUR 60k, ten campaigns a month.

    Manual cost 12,500/month against 10,000/month for the two people kept
    on to run the platform.
    """
    return CalculatorInputs(
        team_size=5,
        avg_salary=60_000,
        campaigns_per_month=10,
        channels=ChannelsBucket.THREE_TO_FIVE,
    )


@pytest.fixture
def advertiser() -> CalculatorInputs:
    """Mid-sized team that also spends 10k/month on paid media."""
    return CalculatorInputs(
        team_size=20,
        avg_salary=60_000,
        campaigns_per_month=10,
        channels=ChannelsBucket.SIX_TO_TEN,
        marketing_spend=12_000,
        monthly_ad_budget=10_000,
        testing_level=25,
    )


@pytest.fixture
def enterprise_lead() -> ICPInputData:
    return ICPInputData(
        team_size=TeamSizeBucket.FIFTY_PLUS,
        channels=ChannelsBucket.TEN_PLUS,
        pain_points=[
            "agency-cost",
            "manual-work",
            "scaling-problem",
            "channel-overload",
            "content-bottleneck",
            "hiring-limitation",
        ],
        industry="ecommerce",
    )


@pytest.fixture
def lean_lead() -> ICPInputData:
    return ICPInputData(
        team_size=TeamSizeBucket.SOLO_TO_FIVE,
        channels=ChannelsBucket.ONE_TO_TWO,
        pain_points=[],
        industry="other",
    )
