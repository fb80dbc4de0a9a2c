"""Paid-advertising efficiency as a step function of testing maturity.

The calculator only ever offers five testing levels, so the model is an
explicit ladder keyed by those levels. Anything in between is rejected
rather than interpolated.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Optional

from roi_engine.engine.result import AdEfficiencyResult
from roi_engine.errors import InvalidInputError
from roi_engine.kpi_library.registry import register_metric
from roi_engine.models.enums import MaturityLevel
from roi_engine.validation import check_amount, check_number

logger = logging.getLogger(__name__)

# Share of the ad budget spent on creatives/audiences that never convert.
WASTE_FRACTION: dict[int, float] = {
    0: 0.40,
    25: 0.25,
    50: 0.15,
    75: 0.08,
    100: 0.00,
}

# ROAS gain still available when climbing from a level to full optimisation.
# Midpoints of the observed ranges: 3-5x, 2-3x, 1.5-2x, 1.2-1.5x.
REMAINING_ROAS_MULTIPLIER: dict[int, float] = {
    0: 4.0,
    25: 2.5,
    50: 1.75,
    75: 1.35,
    100: 1.0,
}

ALLOWED_TESTING_LEVELS: tuple[int, ...] = tuple(level.value for level in MaturityLevel)


def validate_testing_level(testing_level: int) -> int:
    """Return ``testing_level`` as an int or raise InvalidInputError."""
    if (
        isinstance(testing_level, bool)
        or not isinstance(testing_level, Real)
        or testing_level not in WASTE_FRACTION
    ):
        raise InvalidInputError(
            "testing_level",
            f"must be one of {list(ALLOWED_TESTING_LEVELS)}, got {testing_level!r}",
            testing_level,
        )
    return int(testing_level)


def next_testing_level(testing_level: int) -> int:
    """The next rung up the ladder; 100 is its own successor."""
    level = validate_testing_level(testing_level)
    index = ALLOWED_TESTING_LEVELS.index(level)
    return ALLOWED_TESTING_LEVELS[min(index + 1, len(ALLOWED_TESTING_LEVELS) - 1)]


def roas_for_testing_level(testing_level: int, base_roas: float) -> tuple[float, float]:
    """Return ``(current_roas, potential_roas)`` for a maturity level.

    ``base_roas`` is the ratio of untested spend, so level 0 reports it as
    the current ROAS; potential ROAS is the fully optimised ratio.
    """
    level = validate_testing_level(testing_level)
    if check_number("base_roas", base_roas) <= 0:
        raise InvalidInputError("base_roas", f"must be greater than 0, got {base_roas}", base_roas)
    potential = base_roas * REMAINING_ROAS_MULTIPLIER[0]
    if not math.isfinite(potential):
        raise InvalidInputError("base_roas", f"is too large, got {base_roas}", base_roas)
    current = potential / REMAINING_ROAS_MULTIPLIER[level]
    return current, potential


@register_metric(
    metric_id="ad_spend_savings",
    label="Recoverable Ad Spend",
    description=(
        "Monthly ad waste recovered by the next step of testing maturity. "
        "Formula: budget * (waste(level) - waste(next level)); at level 0 the whole waste."
    ),
    category="advertising",
)
def recoverable_ad_spend(ad_budget: float, testing_level: int) -> float:
    """Waste recovered by the next step of testing maturity.

    Without any testing the whole current waste counts as recoverable;
    otherwise only the gap to the next rung does.
    """
    ad_budget = check_amount("monthly_ad_budget", ad_budget)
    level = validate_testing_level(testing_level)
    if level == MaturityLevel.NONE:
        return ad_budget * WASTE_FRACTION[level]
    target = next_testing_level(level)
    return ad_budget * (WASTE_FRACTION[level] - WASTE_FRACTION[target])


def compute_ad_efficiency(
    ad_budget: float,
    testing_level: int,
    base_roas: float,
) -> Optional[AdEfficiencyResult]:
    """Model wasted spend and ROAS upside for a monthly ad budget.

    Returns None when there is no ad budget: ad modelling does not apply,
    which is different from "no effect".
    """
    level = validate_testing_level(testing_level)
    ad_budget = check_amount("monthly_ad_budget", ad_budget)
    current_roas, potential_roas = roas_for_testing_level(level, base_roas)
    if ad_budget == 0:
        return None

    waste_fraction = WASTE_FRACTION[level]
    result = AdEfficiencyResult(
        testing_level=level,
        waste_fraction=waste_fraction,
        current_roas=round(current_roas, 2),
        potential_roas=round(potential_roas, 2),
        wasted_ad_spend=round(ad_budget * waste_fraction, 2),
        ad_spend_savings=round(recoverable_ad_spend(ad_budget, level), 2),
        ad_revenue_increase=round(ad_budget * (potential_roas - current_roas), 2),
    )
    logger.debug(
        "Ad efficiency for budget=%s level=%s: wasted=%s savings=%s",
        ad_budget,
        level,
        result.wasted_ad_spend,
        result.ad_spend_savings,
    )
    return result
