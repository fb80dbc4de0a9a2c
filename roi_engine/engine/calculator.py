"""Core ROI calculation.

Takes one snapshot of calculator inputs plus the commercial constants and
produces an ``ROIMetrics``. Inputs are validated up front; nothing is
computed for an invalid snapshot.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from roi_engine.config.settings import SystemConstants, get_default_constants
from roi_engine.engine.ad_efficiency import (
    compute_ad_efficiency,
    roas_for_testing_level,
    validate_testing_level,
)
from roi_engine.engine.result import ROIMetrics
from roi_engine.errors import DomainError, InvalidInputError
from roi_engine.kpi_library.formulas import (
    automated_monthly_cost,
    calc_break_even,
    calc_content_output,
    calc_labor_cost_savings,
    calc_net_benefit,
    calc_productivity_multiplier,
    calc_revenue_increase,
    calc_roas,
    calc_time_saved,
    calc_total_roi,
    manual_monthly_cost,
)
from roi_engine.models.enums import ChannelsBucket
from roi_engine.models.inputs import CalculatorInputs
from roi_engine.validation import check_amount, check_positive_int

logger = logging.getLogger(__name__)


def validate_inputs(inputs: CalculatorInputs) -> None:
    """Raise InvalidInputError naming the first invalid field."""
    check_positive_int("team_size", inputs.team_size)
    check_amount("avg_salary", inputs.avg_salary, allow_zero=False)
    check_positive_int("campaigns_per_month", inputs.campaigns_per_month)
    check_amount("marketing_spend", inputs.marketing_spend)
    check_amount("monthly_ad_budget", inputs.monthly_ad_budget)
    try:
        ChannelsBucket(inputs.channels)
    except ValueError:
        raise InvalidInputError(
            "channels",
            f"must be one of {[c.value for c in ChannelsBucket]}, got {inputs.channels!r}",
            inputs.channels,
        ) from None
    validate_testing_level(inputs.testing_level)


def _break_even_or_none(
    labor_cost_savings: float,
    revenue_increase: float,
    system_cost: float,
) -> Optional[float]:
    try:
        return round(calc_break_even(labor_cost_savings, revenue_increase, system_cost), 1)
    except DomainError as e:
        logger.warning("Break-even not applicable: %s", e)
        return None


def _require_finite(**values: float) -> None:
    """Reject overflowed projections before they are rounded and returned."""
    for name, value in values.items():
        if not math.isfinite(value):
            raise DomainError(f"{name} is not finite ({value}); check the system constants")


def compute_roi_metrics(
    inputs: CalculatorInputs,
    constants: Optional[SystemConstants] = None,
) -> ROIMetrics:
    """Derive every ROI projection from one input snapshot."""
    validate_inputs(inputs)
    c = constants or get_default_constants()

    manual_cost = manual_monthly_cost(inputs.avg_salary, inputs.team_size, c.manual_work_share)
    automated_cost = automated_monthly_cost(inputs.avg_salary, c.automated_team_size)
    labor_cost_savings = calc_labor_cost_savings(
        avg_salary=inputs.avg_salary,
        team_size=inputs.team_size,
        manual_work_share=c.manual_work_share,
        automated_team_size=c.automated_team_size,
    )
    time_saved = calc_time_saved(
        team_size=inputs.team_size,
        manual_work_share=c.manual_work_share,
        automated_team_size=c.automated_team_size,
        hours_per_month=c.hours_per_month,
    )
    content_output = calc_content_output(inputs.campaigns_per_month, c.productivity_gain)
    productivity_multiplier = calc_productivity_multiplier(
        content_output, inputs.campaigns_per_month
    )
    revenue_increase = calc_revenue_increase(
        content_output, inputs.campaigns_per_month, c.revenue_per_campaign
    )
    net_benefit = calc_net_benefit(labor_cost_savings, revenue_increase, c.system_cost)
    total_roi = calc_total_roi(net_benefit, c.system_cost)
    break_even = _break_even_or_none(labor_cost_savings, revenue_increase, c.system_cost)
    roas = calc_roas(revenue_increase, c.system_cost)

    current_roas, potential_roas = roas_for_testing_level(inputs.testing_level, c.base_roas)
    ad = compute_ad_efficiency(inputs.monthly_ad_budget, inputs.testing_level, c.base_roas)

    _require_finite(
        manual_monthly_cost=manual_cost,
        time_saved=time_saved,
        labor_cost_savings=labor_cost_savings,
        content_output=content_output,
        revenue_increase=revenue_increase,
        net_benefit=net_benefit,
        total_roi=total_roi,
        productivity_multiplier=productivity_multiplier,
        roas=roas,
        current_roas=current_roas,
        potential_roas=potential_roas,
        wasted_ad_spend=ad.wasted_ad_spend if ad else 0.0,
        ad_revenue_increase=ad.ad_revenue_increase if ad else 0.0,
    )

    metrics = ROIMetrics(
        time_saved=round(time_saved),
        labor_cost_savings=round(labor_cost_savings, 2),
        content_output=round(content_output),
        revenue_increase=round(revenue_increase, 2),
        net_benefit=round(net_benefit, 2),
        total_roi=round(total_roi, 1),
        break_even=break_even,
        productivity_multiplier=round(productivity_multiplier, 2),
        roas=round(roas, 2),
        current_roas=round(current_roas, 2),
        potential_roas=round(potential_roas, 2),
        manual_monthly_cost=round(manual_cost, 2),
        automated_monthly_cost=round(automated_cost, 2),
        system_cost=c.system_cost,
        wasted_ad_spend=ad.wasted_ad_spend if ad else None,
        ad_spend_savings=ad.ad_spend_savings if ad else None,
        ad_revenue_increase=ad.ad_revenue_increase if ad else None,
    )
    logger.debug(
        "ROI metrics for team_size=%s campaigns=%s: net_benefit=%s roi=%s%%",
        inputs.team_size,
        inputs.campaigns_per_month,
        metrics.net_benefit,
        metrics.total_roi,
    )
    return metrics
