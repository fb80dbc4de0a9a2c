"""ROI formula implementations for the marketing automation calculator.

Each function is a pure monthly calculation with no side effects and no
rounding; ``engine.calculator`` composes and rounds them. Monetary values are
in whatever currency the salary was given in (the site shows EUR).
"""

from roi_engine.errors import DomainError, InvalidInputError
from roi_engine.kpi_library.registry import register_metric

MONTHS_PER_YEAR = 12


def _require_non_negative(name: str, value: float) -> None:
    if value < 0:
        raise InvalidInputError(name, "cannot be negative", value)


def _require_positive(name: str, value: float) -> None:
    if value <= 0:
        raise InvalidInputError(name, f"must be greater than 0, got {value}", value)


def manual_monthly_cost(
    avg_salary: float,
    team_size: float,
    manual_work_share: float,
) -> float:
    """Manual_Cost = (avg_salary / 12) * team_size * manual_work_share"""
    _require_non_negative("avg_salary", avg_salary)
    _require_non_negative("team_size", team_size)
    return (avg_salary / MONTHS_PER_YEAR) * team_size * manual_work_share


def automated_monthly_cost(avg_salary: float, automated_team_size: float) -> float:
    """Automated_Cost = (avg_salary / 12) * automated_team_size"""
    _require_non_negative("avg_salary", avg_salary)
    return (avg_salary / MONTHS_PER_YEAR) * automated_team_size


@register_metric(
    metric_id="labor_cost_savings",
    label="Labor Cost Savings",
    description=(
        "Monthly labor cost no longer spent on automatable work. "
        "Formula: max(manual_cost - automated_cost, 0)."
    ),
    result_field="labor_cost_savings",
    category="savings",
)
def calc_labor_cost_savings(
    avg_salary: float,
    team_size: float,
    manual_work_share: float,
    automated_team_size: float,
) -> float:
    """Labor_Savings = max(Manual_Cost - Automated_Cost, 0)"""
    manual = manual_monthly_cost(avg_salary, team_size, manual_work_share)
    automated = automated_monthly_cost(avg_salary, automated_team_size)
    return max(manual - automated, 0.0)


@register_metric(
    metric_id="time_saved",
    label="Hours Saved per Month",
    description=(
        "Hours reclaimed from the manual baseline. "
        "Formula: max(team_size * manual_share - automated_team, 0) * hours_per_month."
    ),
    result_field="time_saved",
    unit="hours",
    category="productivity",
)
def calc_time_saved(
    team_size: float,
    manual_work_share: float,
    automated_team_size: float,
    hours_per_month: float,
) -> float:
    """Hours_Saved = max(FTE_manual - FTE_automated, 0) * hours_per_month"""
    _require_non_negative("team_size", team_size)
    _require_positive("hours_per_month", hours_per_month)
    freed_fte = team_size * manual_work_share - automated_team_size
    return max(freed_fte, 0.0) * hours_per_month


@register_metric(
    metric_id="content_output",
    label="Campaigns per Month",
    description=(
        "Campaign cadence reachable with automation. "
        "Formula: campaigns_per_month * productivity_gain."
    ),
    result_field="content_output",
    unit="campaigns",
    category="productivity",
)
def calc_content_output(campaigns_per_month: float, productivity_gain: float) -> float:
    """Content_Output = campaigns_per_month x productivity_gain"""
    _require_non_negative("campaigns_per_month", campaigns_per_month)
    return campaigns_per_month * productivity_gain


@register_metric(
    metric_id="productivity_multiplier",
    label="Productivity Multiplier",
    description="Formula: content_output / campaigns_per_month.",
    result_field="productivity_multiplier",
    unit="ratio",
    category="productivity",
)
def calc_productivity_multiplier(
    content_output: float,
    campaigns_per_month: float,
) -> float:
    """Multiplier = content_output / campaigns_per_month"""
    _require_positive("campaigns_per_month", campaigns_per_month)
    return content_output / campaigns_per_month


@register_metric(
    metric_id="revenue_increase",
    label="Revenue Increase",
    description=(
        "Monthly revenue from the additional campaigns. "
        "Formula: (content_output - campaigns_per_month) * revenue_per_campaign."
    ),
    result_field="revenue_increase",
    category="revenue",
)
def calc_revenue_increase(
    content_output: float,
    campaigns_per_month: float,
    revenue_per_campaign: float,
) -> float:
    """Revenue_Lift = max(content_output - campaigns, 0) * revenue_per_campaign"""
    _require_non_negative("revenue_per_campaign", revenue_per_campaign)
    additional_campaigns = max(content_output - campaigns_per_month, 0.0)
    return additional_campaigns * revenue_per_campaign


@register_metric(
    metric_id="net_benefit",
    label="Net Monthly Benefit",
    description="Formula: labor_cost_savings + revenue_increase - system_cost.",
    result_field="net_benefit",
    category="summary",
)
def calc_net_benefit(
    labor_cost_savings: float,
    revenue_increase: float,
    system_cost: float,
) -> float:
    """Net_Benefit = labor_savings + revenue_lift - system_cost (may be negative)"""
    return labor_cost_savings + revenue_increase - system_cost


@register_metric(
    metric_id="total_roi",
    label="Return on Investment",
    description=(
        "Monthly net benefit relative to the platform cost, in percent. "
        "Formula: net_benefit / system_cost * 100."
    ),
    result_field="total_roi",
    unit="percent",
    category="summary",
)
def calc_total_roi(net_benefit: float, system_cost: float) -> float:
    """ROI_% = net_benefit / system_cost x 100

    Monthly basis. Annual figures are the presentation layer's job; the
    percentage is the same either way because both sides scale by 12.
    """
    _require_positive("system_cost", system_cost)
    return (net_benefit / system_cost) * 100


@register_metric(
    metric_id="break_even",
    label="Break-even (months)",
    description="Formula: system_cost / (labor_cost_savings + revenue_increase).",
    result_field="break_even",
    unit="months",
    category="summary",
)
def calc_break_even(
    labor_cost_savings: float,
    revenue_increase: float,
    system_cost: float,
) -> float:
    """Break_Even = system_cost / monthly_benefit

    Raises DomainError when the monthly benefit is not positive.
    """
    _require_non_negative("system_cost", system_cost)
    monthly_benefit = labor_cost_savings + revenue_increase
    if monthly_benefit <= 0:
        raise DomainError(
            f"no break-even: monthly benefit is {monthly_benefit}, must be positive"
        )
    return system_cost / monthly_benefit


@register_metric(
    metric_id="roas",
    label="Campaign Return on Spend",
    description="Formula: revenue_increase / system_cost.",
    result_field="roas",
    unit="ratio",
    category="revenue",
)
def calc_roas(revenue_increase: float, system_cost: float) -> float:
    """ROAS = revenue_lift / system_cost"""
    _require_positive("system_cost", system_cost)
    return revenue_increase / system_cost
