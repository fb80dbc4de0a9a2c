"""Immutable result data structures."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Optional

# UI contract names for fields whose camelCase form is not mechanical
_EXPORT_NAMES = {
    "total_roi": "totalROI",
    "current_roas": "currentROAS",
    "potential_roas": "potentialROAS",
}


def _camel(name: str) -> str:
    if name in _EXPORT_NAMES:
        return _EXPORT_NAMES[name]
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _catalogued_fields():
    # Formulas register on import. Deferred because ad_efficiency imports this module.
    from roi_engine.engine import ad_efficiency  # noqa: F401
    from roi_engine.kpi_library import formulas  # noqa: F401
    from roi_engine.kpi_library.registry import definitions_by_field

    return definitions_by_field()


@dataclass(frozen=True)
class AdEfficiencyResult:
    """Paid-media efficiency at one testing maturity level."""

    testing_level: int
    waste_fraction: float
    current_roas: float
    potential_roas: float
    wasted_ad_spend: float
    ad_spend_savings: float
    ad_revenue_increase: float


@dataclass(frozen=True)
class ROIMetrics:
    """Snapshot of every projection for one set of calculator inputs.

    All amounts are monthly. ``break_even`` is None when the system never
    pays for itself; the three ad-spend fields are None when no ad budget
    was given.
    """

    time_saved: float
    labor_cost_savings: float
    content_output: float
    revenue_increase: float
    net_benefit: float
    total_roi: float
    break_even: Optional[float]
    productivity_multiplier: float
    roas: float
    current_roas: float
    potential_roas: float
    manual_monthly_cost: float
    automated_monthly_cost: float
    system_cost: float
    wasted_ad_spend: Optional[float] = None
    ad_spend_savings: Optional[float] = None
    ad_revenue_increase: Optional[float] = None

    @property
    def has_ad_efficiency(self) -> bool:
        return self.wasted_ad_spend is not None

    @property
    def pays_for_itself(self) -> bool:
        return self.net_benefit >= 0

    def to_dict(self) -> dict[str, Any]:
        """camelCase mapping for export and analytics; None fields are left out."""
        return {
            _camel(f.name): getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def to_report(self) -> list[dict[str, Any]]:
        """Labelled rows for every catalogued metric that has a value.

        Rows follow the catalogue's registration order and carry the export
        key, label, unit and category alongside the value.
        """
        rows = []
        for name, definition in _catalogued_fields().items():
            value = getattr(self, name, None)
            if value is None:
                continue
            rows.append(
                {
                    "key": _camel(name),
                    "label": definition.label,
                    "unit": definition.unit,
                    "category": definition.category,
                    "value": value,
                }
            )
        return rows


@dataclass(frozen=True)
class FactorScore:
    """One ICP factor, normalised to 0-100 before weighting."""

    points: float
    weight: float

    @property
    def weighted(self) -> float:
        return self.points * self.weight


@dataclass(frozen=True)
class ICPScore:
    """ICP fit score with its per-factor breakdown."""

    total_score: float
    breakdown: dict[str, FactorScore]
    inferred_pain_points: list[str] = field(default_factory=list)
    max_score: float = 100.0

    @property
    def percentage(self) -> int:
        return round(self.total_score / self.max_score * 100)

    def describe(self) -> str:
        """Human-readable breakdown, for debugging and support tickets."""
        lines = [
            f"Score: {self.total_score:g}/{self.max_score:g} ({self.percentage}%)",
            "",
            "Breakdown:",
        ]
        for name, factor in self.breakdown.items():
            label = name.replace("_", " ").title()
            lines.append(
                f"- {label}: {factor.points:g}/100 x {factor.weight:g} = {factor.weighted:g}"
            )
        return "\n".join(lines)
