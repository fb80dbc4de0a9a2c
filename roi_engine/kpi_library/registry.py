"""Catalogue of the metrics an ``ROIMetrics`` snapshot exposes.

Formulas register themselves on import; export layers read the catalogue to
label and order fields without knowing the formulas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

# metric id -> MetricDefinition, in registration order
_CATALOGUE: dict[str, MetricDefinition] = {}


@dataclass(frozen=True)
class MetricDefinition:
    """A derived metric and the ``ROIMetrics`` field it fills."""

    id: str
    label: str
    description: str
    result_field: str
    formula_fn: Callable[..., float]
    unit: str = "currency"
    category: str = "savings"


def register_metric(
    metric_id: str,
    label: str,
    description: str,
    result_field: Optional[str] = None,
    unit: str = "currency",
    category: str = "savings",
) -> Callable:
    """Decorator adding a formula to the catalogue.

    ``result_field`` defaults to the metric id. Registering the same id from
    a different function is a programming error.
    """

    def decorator(fn: Callable[..., float]) -> Callable[..., float]:
        existing = _CATALOGUE.get(metric_id)
        if existing is not None and existing.formula_fn.__qualname__ != fn.__qualname__:
            raise ValueError(
                f"Metric '{metric_id}' already registered by {existing.formula_fn.__qualname__}"
            )
        _CATALOGUE[metric_id] = MetricDefinition(
            id=metric_id,
            label=label,
            description=description,
            result_field=result_field or metric_id,
            formula_fn=fn,
            unit=unit,
            category=category,
        )
        return fn

    return decorator


def get_metric(metric_id: str) -> Optional[MetricDefinition]:
    return _CATALOGUE.get(metric_id)


def get_all_metrics() -> dict[str, MetricDefinition]:
    """Copy of the catalogue, in registration order."""
    return dict(_CATALOGUE)


def definitions_by_field() -> dict[str, MetricDefinition]:
    """Map each ``ROIMetrics`` field fed by a registered formula to its definition."""
    return {d.result_field: d for d in _CATALOGUE.values()}
