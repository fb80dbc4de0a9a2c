"""Quantitative projection engine behind the marketing ROI calculator."""

from .config.settings import SystemConstants, get_default_constants
from .engine.ad_efficiency import compute_ad_efficiency, roas_for_testing_level
from .engine.calculator import compute_roi_metrics, validate_inputs
from .engine.result import AdEfficiencyResult, FactorScore, ICPScore, ROIMetrics
from .errors import DomainError, EngineError, InvalidInputError
from .icp.scoring import compute_icp_score, icp_input_from_calculator, team_size_bucket
from .models.inputs import CalculatorInputs, ICPInputData, JourneyContext
from .routing.engagement import EngagementTier, icp_tier, qualify_lead, select_engagement_tier

__all__ = [
    "SystemConstants",
    "get_default_constants",
    "compute_ad_efficiency",
    "roas_for_testing_level",
    "compute_roi_metrics",
    "validate_inputs",
    "AdEfficiencyResult",
    "FactorScore",
    "ICPScore",
    "ROIMetrics",
    "DomainError",
    "EngineError",
    "InvalidInputError",
    "compute_icp_score",
    "icp_input_from_calculator",
    "team_size_bucket",
    "CalculatorInputs",
    "ICPInputData",
    "JourneyContext",
    "EngagementTier",
    "icp_tier",
    "qualify_lead",
    "select_engagement_tier",
]
