"""Ideal-Customer-Profile fit scoring.

Four independent factors are each normalised to 0-100 and then weighted, so
a factor can be added or dropped without rescaling the others. Tier
thresholds live with the engagement router, not here.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from roi_engine.config.settings import SystemConstants, get_default_constants
from roi_engine.engine.result import FactorScore, ICPScore
from roi_engine.errors import InvalidInputError
from roi_engine.models.enums import ChannelsBucket, Industry, PainPoint, TeamSizeBucket
from roi_engine.models.inputs import CalculatorInputs, ICPInputData
from roi_engine.validation import check_amount, check_positive_int

logger = logging.getLogger(__name__)

MAX_SCORE = 100.0

FACTOR_WEIGHTS: dict[str, float] = {
    "team_size": 0.30,
    "channels": 0.25,
    "pain_points": 0.25,
    "industry": 0.20,
}

# Mid-to-large teams can afford automation and gain the most from it.
TEAM_SIZE_POINTS: dict[TeamSizeBucket, float] = {
    TeamSizeBucket.SOLO_TO_FIVE: 40.0,
    TeamSizeBucket.FIVE_TO_FIFTEEN: 70.0,
    TeamSizeBucket.FIFTEEN_TO_FIFTY: 100.0,
    TeamSizeBucket.FIFTY_PLUS: 100.0,
}

CHANNELS_POINTS: dict[ChannelsBucket, float] = {
    ChannelsBucket.ONE_TO_TWO: 40.0,
    ChannelsBucket.THREE_TO_FIVE: 70.0,
    ChannelsBucket.SIX_TO_TEN: 90.0,
    ChannelsBucket.TEN_PLUS: 100.0,
}

PAIN_POINT_POINTS: dict[PainPoint, float] = {
    PainPoint.AGENCY_COST: 60.0,  # budget already earmarked for outsourcing
    PainPoint.SCALING_PROBLEM: 40.0,
    PainPoint.MANUAL_WORK: 40.0,
    PainPoint.CHANNEL_OVERLOAD: 40.0,
    PainPoint.CONTENT_BOTTLENECK: 40.0,
    PainPoint.HIRING_LIMITATION: 40.0,
}

TARGET_INDUSTRIES = frozenset({Industry.ECOMMERCE, Industry.SAAS, Industry.AGENCY})
TARGET_INDUSTRY_POINTS = 100.0
NEUTRAL_INDUSTRY_POINTS = 50.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def team_size_bucket(team_size: int) -> TeamSizeBucket:
    """Map a head-count to its ICP bucket.

    Bucket labels overlap at their edges; a boundary head-count belongs to
    the larger bucket (5 -> "5-15", 15 -> "15-50", 50 -> "50+").
    """
    team_size = check_positive_int("team_size", team_size)
    if team_size < 5:
        return TeamSizeBucket.SOLO_TO_FIVE
    if team_size < 15:
        return TeamSizeBucket.FIVE_TO_FIFTEEN
    if team_size < 50:
        return TeamSizeBucket.FIFTEEN_TO_FIFTY
    return TeamSizeBucket.FIFTY_PLUS


def _parse_enum(enum_cls, field: str, value):
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidInputError(
            field,
            f"must be one of {[m.value for m in enum_cls]}, got {value!r}",
            value,
        ) from None


def recognised_pain_points(pain_points: Iterable[str]) -> list[PainPoint]:
    """Known pain points in first-seen order, duplicates dropped."""
    known = {p.value: p for p in PainPoint}
    seen: list[PainPoint] = []
    for raw in pain_points:
        point = known.get(getattr(raw, "value", raw))
        if point is None:
            logger.debug("Ignoring unrecognised pain point %r", raw)
            continue
        if point not in seen:
            seen.append(point)
    return seen


def infer_pain_points(
    current_spend: Optional[float],
    constants: SystemConstants,
) -> list[PainPoint]:
    """Pain points implied by spend figures the visitor did not tick."""
    if current_spend is None:
        return []
    if check_amount("current_spend", current_spend) >= constants.agency_cost_spend_threshold:
        return [PainPoint.AGENCY_COST]
    return []


def score_pain_points(points: Iterable[PainPoint]) -> float:
    """Sum of per-point values, capped so long lists cannot run away."""
    return min(sum(PAIN_POINT_POINTS[p] for p in points), MAX_SCORE)


def score_industry(industry: str) -> float:
    """Target industries score full marks; anything else a neutral baseline."""
    normalised = str(getattr(industry, "value", industry) or "").strip().lower()
    if normalised in {i.value for i in TARGET_INDUSTRIES}:
        return TARGET_INDUSTRY_POINTS
    return NEUTRAL_INDUSTRY_POINTS


def compute_icp_score(
    data: ICPInputData,
    constants: Optional[SystemConstants] = None,
) -> ICPScore:
    """Weighted 0-100 ICP fit score with its per-factor breakdown."""
    c = constants or get_default_constants()
    team_size = _parse_enum(TeamSizeBucket, "team_size", data.team_size)
    channels = _parse_enum(ChannelsBucket, "channels", data.channels)

    if data.pain_points is None or isinstance(data.pain_points, (str, bytes)):
        raise InvalidInputError(
            "pain_points",
            f"must be a list of pain points, got {data.pain_points!r}",
            data.pain_points,
        )
    declared = recognised_pain_points(data.pain_points)
    inferred = [p for p in infer_pain_points(data.current_spend, c) if p not in declared]

    raw_points = {
        "team_size": TEAM_SIZE_POINTS[team_size],
        "channels": CHANNELS_POINTS[channels],
        "pain_points": score_pain_points(declared + inferred),
        "industry": score_industry(data.industry),
    }
    breakdown = {
        name: FactorScore(points=points, weight=FACTOR_WEIGHTS[name])
        for name, points in raw_points.items()
    }
    total = _clamp(sum(f.weighted for f in breakdown.values()), 0.0, MAX_SCORE)

    score = ICPScore(
        total_score=round(total, 1),
        breakdown=breakdown,
        inferred_pain_points=[p.value for p in inferred],
        max_score=MAX_SCORE,
    )
    logger.debug("ICP score %s for %s", score.total_score, data)
    return score


def icp_input_from_calculator(
    inputs: CalculatorInputs,
    pain_points: Iterable[str] = (),
    industry: str = Industry.OTHER.value,
) -> ICPInputData:
    """Build ICP input from a calculator snapshot plus the lead-form answers."""
    return ICPInputData(
        team_size=team_size_bucket(inputs.team_size),
        channels=_parse_enum(ChannelsBucket, "channels", inputs.channels),
        pain_points=list(pain_points),
        industry=industry,
        current_spend=inputs.marketing_spend,
    )
