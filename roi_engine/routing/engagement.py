"""Route an ICP score to a recommended sales engagement.

Higher-fit leads are offered longer, more senior meetings. Strong
engagement on the site can lift a lead one step, but never into the
enterprise tier: that one has to be earned by fit alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from roi_engine.config.settings import SystemConstants
from roi_engine.engine.result import ICPScore
from roi_engine.errors import InvalidInputError
from roi_engine.icp.scoring import MAX_SCORE, compute_icp_score
from roi_engine.models.enums import ICPTier
from roi_engine.models.inputs import ICPInputData, JourneyContext
from roi_engine.validation import check_number

logger = logging.getLogger(__name__)

HIGH_ENGAGEMENT_STEPS = 5
HIGH_ENGAGEMENT_MODULES = 3
HIGH_ENGAGEMENT_SECONDS = 300


@dataclass(frozen=True)
class EngagementTier:
    """A bookable meeting type and the ICP score range it serves.

    ``min_score`` is inclusive and ``max_score`` exclusive, so adjacent rows
    share a boundary without leaving gaps for fractional scores.
    """

    id: str
    tier: ICPTier
    name: str
    url: str
    duration_minutes: int
    description: str
    priority: int
    min_score: Optional[float] = None
    max_score: Optional[float] = None

    def matches(self, score: float) -> bool:
        meets_min = self.min_score is None or score >= self.min_score
        meets_max = self.max_score is None or score < self.max_score
        return meets_min and meets_max


ENGAGEMENT_TIERS: tuple[EngagementTier, ...] = (
    EngagementTier(
        id="enterprise-demo",
        tier=ICPTier.ENTERPRISE,
        name="Enterprise Strategy Session",
        url="https://calendly.com/futuremarketingai/enterprise-strategy-60min",
        duration_minutes=60,
        description="Exclusive 60-minute strategy session with our senior strategist",
        priority=4,
        min_score=80,
    ),
    EngagementTier(
        id="strategic-demo",
        tier=ICPTier.STRATEGIC,
        name="Strategic Platform Demo",
        url="https://calendly.com/futuremarketingai/strategic-demo-45min",
        duration_minutes=45,
        description="In-depth 45-minute platform walkthrough tailored to your needs",
        priority=3,
        min_score=60,
        max_score=80,
    ),
    EngagementTier(
        id="standard-demo",
        tier=ICPTier.STANDARD,
        name="Platform Demo",
        url="https://calendly.com/futuremarketingai/platform-demo-30min",
        duration_minutes=30,
        description="Comprehensive 30-minute platform demonstration",
        priority=2,
        min_score=40,
        max_score=60,
    ),
    EngagementTier(
        id="discovery-call",
        tier=ICPTier.DISCOVERY,
        name="Discovery Call",
        url="https://calendly.com/futuremarketingai/discovery-call-20min",
        duration_minutes=20,
        description="Quick 20-minute exploratory call to understand your needs",
        priority=1,
        max_score=40,
    ),
)

DEFAULT_TIER_ID = "standard-demo"
# Engagement upgrades stop below this priority.
MAX_UPGRADE_PRIORITY = 3

_DISPLAY_ICONS = {
    "enterprise-demo": "⭐",
    "strategic-demo": "\U0001f3af",
    "standard-demo": "\U0001f4ca",
    "discovery-call": "\U0001f4ac",
}


def get_engagement_tier_by_id(tier_id: str) -> Optional[EngagementTier]:
    return next((t for t in ENGAGEMENT_TIERS if t.id == tier_id), None)


def default_engagement_tier() -> EngagementTier:
    return get_engagement_tier_by_id(DEFAULT_TIER_ID)


def _by_priority(priority: int) -> Optional[EngagementTier]:
    return next((t for t in ENGAGEMENT_TIERS if t.priority == priority), None)


def _check_score(icp_score: float) -> float:
    score = check_number("icp_score", icp_score)
    if not (0 <= score <= MAX_SCORE):
        raise InvalidInputError(
            "icp_score", f"must be between 0 and {MAX_SCORE:g}, got {icp_score}", icp_score
        )
    return score


def engagement_tier_for_score(icp_score: Optional[float]) -> EngagementTier:
    """Highest-priority tier whose score range contains ``icp_score``."""
    if icp_score is None:
        return default_engagement_tier()
    score = _check_score(icp_score)
    matching = sorted(
        (t for t in ENGAGEMENT_TIERS if t.matches(score)),
        key=lambda t: t.priority,
        reverse=True,
    )
    if not matching:
        logger.error(
            "Engagement tier table has no row for score %s; using %s",
            score,
            DEFAULT_TIER_ID,
        )
        return default_engagement_tier()
    return matching[0]


def icp_tier(icp_score: float) -> ICPTier:
    """Tier label for a score: >=80 enterprise, 60-79 strategic, 40-59 standard."""
    return engagement_tier_for_score(icp_score).tier


def is_highly_engaged(context: JourneyContext) -> bool:
    return (
        context.completed_steps >= HIGH_ENGAGEMENT_STEPS
        or context.explored_modules >= HIGH_ENGAGEMENT_MODULES
        or context.time_on_site >= HIGH_ENGAGEMENT_SECONDS
    )


def select_engagement_tier(
    icp_score: Optional[float],
    journey_context: JourneyContext,
) -> EngagementTier:
    """Pick the meeting type for a lead, upgrading engaged visitors one step."""
    base = engagement_tier_for_score(icp_score)
    engaged = is_highly_engaged(journey_context) or journey_context.calculator_completed
    if engaged and base.priority < MAX_UPGRADE_PRIORITY:
        upgraded = _by_priority(base.priority + 1)
        logger.debug("Upgrading engagement tier %s -> %s", base.id, upgraded.id)
        return upgraded
    return base


def display_name(tier: EngagementTier) -> str:
    icon = _DISPLAY_ICONS.get(tier.id, "\U0001f4c5")
    return f"{icon} {tier.name}"


# -- Lead qualification ------------------------------------------------------


@dataclass(frozen=True)
class Recommendations:
    cta: str
    message: str
    features: list[str]
    follow_up_timing: str


@dataclass(frozen=True)
class PersonalizationConfig:
    tier: ICPTier
    show_premium_features: bool
    show_technical_details: bool
    cta_text: str
    cta_variant: str
    follow_up_strategy: str
    priority_level: str


@dataclass(frozen=True)
class ICPQualification:
    score: float
    tier: ICPTier
    breakdown: ICPScore
    recommendations: Recommendations
    engagement: EngagementTier

    @property
    def is_qualified(self) -> bool:
        return self.tier in (ICPTier.ENTERPRISE, ICPTier.STRATEGIC)


RECOMMENDATIONS: dict[ICPTier, Recommendations] = {
    ICPTier.ENTERPRISE: Recommendations(
        cta="Book Strategy Session",
        message="Perfect fit for teams like yours",
        features=[
            "Premium features",
            "Technical deep-dive",
            "Custom implementation plan",
            "Direct founder access",
        ],
        follow_up_timing="Within 24 hours, founder direct",
    ),
    ICPTier.STRATEGIC: Recommendations(
        cta="Book Strategic Demo",
        message="Strong fit for scaling marketing teams",
        features=["Premium features", "ROI calculator", "Case studies", "Implementation plan"],
        follow_up_timing="Within 24 hours, senior strategist",
    ),
    ICPTier.STANDARD: Recommendations(
        cta="See Demo",
        message="Great fit for growing teams",
        features=["Standard features", "ROI calculator", "Case studies", "Implementation guide"],
        follow_up_timing="Within 48 hours, standard outreach",
    ),
    ICPTier.DISCOVERY: Recommendations(
        cta="Learn More",
        message="Discover how it works",
        features=["Educational content", "Use cases", "Getting started guide", "Community access"],
        follow_up_timing="Email drip campaign",
    ),
}


def qualify_lead(
    data: ICPInputData,
    constants: Optional[SystemConstants] = None,
) -> ICPQualification:
    """Score a lead and attach tier-specific follow-up recommendations."""
    score = compute_icp_score(data, constants)
    engagement = engagement_tier_for_score(score.total_score)
    return ICPQualification(
        score=score.total_score,
        tier=engagement.tier,
        breakdown=score,
        recommendations=RECOMMENDATIONS[engagement.tier],
        engagement=engagement,
    )


def personalization_config(qualification: ICPQualification) -> PersonalizationConfig:
    """UI personalisation switches for a qualified lead."""
    tier = qualification.tier
    premium = tier in (ICPTier.ENTERPRISE, ICPTier.STRATEGIC)
    if tier == ICPTier.ENTERPRISE:
        variant, strategy, priority = "primary", "immediate", "high"
    elif tier == ICPTier.STRATEGIC:
        variant, strategy, priority = "primary", "priority", "high"
    elif tier == ICPTier.STANDARD:
        variant, strategy, priority = "secondary", "standard", "medium"
    else:
        variant, strategy, priority = "default", "nurture", "low"
    return PersonalizationConfig(
        tier=tier,
        show_premium_features=premium,
        show_technical_details=tier == ICPTier.ENTERPRISE,
        cta_text=RECOMMENDATIONS[tier].cta,
        cta_variant=variant,
        follow_up_strategy=strategy,
        priority_level=priority,
    )
