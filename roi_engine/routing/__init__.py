from .engagement import (
    ENGAGEMENT_TIERS,
    EngagementTier,
    get_engagement_tier_by_id,
    icp_tier,
    personalization_config,
    qualify_lead,
    select_engagement_tier,
)

__all__ = [
    "ENGAGEMENT_TIERS",
    "EngagementTier",
    "get_engagement_tier_by_id",
    "icp_tier",
    "personalization_config",
    "qualify_lead",
    "select_engagement_tier",
]
