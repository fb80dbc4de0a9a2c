"""Tests for ICP tier lookup, engagement routing and lead qualification."""

from fractions import Fraction

import pytest

from roi_engine.errors import InvalidInputError
from roi_engine.models.enums import ICPTier
from roi_engine.models.inputs import JourneyContext
from roi_engine.routing.engagement import (
    ENGAGEMENT_TIERS,
    display_name,
    engagement_tier_for_score,
    get_engagement_tier_by_id,
    icp_tier,
    is_highly_engaged,
    personalization_config,
    qualify_lead,
    select_engagement_tier,
)

IDLE = JourneyContext()


class TestTierThresholds:
    @pytest.mark.parametrize(
        "score, tier",
        [
            (100, ICPTier.ENTERPRISE),
            (80, ICPTier.ENTERPRISE),
            (79.9, ICPTier.STRATEGIC),
            (60, ICPTier.STRATEGIC),
            (59.5, ICPTier.STANDARD),
            (40, ICPTier.STANDARD),
            (39.9, ICPTier.DISCOVERY),
            (0, ICPTier.DISCOVERY),
        ],
    )
    def test_icp_tier(self, score, tier):
        assert icp_tier(score) == tier

    def test_table_has_no_gaps(self):
        for tenth in range(0, 1001):
            score = tenth / 10
            assert sum(t.matches(score) for t in ENGAGEMENT_TIERS) == 1, score

    def test_missing_score_uses_default(self):
        assert engagement_tier_for_score(None).id == "standard-demo"

    @pytest.mark.parametrize("score", [-1, 100.5, "high", float("nan"), True])
    def test_invalid_score(self, score):
        with pytest.raises(InvalidInputError) as excinfo:
            engagement_tier_for_score(score)
        assert excinfo.value.field == "icp_score"

    def test_rational_score_accepted(self):
        assert icp_tier(Fraction(85)) == ICPTier.ENTERPRISE
        assert icp_tier(Fraction(119, 2)) == ICPTier.STANDARD


class TestSelectEngagementTier:
    def test_score_alone(self):
        assert select_engagement_tier(85, IDLE).id == "enterprise-demo"
        assert select_engagement_tier(65, IDLE).id == "strategic-demo"
        assert select_engagement_tier(45, IDLE).id == "standard-demo"
        assert select_engagement_tier(20, IDLE).id == "discovery-call"

    def test_calculator_completion_upgrades_discovery(self):
        context = JourneyContext(calculator_completed=True)
        assert select_engagement_tier(20, context).id == "standard-demo"

    @pytest.mark.parametrize(
        "context",
        [
            JourneyContext(completed_steps=5),
            JourneyContext(explored_modules=3),
            JourneyContext(time_on_site=300),
        ],
    )
    def test_high_engagement_upgrades_one_step(self, context):
        assert is_highly_engaged(context)
        assert select_engagement_tier(45, context).id == "strategic-demo"

    def test_upgrade_is_single_step(self):
        context = JourneyContext(completed_steps=9, calculator_completed=True)
        assert select_engagement_tier(10, context).id == "standard-demo"

    def test_never_upgrades_into_enterprise(self):
        context = JourneyContext(completed_steps=9, explored_modules=9, time_on_site=9_000)
        assert select_engagement_tier(75, context).id == "strategic-demo"

    def test_low_engagement_no_upgrade(self):
        context = JourneyContext(completed_steps=4, explored_modules=2, time_on_site=299)
        assert not is_highly_engaged(context)
        assert select_engagement_tier(45, context).id == "standard-demo"

    def test_missing_score_with_engagement(self):
        context = JourneyContext(explored_modules=3)
        assert select_engagement_tier(None, context).id == "strategic-demo"


class TestLookup:
    def test_by_id(self):
        tier = get_engagement_tier_by_id("strategic-demo")
        assert tier.duration_minutes == 45
        assert tier.tier == ICPTier.STRATEGIC

    def test_unknown_id(self):
        assert get_engagement_tier_by_id("coffee-chat") is None

    def test_display_name(self):
        name = display_name(get_engagement_tier_by_id("discovery-call"))
        assert name.endswith("Discovery Call")


class TestQualifyLead:
    def test_enterprise_lead(self, enterprise_lead):
        qualification = qualify_lead(enterprise_lead)
        assert qualification.tier == ICPTier.ENTERPRISE
        assert qualification.score == pytest.approx(100)
        assert qualification.engagement.id == "enterprise-demo"
        assert qualification.is_qualified
        assert "Direct founder access" in qualification.recommendations.features

    def test_lean_lead(self, lean_lead):
        qualification = qualify_lead(lean_lead)
        assert qualification.tier == ICPTier.DISCOVERY
        assert not qualification.is_qualified
        assert qualification.recommendations.follow_up_timing == "Email drip campaign"

    def test_personalization(self, enterprise_lead, lean_lead):
        premium = personalization_config(qualify_lead(enterprise_lead))
        assert premium.show_premium_features
        assert premium.show_technical_details
        assert premium.priority_level == "high"

        nurture = personalization_config(qualify_lead(lean_lead))
        assert not nurture.show_premium_features
        assert nurture.cta_variant == "default"
        assert nurture.follow_up_strategy == "nurture"
