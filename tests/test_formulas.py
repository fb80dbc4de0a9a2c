"""Unit tests for each ROI formula."""

from dataclasses import fields

import pytest

from roi_engine.engine.ad_efficiency import recoverable_ad_spend
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
from roi_engine.kpi_library.registry import (
    definitions_by_field,
    get_all_metrics,
    get_metric,
    register_metric,
)


class TestLaborCost:
    def test_manual_cost(self):
        # (60,000 / 12) * 5 * 0.5 = 12,500
        assert manual_monthly_cost(60_000, 5, 0.5) == pytest.approx(12_500)

    def test_automated_cost_ignores_team_size(self):
        # (60,000 / 12) * 2 = 10,000
        assert automated_monthly_cost(60_000, 2) == pytest.approx(10_000)

    def test_savings(self):
        result = calc_labor_cost_savings(
            avg_salary=60_000, team_size=5, manual_work_share=0.5, automated_team_size=2
        )
        assert result == pytest.approx(2_500)

    def test_small_team_savings_floor_at_zero(self):
        # 2 people * 0.5 = 1 FTE of manual work, less than the 2 kept on
        result = calc_labor_cost_savings(
            avg_salary=60_000, team_size=2, manual_work_share=0.5, automated_team_size=2
        )
        assert result == 0.0

    def test_negative_salary_raises(self):
        with pytest.raises(InvalidInputError, match="cannot be negative"):
            manual_monthly_cost(-1, 5, 0.5)


class TestTimeSaved:
    def test_basic_calculation(self):
        # (5 * 0.5 - 2) * 160 = 80 hours
        assert calc_time_saved(5, 0.5, 2, 160) == pytest.approx(80)

    def test_never_negative(self):
        assert calc_time_saved(1, 0.5, 2, 160) == 0.0

    def test_zero_hours_raises(self):
        with pytest.raises(InvalidInputError, match="hours_per_month"):
            calc_time_saved(5, 0.5, 2, 0)


class TestContentAndRevenue:
    def test_content_output(self):
        assert calc_content_output(10, 4) == pytest.approx(40)

    def test_productivity_multiplier(self):
        assert calc_productivity_multiplier(40, 10) == pytest.approx(4.0)

    def test_multiplier_zero_campaigns_raises(self):
        with pytest.raises(InvalidInputError, match="campaigns_per_month"):
            calc_productivity_multiplier(40, 0)

    def test_revenue_increase(self):
        # (40 - 10) * 800 = 24,000
        assert calc_revenue_increase(40, 10, 800) == pytest.approx(24_000)

    def test_no_extra_campaigns_no_revenue(self):
        assert calc_revenue_increase(10, 10, 800) == 0.0


class TestSummaryMetrics:
    def test_net_benefit_can_be_negative(self):
        assert calc_net_benefit(2_500, 0, 15_000) == pytest.approx(-12_500)

    def test_total_roi(self):
        # 11,500 / 15,000 * 100
        assert calc_total_roi(11_500, 15_000) == pytest.approx(76.6667, rel=1e-4)

    def test_negative_roi(self):
        assert calc_total_roi(-15_000, 15_000) == pytest.approx(-100)

    def test_break_even(self):
        assert calc_break_even(2_500, 27_500, 15_000) == pytest.approx(0.5)

    def test_break_even_zero_benefit_raises(self):
        with pytest.raises(DomainError, match="no break-even"):
            calc_break_even(0, 0, 15_000)

    def test_roas(self):
        assert calc_roas(24_000, 15_000) == pytest.approx(1.6)

    def test_roas_zero_system_cost_raises(self):
        with pytest.raises(InvalidInputError, match="system_cost"):
            calc_roas(24_000, 0)


class TestAllMetricsRegistered:
    def test_registered_ids(self):
        expected_ids = {
            "labor_cost_savings",
            "time_saved",
            "content_output",
            "productivity_multiplier",
            "revenue_increase",
            "net_benefit",
            "total_roi",
            "break_even",
            "roas",
            "ad_spend_savings",
        }
        assert expected_ids <= set(get_all_metrics())

    def test_lookup(self):
        definition = get_metric("break_even")
        assert definition is not None
        assert definition.unit == "months"
        assert definition.formula_fn is calc_break_even

    def test_unknown_metric(self):
        assert get_metric("does_not_exist") is None

    def test_every_catalogued_field_exists_on_metrics(self):
        metric_fields = {f.name for f in fields(ROIMetrics)}
        assert set(definitions_by_field()) <= metric_fields

    def test_ad_spend_savings_registered(self):
        definition = get_metric("ad_spend_savings")
        assert definition.formula_fn is recoverable_ad_spend
        assert definition.category == "advertising"

    def test_definitions_keyed_by_result_field(self):
        definitions = definitions_by_field()
        assert definitions["break_even"].formula_fn is calc_break_even
        assert definitions["ad_spend_savings"].label == "Recoverable Ad Spend"

    def test_duplicate_id_rejected(self):
        def other_formula():
            return 0.0

        with pytest.raises(ValueError, match="already registered"):
            register_metric("total_roi", "Another ROI", "Clashes with the catalogue")(other_formula)
        assert get_metric("total_roi").formula_fn is calc_total_roi
