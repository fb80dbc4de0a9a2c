"""Tests for the injectable system constants."""

import pytest
from pydantic import ValidationError

from roi_engine.config.settings import SystemConstants, get_default_constants


class TestDefaults:
    def test_commercial_defaults(self, constants):
        assert constants.system_cost == 15_000
        assert constants.revenue_per_campaign == 800
        assert constants.hours_per_month == 160
        assert constants.productivity_gain == 4
        assert constants.manual_work_share == 0.5
        assert constants.automated_team_size == 2
        assert constants.base_roas == 2.0

    def test_default_instance_is_shared(self):
        assert get_default_constants() is get_default_constants()


class TestOverrides:
    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("ROI_SYSTEM_COST", "20000")
        assert SystemConstants().system_cost == 20_000

    def test_dotenv_override(self, tmp_path):
        (tmp_path / ".env").write_text("ROI_REVENUE_PER_CAMPAIGN=1200\n")
        assert SystemConstants().revenue_per_campaign == 1_200

    def test_constructor_override(self):
        assert SystemConstants(base_roas=3.5).base_roas == 3.5

    def test_frozen(self, constants):
        with pytest.raises(ValidationError):
            constants.system_cost = 1


class TestValidation:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"system_cost": 0},
            {"revenue_per_campaign": -1},
            {"hours_per_month": 0},
            {"productivity_gain": 0.5},
            {"manual_work_share": 1.5},
            {"base_roas": 0},
            {"automated_team_size": 1.5},
        ],
    )
    def test_rejects_invalid(self, overrides):
        with pytest.raises(ValidationError):
            SystemConstants(**overrides)
