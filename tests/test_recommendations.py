from decimal import Decimal

import pytest

from habitlog.models.profile import Profile
from habitlog.services import recommendations


class TestWaterRecommendation:
    def test_sixty_kg(self):
        assert recommendations.water_ml(Profile(weight=Decimal("60"))) == 2100

    def test_zero_weight(self):
        assert recommendations.water_ml(Profile(weight=Decimal("0"))) == 0

    def test_negative_weight(self):
        assert recommendations.water_ml(Profile(weight=Decimal("-5"))) == 0

    def test_no_profile(self):
        assert recommendations.water_ml(None) == 0

    @pytest.mark.parametrize("weight, expected", [
        ("72.5", 2538),   # 2537.5 → half away from zero
        ("70.01", 2450),  # 2450.35
        ("55.3", 1936),   # 1935.5
    ])
    def test_rounding(self, weight, expected):
        assert recommendations.water_ml(Profile(weight=Decimal(weight))) == expected

    def test_float_weight(self):
        assert recommendations.water_ml(Profile(weight=80.0)) == 2800

    def test_custom_factor(self):
        assert recommendations.water_ml(Profile(weight=Decimal("60")), ml_per_kg=30) == 1800


class TestConstantTargets:
    def test_sunlight(self):
        assert recommendations.sunlight_minutes() == 10

    def test_meditation(self):
        assert recommendations.meditation_minutes() == 5
