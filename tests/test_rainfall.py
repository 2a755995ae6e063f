"""Tests para core/rainfall.py - Regenspenden KOSTRA y Bemessungsregen."""

import pytest

from floodpilot.config import DesignStorm
from floodpilot.core.rainfall import (
    KOSTRA_BERLIN,
    KOSTRA_DURATION_MIN,
    get_rainfall_intensity,
    select_design_storm,
)


class TestKostraTable:
    """Tests para la tabla KOSTRA-DWD 2020."""

    def test_all_return_periods(self):
        assert sorted(KOSTRA_BERLIN) == [2, 5, 10, 30, 50, 100]

    def test_duration(self):
        assert KOSTRA_DURATION_MIN == 15.0

    def test_intensity_increases_with_return_period(self):
        values = [KOSTRA_BERLIN[t] for t in sorted(KOSTRA_BERLIN)]
        assert values == sorted(values)

    def test_design_values(self):
        assert get_rainfall_intensity(30) == 175.0
        assert get_rainfall_intensity(100) == 220.0

    def test_accepts_enum(self):
        assert get_rainfall_intensity(DesignStorm.T100) == 220.0

    def test_unknown_return_period(self):
        with pytest.raises(ValueError, match="KOSTRA"):
            get_rainfall_intensity(25)


class TestSelectDesignStorm:
    """Tests para selección del Bemessungsregen."""

    def test_exactly_70_percent_is_t100(self):
        """Límite inclusivo."""
        assert select_design_storm(0.70) is DesignStorm.T100

    def test_just_below_70_percent_is_t30(self):
        assert select_design_storm(0.699999) is DesignStorm.T30

    def test_area_ratio_exactly_70_percent(self):
        assert select_design_storm(700 / 1000) is DesignStorm.T100
        assert select_design_storm(1400 / 2000) is DesignStorm.T100

    def test_zero_fraction(self):
        assert select_design_storm(0.0) is DesignStorm.T30

    def test_fully_sealed(self):
        assert select_design_storm(1.0) is DesignStorm.T100
