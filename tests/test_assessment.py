"""Tests para core/assessment.py - Überflutungsnachweis DIN 1986-100."""

import math

import pytest

from floodpilot.config import ComplianceStatus, DesignStorm
from floodpilot.core.assessment import (
    AREA_THRESHOLD_M2,
    DISCLAIMER,
    determine_compliance_status,
    format_area,
    generate_recommendations,
    is_verification_required,
    perform_assessment,
    requirement_justification,
)


class TestThreshold:
    """Tests para el umbral de 800 m²."""

    def test_exactly_800_not_required(self):
        """El umbral es exclusivo."""
        assert AREA_THRESHOLD_M2 == 800
        assert not is_verification_required(800.0)

    def test_just_above_800_required(self):
        assert is_verification_required(800.01)

    def test_zero_not_required(self):
        assert not is_verification_required(0.0)

    def test_justification_required(self):
        text = requirement_justification(1400.0)
        assert "(1400 m²)" in text
        assert "überschreitet 800 m²" in text
        assert "§14.9.2" in text

    def test_justification_not_required(self):
        text = requirement_justification(500.0)
        assert "(500 m²)" in text
        assert "vereinfachtes Verfahren ausreichend" in text

    def test_format_area(self):
        assert format_area(1400.0) == "1400"
        assert format_area(800.5) == "800.5"
        assert format_area(800.01) == "800.01"


class TestComplianceStatus:
    """Tests para el árbol de decisión."""

    def test_not_required_always_passes(self):
        status = determine_compliance_status(False, 10.0, 100.0, 500.0)
        assert status == ComplianceStatus.PASSED

    def test_small_retention_passes(self):
        assert determine_compliance_status(True, 100.0, 120.0, 49.9) == ComplianceStatus.PASSED

    def test_medium_retention_review(self):
        assert determine_compliance_status(True, 100.0, 120.0, 50.0) == ComplianceStatus.REVIEW_REQUIRED
        assert determine_compliance_status(True, 100.0, 120.0, 199.9) == ComplianceStatus.REVIEW_REQUIRED

    def test_large_retention_fails(self):
        assert determine_compliance_status(True, 100.0, 120.0, 200.0) == ComplianceStatus.FAILED

    def test_ratio_bounds_inclusive(self):
        assert determine_compliance_status(True, 100.0, 30.0, 10.0) == ComplianceStatus.PASSED
        assert determine_compliance_status(True, 100.0, 300.0, 10.0) == ComplianceStatus.PASSED

    def test_divergent_methods_review(self):
        assert determine_compliance_status(True, 100.0, 29.0, 10.0) == ComplianceStatus.REVIEW_REQUIRED
        assert determine_compliance_status(True, 100.0, 301.0, 10.0) == ComplianceStatus.REVIEW_REQUIRED

    def test_divergence_checked_before_retention(self):
        assert determine_compliance_status(True, 100.0, 10.0, 500.0) == ComplianceStatus.REVIEW_REQUIRED

    @pytest.mark.parametrize("q_rational", [0.0, -1.0, math.nan, math.inf])
    def test_degenerate_rational_flow_review(self, q_rational):
        status = determine_compliance_status(True, q_rational, 100.0, 10.0)
        assert status == ComplianceStatus.REVIEW_REQUIRED


class TestRecommendations:
    """Tests para la lista de recomendaciones."""

    def test_disclaimer_always_last(self, make_site):
        site = make_site(total_area_m2=500, impervious_area_m2=100)
        recs = generate_recommendations(site, 0.2, ComplianceStatus.PASSED)
        assert recs == [DISCLAIMER]

    def test_exactly_80_percent_no_very_high_advisory(self, make_site):
        site = make_site(total_area_m2=1000, impervious_area_m2=800)
        recs = generate_recommendations(site, 0.8, ComplianceStatus.PASSED)
        assert not any(">80%" in r for r in recs)
        assert any("T=100a" in r for r in recs)

    def test_order_for_failed_site(self, make_site):
        site = make_site(total_area_m2=10000, impervious_area_m2=9000)
        recs = generate_recommendations(site, 0.9, ComplianceStatus.FAILED)

        assert len(recs) == 6
        assert "(>80%)" in recs[0]
        assert "T=100a" in recs[1]
        assert ">2.000 m²" in recs[2]
        assert "Rückhaltevolumen" in recs[3]
        assert "DWA-A 138" in recs[4]
        assert recs[5] == DISCLAIMER

    def test_review_recommendation(self, make_site):
        site = make_site(total_area_m2=1500, impervious_area_m2=900)
        recs = generate_recommendations(site, 0.6, ComplianceStatus.REVIEW_REQUIRED)
        assert len(recs) == 2
        assert "Divergenz" in recs[0]

    def test_exactly_2000_not_large(self, make_site):
        site = make_site(total_area_m2=2000, impervious_area_m2=1000)
        recs = generate_recommendations(site, 0.5, ComplianceStatus.PASSED)
        assert recs == [DISCLAIMER]


class TestPerformAssessment:
    """Tests para la evaluación completa."""

    def test_reference_site(self, default_site):
        result = perform_assessment(default_site)

        assert result.verification_required
        assert result.effective_area_m2 == 1400
        assert result.total_area_m2 == 2000
        assert result.impervious_fraction == pytest.approx(0.7)
        assert result.design_storm == DesignStorm.T100
        assert result.rainfall_intensity_mmhr == 220.0
        assert result.runoff_coefficient == pytest.approx(0.675)
        assert result.peak_discharge_rational_ls == pytest.approx(82.5)
        assert result.peak_discharge_kinematic_ls == pytest.approx(136.65, rel=1e-3)
        assert result.water_quality_volume_l == pytest.approx(33750)
        assert result.retention_volume_m3 == pytest.approx(33.75)
        assert result.method_ratio == pytest.approx(1.656, abs=0.01)
        assert result.status == ComplianceStatus.PASSED

    def test_reference_site_recommendations(self, default_site):
        result = perform_assessment(default_site)
        assert len(result.recommendations) == 2
        assert "T=100a" in result.recommendations[0]
        assert result.recommendations[-1] == DISCLAIMER

    def test_kinematic_result_embedded(self, default_site):
        result = perform_assessment(default_site)
        kw = result.kinematic_wave
        assert kw.peak_discharge_ls == result.peak_discharge_kinematic_ls
        assert kw.width_m == pytest.approx(math.sqrt(2000))
        assert kw.reaches_equilibrium

    def test_failed_site(self, make_site):
        result = perform_assessment(make_site(total_area_m2=10000, impervious_area_m2=9000))

        assert result.runoff_coefficient == pytest.approx(0.825)
        assert result.retention_volume_m3 == pytest.approx(206.25)
        assert result.method_ratio == pytest.approx(0.606, abs=0.01)
        assert result.status == ComplianceStatus.FAILED
        assert len(result.recommendations) == 6

    def test_review_by_retention(self, make_site):
        result = perform_assessment(make_site(total_area_m2=4000, impervious_area_m2=3000))

        assert result.runoff_coefficient == pytest.approx(0.7125)
        assert result.retention_volume_m3 == pytest.approx(71.25)
        assert 0.3 <= result.method_ratio <= 3.0
        assert result.status == ComplianceStatus.REVIEW_REQUIRED

    def test_review_by_divergence(self, make_site):
        """Recorrido de 1 m: el pico cinemático es muy inferior al racional."""
        result = perform_assessment(make_site(flow_length_m=1.0))

        assert result.retention_volume_m3 < 50
        assert result.method_ratio < 0.3
        assert result.status == ComplianceStatus.REVIEW_REQUIRED
        assert any("Divergenz" in r for r in result.recommendations)

    def test_large_site_finite(self, make_site):
        result = perform_assessment(make_site(total_area_m2=100000, impervious_area_m2=80000))

        for value in (
            result.peak_discharge_rational_ls,
            result.peak_discharge_kinematic_ls,
            result.retention_volume_m3,
            result.method_ratio,
        ):
            assert math.isfinite(value)
        assert result.status == ComplianceStatus.REVIEW_REQUIRED

    def test_no_impervious_area(self, make_site):
        result = perform_assessment(make_site(total_area_m2=1000, impervious_area_m2=0))

        assert not result.verification_required
        assert result.design_storm == DesignStorm.T30
        assert result.rainfall_intensity_mmhr == 175.0
        assert result.runoff_coefficient == pytest.approx(0.15)
        assert result.status == ComplianceStatus.PASSED

    def test_exactly_800_passes(self, make_site):
        result = perform_assessment(make_site(total_area_m2=10000, impervious_area_m2=800))
        assert not result.verification_required
        assert result.status == ComplianceStatus.PASSED

    def test_just_above_threshold(self, make_site):
        result = perform_assessment(make_site(total_area_m2=10000, impervious_area_m2=800.01))
        assert result.verification_required
        assert "800.01" in result.justification

    def test_storm_boundary(self, make_site):
        at = perform_assessment(make_site(total_area_m2=1000, impervious_area_m2=700))
        below = perform_assessment(make_site(total_area_m2=1000, impervious_area_m2=699.999))
        assert at.design_storm == DesignStorm.T100
        assert below.design_storm == DesignStorm.T30

    def test_zero_slope_is_clamped(self, make_site, caplog):
        with caplog.at_level("INFO", logger="floodpilot.core.assessment"):
            result = perform_assessment(make_site(slope_pct=0.0))

        assert result.kinematic_wave.slope == pytest.approx(0.001)
        assert math.isfinite(result.peak_discharge_kinematic_ls)
        assert "mínimo" in caplog.text

    def test_deterministic_apart_from_identity(self, default_site):
        first = perform_assessment(default_site).model_dump(exclude={"id", "timestamp"})
        second = perform_assessment(default_site).model_dump(exclude={"id", "timestamp"})
        assert first == second


class TestNumericOutputs:
    """Todas las salidas numéricas son finitas y no negativas."""

    SCALAR_FIELDS = (
        "total_area_m2",
        "effective_area_m2",
        "impervious_fraction",
        "rainfall_intensity_mmhr",
        "runoff_coefficient",
        "peak_discharge_rational_ls",
        "peak_discharge_kinematic_ls",
        "retention_volume_m3",
        "water_quality_volume_l",
        "method_ratio",
    )
    KINEMATIC_FIELDS = (
        "peak_discharge_ls",
        "time_to_peak_min",
        "equilibrium_depth_mm",
        "time_to_equilibrium_min",
        "peak_depth_mm",
        "outlet_velocity_ms",
        "runoff_volume_m3",
        "slope",
        "width_m",
    )

    @pytest.mark.parametrize("areas", [(1.0, 0.5), (500, 0), (2000, 1400), (1000, 1000), (100000, 80000)])
    @pytest.mark.parametrize("slope_pct", [0.0, 2.0, 50.0])
    @pytest.mark.parametrize("manning_n", [0.01, 0.2])
    @pytest.mark.parametrize("flow_length_m", [1.0, 50.0, 1000.0])
    def test_finite_and_non_negative(self, make_site, areas, slope_pct, manning_n, flow_length_m):
        total, impervious = areas
        result = perform_assessment(make_site(
            total_area_m2=total,
            impervious_area_m2=impervious,
            slope_pct=slope_pct,
            manning_n=manning_n,
            flow_length_m=flow_length_m,
        ))
        kw = result.kinematic_wave

        values = [getattr(result, name) for name in self.SCALAR_FIELDS]
        values += [getattr(kw, name) for name in self.KINEMATIC_FIELDS]
        values += list(kw.time_min) + list(kw.discharge_ls)

        assert all(math.isfinite(v) for v in values)
        assert all(v >= 0 for v in values)
