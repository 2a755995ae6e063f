"""Tests para models/ - Resultados inmutables."""

import math

import pytest
from pydantic import ValidationError

from floodpilot.core import perform_assessment
from floodpilot.models import AssessmentResult
from floodpilot.models.base import generate_id, generate_timestamp


class TestBase:
    """Tests para ID y timestamp."""

    def test_id_length(self):
        assert len(generate_id()) == 8

    def test_ids_unique(self):
        assert generate_id() != generate_id()

    def test_timestamp_iso(self):
        from datetime import datetime
        assert datetime.fromisoformat(generate_timestamp())


class TestAssessmentResult:
    """Tests para AssessmentResult."""

    def test_frozen(self, default_site):
        result = perform_assessment(default_site)
        with pytest.raises(ValidationError):
            result.status = "BESTANDEN"

    def test_kinematic_frozen(self, default_site):
        kw = perform_assessment(default_site).kinematic_wave
        with pytest.raises(ValidationError):
            kw.peak_discharge_ls = 0.0

    def test_sequences_immutable(self, default_site):
        result = perform_assessment(default_site)
        assert isinstance(result.recommendations, tuple)
        assert isinstance(result.kinematic_wave.discharge_ls, tuple)
        with pytest.raises(AttributeError):
            result.recommendations.append("Nachtrag")
        with pytest.raises(TypeError):
            result.kinematic_wave.time_min[0] = 1.0

    def test_method_ratio_serialized(self, default_site):
        result = perform_assessment(default_site)
        assert result.model_dump()["method_ratio"] == pytest.approx(result.method_ratio)

    def test_method_ratio_nan_without_rational_flow(self, default_site):
        data = perform_assessment(default_site).model_dump()
        data["peak_discharge_rational_ls"] = 0.0
        result = AssessmentResult(**data)
        assert math.isnan(result.method_ratio)

    def test_json_roundtrip(self, default_site):
        result = perform_assessment(default_site)
        restored = AssessmentResult.model_validate_json(result.model_dump_json())
        assert restored == result

    def test_status_serialized_as_german_value(self, default_site):
        data = perform_assessment(default_site).model_dump(mode="json")
        assert data["status"] == "BESTANDEN"
        assert data["design_storm"] == 100
