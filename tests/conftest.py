"""Configuración de pytest para tests de floodpilot."""

import pytest

from floodpilot.config import SiteInput, SoilType


@pytest.fixture
def default_site():
    """Valores por defecto del formulario (2000 m², 1400 m² sellados)."""
    return SiteInput(
        project_name="Neubau Logistikhalle Spandau",
        total_area_m2=2000.0,
        impervious_area_m2=1400.0,
        soil_type=SoilType.SU,
        slope_pct=2.0,
        manning_n=0.015,
        flow_length_m=50.0,
    )


@pytest.fixture
def make_site():
    """Fábrica de SiteInput con valores por defecto sobreescribibles."""
    def _make(**overrides):
        values = {
            "total_area_m2": 2000.0,
            "impervious_area_m2": 1400.0,
            "soil_type": SoilType.SU,
            "slope_pct": 2.0,
            "manning_n": 0.015,
            "flow_length_m": 50.0,
        }
        values.update(overrides)
        return SiteInput(**values)
    return _make
