"""Modelos Pydantic para configuración y validación de datos."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SoilType(str, Enum):
    """Bodenart según DIN 18196."""
    GW = "GW"
    GI = "GI"
    SE = "SE"
    SU = "SU"
    TL = "TL"
    TM = "TM"

    @property
    def label(self) -> str:
        return SOIL_LABELS[self]


SOIL_LABELS = {
    SoilType.GW: "Kies, gut abgestuft",
    SoilType.GI: "Kies, intermittierend",
    SoilType.SE: "Sand, eng gestuft",
    SoilType.SU: "Sand, schluffig",
    SoilType.TL: "Ton, leicht plastisch",
    SoilType.TM: "Ton, mittel plastisch",
}


class HydrologicSoilGroup(str, Enum):
    """Grupos hidrológicos de suelo (SCS)."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"


class DesignStorm(int, Enum):
    """Período de retorno del Bemessungsregen (años)."""
    T30 = 30
    T100 = 100

    @property
    def label(self) -> str:
        return f"T={self.value}a"


class ComplianceStatus(str, Enum):
    """Estado del Überflutungsnachweis."""
    PASSED = "BESTANDEN"
    FAILED = "NICHT_BESTANDEN"
    REVIEW_REQUIRED = "PRUEFUNG_ERFORDERLICH"


class ReportFormat(str, Enum):
    """Formatos de exportación del reporte."""
    TEXT = "text"
    TEX = "tex"
    PDF = "pdf"
    JSON = "json"
    CSV = "csv"


# ============================================================================
# Datos del sitio
# ============================================================================

class SiteInput(BaseModel):
    """
    Datos del terreno para el Überflutungsnachweis.

    Las geometrías degeneradas (área total <= 0, área sellada negativa o
    mayor que el área total) se rechazan al construir el modelo. La
    pendiente 0 se acepta; el cálculo cinemático la eleva a 0.1 %.
    Valores inf o nan se rechazan en todos los campos numéricos.
    """
    model_config = ConfigDict(allow_inf_nan=False)

    project_name: str = Field(default="", description="Nombre del proyecto")
    total_area_m2: float = Field(..., gt=0, description="Grundstücksfläche (m²)")
    impervious_area_m2: float = Field(..., ge=0, description="Versiegelte Fläche (m²)")
    soil_type: SoilType = Field(default=SoilType.SU, description="Bodenart DIN 18196")
    slope_pct: float = Field(default=2.0, ge=0, description="Geländeneigung (%)")
    manning_n: float = Field(default=0.015, gt=0, description="Manning-Rauheitsbeiwert")
    flow_length_m: float = Field(default=50.0, gt=0, description="Fließweglänge (m)")
    latitude: float = Field(default=52.52, ge=-90, le=90, description="Latitud")
    longitude: float = Field(default=13.405, ge=-180, le=180, description="Longitud")

    @model_validator(mode="after")
    def check_impervious_area(self) -> "SiteInput":
        if self.impervious_area_m2 > self.total_area_m2:
            raise ValueError(
                "La superficie sellada no puede superar la superficie total "
                f"({self.impervious_area_m2} > {self.total_area_m2} m²)"
            )
        return self

    @property
    def impervious_fraction(self) -> float:
        """Versiegelungsgrad (0-1)."""
        return self.impervious_area_m2 / self.total_area_m2


# ============================================================================
# Configuración de la aplicación
# ============================================================================

class Settings(BaseSettings):
    """Configuración leída de variables de entorno FLOODPILOT_* (o de .env)."""
    model_config = SettingsConfigDict(env_prefix="FLOODPILOT_", env_file=".env", extra="ignore")

    log_level: str = Field(default="WARNING", description="Nivel de logging")
    output_dir: str = Field(default=".", description="Directorio de salida de reportes")
    latex_engine: str = Field(default="pdflatex", description="Motor LaTeX preferido")
    theme: str = Field(default="default", description="Tema de la CLI")
