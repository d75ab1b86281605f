"""Configuration module for AstroDefense.

Loads environment-backed configuration with defaults matching the simulator's
initial slider positions. Uses python-dotenv so `.env` files work during local
runs.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import os

from dotenv import load_dotenv

from .backend.models import AsteroidParameters, DeflectionMethod

# Load environment variables from a `.env` file if present.
load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)


@dataclass(frozen=True)
class Settings:
    """Container for tunable runtime parameters."""

    debug: bool = bool(int(os.getenv("ASTRODEFENSE_DEBUG", "0")))
    log_level: str = os.getenv("ASTRODEFENSE_LOG_LEVEL", "INFO")
    nasa_api_key: str = os.getenv("NASA_API_KEY", "DEMO_KEY")
    use_live_apis: bool = bool(int(os.getenv("ASTRODEFENSE_USE_LIVE_APIS", "1")))
    catalog_page_size: int = int(os.getenv("ASTRODEFENSE_CATALOG_PAGE_SIZE", "20"))
    default_diameter_km: float = float(os.getenv("ASTRODEFENSE_DEFAULT_DIAMETER_KM", "1.0"))
    default_velocity_kms: float = float(os.getenv("ASTRODEFENSE_DEFAULT_VELOCITY_KMS", "20"))
    default_angle_deg: float = float(os.getenv("ASTRODEFENSE_DEFAULT_ANGLE_DEG", "45"))
    default_mass_kg: float = float(os.getenv("ASTRODEFENSE_DEFAULT_MASS_KG", "1e12"))
    default_deflection_method: str = os.getenv("ASTRODEFENSE_DEFAULT_DEFLECTION_METHOD", "kinetic")
    default_delta_v_kms: float = float(os.getenv("ASTRODEFENSE_DEFAULT_DELTA_V_KMS", "0"))

    def default_parameters(self) -> AsteroidParameters:
        return AsteroidParameters(
            diameter=self.default_diameter_km,
            velocity=self.default_velocity_kms,
            angle=self.default_angle_deg,
            mass=self.default_mass_kg,
            deflection_method=DeflectionMethod(self.default_deflection_method),
            delta_v=self.default_delta_v_kms,
        )


def get_settings() -> Settings:
    """Factory returning immutable settings instance."""

    return Settings()
