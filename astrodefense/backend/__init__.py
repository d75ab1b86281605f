"""Backend package for AstroDefense.

Exposes the impact engine, the parameter store and the NEO catalog adapter.
"""
from __future__ import annotations

from .data_mock import get_fallback_asteroids
from .data_service import AsteroidCatalogService, MalformedRecordError, extract_asteroid_data
from .mission import DEFLECTION_THRESHOLD_FRACTION, evaluate_mission, is_deflected
from .models import AsteroidData, AsteroidParameters, DeflectionMethod, ImpactResult, MissionStatus
from .nasa_client import CatalogUnavailable, NASAClient
from .parameter_store import ParameterStore, UnknownParameterError
from .physics_engine import (
    MEGATON_TNT_JOULES,
    calculate_crater_size,
    calculate_impact_energy,
    calculate_seismic_magnitude,
    compute_impact,
    effective_velocity,
    energy_to_tnt,
)

__all__ = [
    "AsteroidCatalogService",
    "AsteroidData",
    "AsteroidParameters",
    "CatalogUnavailable",
    "DEFLECTION_THRESHOLD_FRACTION",
    "DeflectionMethod",
    "ImpactResult",
    "MEGATON_TNT_JOULES",
    "MalformedRecordError",
    "MissionStatus",
    "NASAClient",
    "ParameterStore",
    "UnknownParameterError",
    "calculate_crater_size",
    "calculate_impact_energy",
    "calculate_seismic_magnitude",
    "compute_impact",
    "effective_velocity",
    "energy_to_tnt",
    "evaluate_mission",
    "extract_asteroid_data",
    "get_fallback_asteroids",
    "is_deflected",
]
