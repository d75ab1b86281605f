"""Physics utilities powering the AstroDefense impact simulation."""
from __future__ import annotations

import math

from scipy import constants

from .mission import is_deflected
from .models import AsteroidParameters, ImpactResult

# -----------------------------------------------------------------------------
# Shared constants
# -----------------------------------------------------------------------------
MEGATON_TNT_JOULES = 4.184e15
METERS_PER_KM = constants.kilo
CRATER_SCALE_KM = 0.11
SEISMIC_SLOPE = 0.67
SEISMIC_OFFSET = 5.8
MIN_SEISMIC_MAGNITUDE = 0.0


# -----------------------------------------------------------------------------
# Utility helpers
# -----------------------------------------------------------------------------
def _angle_factor(angle_deg: float) -> float:
    # sin() peaks at a vertical impact; the floor keeps the cube root real.
    return max(math.sin(math.radians(angle_deg)), 0.0) ** (1.0 / 3.0)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def effective_velocity(velocity_kms: float, delta_v_kms: float) -> float:
    """Approach velocity left after deflection, in km/s, never negative."""

    return max(velocity_kms - delta_v_kms, 0.0)


def calculate_impact_energy(mass_kg: float, velocity_kms: float) -> float:
    """Return kinetic energy in Joules for a velocity given in km/s."""

    velocity_ms = velocity_kms * METERS_PER_KM
    return 0.5 * mass_kg * velocity_ms**2


def energy_to_tnt(energy_joules: float) -> float:
    """Convert Joules to megatons of TNT."""

    return energy_joules / MEGATON_TNT_JOULES


def calculate_crater_size(energy_joules: float, angle_deg: float = 90.0) -> float:
    """Estimate transient crater diameter in kilometres.

    Cube-root energy scaling in the spirit of simplified pi-scaling, reduced for
    oblique entries by ``sin(angle) ** (1/3)``. A vertical impact yields the
    largest crater for a given energy. Zero energy yields zero diameter.
    """

    energy_mt = max(energy_to_tnt(energy_joules), 0.0)
    diameter_km = CRATER_SCALE_KM * energy_mt ** (1.0 / 3.0) * _angle_factor(angle_deg)
    return max(diameter_km, 0.0)


def calculate_seismic_magnitude(energy_joules: float) -> float:
    """Approximate local moment magnitude from impact energy."""

    if energy_joules <= 0.0:
        return MIN_SEISMIC_MAGNITUDE
    magnitude = SEISMIC_SLOPE * math.log10(energy_joules) - SEISMIC_OFFSET
    return max(magnitude, MIN_SEISMIC_MAGNITUDE)


def compute_impact(parameters: AsteroidParameters) -> ImpactResult:
    """Derive the full impact snapshot for a parameter set."""

    v_eff = effective_velocity(parameters.velocity, parameters.delta_v)
    energy = calculate_impact_energy(parameters.mass, v_eff)
    return ImpactResult(
        energy=energy,
        tnt_equivalent=energy_to_tnt(energy),
        crater_size=calculate_crater_size(energy, parameters.angle),
        seismic_magnitude=calculate_seismic_magnitude(energy),
        deflected=is_deflected(parameters.velocity, parameters.delta_v),
        effective_velocity=v_eff,
    )
