"""Simulation data model shared by the store, the engine and the API."""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Dict, Optional, Tuple


class DeflectionMethod(str, Enum):
    """Planetary defense strategy. Labels the mission; the physics ignores it."""

    KINETIC = "kinetic"
    ION = "ion"
    NUCLEAR = "nuclear"
    GRAVITY = "gravity"


class MissionStatus(str, Enum):
    IMPACT = "impact"
    DEFLECTED = "deflected"


@dataclass
class AsteroidParameters:
    """Inputs of a simulation run.

    Units: diameter in km, velocity and delta_v in km/s, angle in degrees from
    the horizontal, mass in kg. Mass is not derived from diameter.
    """

    diameter: float = 1.0
    velocity: float = 20.0
    angle: float = 45.0
    mass: float = 1e12
    deflection_method: DeflectionMethod = DeflectionMethod.KINETIC
    delta_v: float = 0.0
    selected_asteroid: Optional[Dict[str, object]] = None

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(item.name for item in fields(cls))

    def to_dict(self) -> Dict[str, object]:
        payload = asdict(self)
        payload["deflection_method"] = self.deflection_method.value
        return payload


@dataclass(frozen=True)
class AsteroidData:
    """Simulation inputs projected out of a catalog record."""

    diameter: float
    velocity: float
    mass: float


@dataclass(frozen=True)
class ImpactResult:
    energy: float
    tnt_equivalent: float
    crater_size: float
    seismic_magnitude: float
    deflected: bool
    effective_velocity: float = 0.0

    @property
    def mission_status(self) -> MissionStatus:
        return MissionStatus.DEFLECTED if self.deflected else MissionStatus.IMPACT

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = asdict(self)
        payload["mission_status"] = self.mission_status.value
        return payload
