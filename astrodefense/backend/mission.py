"""Mission outcome evaluation for a deflection attempt."""
from __future__ import annotations

import math

from .models import AsteroidParameters, MissionStatus

# Fraction of the approach velocity that the deflection delta-v must reach.
DEFLECTION_THRESHOLD_FRACTION = 0.10


def is_deflected(velocity_kms: float, delta_v_kms: float) -> bool:
    """Return True when the imparted delta-v neutralises the threat.

    A delta-v of exactly 10% of the velocity counts as deflected, including
    when ``velocity * 0.1`` rounds one ulp above the slider value.
    """

    threshold = velocity_kms * DEFLECTION_THRESHOLD_FRACTION
    return delta_v_kms >= threshold or math.isclose(delta_v_kms, threshold)


def evaluate_mission(parameters: AsteroidParameters) -> MissionStatus:
    if is_deflected(parameters.velocity, parameters.delta_v):
        return MissionStatus.DEFLECTED
    return MissionStatus.IMPACT
