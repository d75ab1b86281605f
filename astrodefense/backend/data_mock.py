"""Built-in fallback catalog of near-Earth objects.

Records mimic the NASA NeoWs browse payload (kilometre diameter estimates and
string-encoded close-approach velocities) so that the adapter handles live and
fallback data through the same code path. Masses are published estimates where
one exists and are carried explicitly.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Dict, List, Optional, Tuple


def _fallback_record(
    asteroid_id: str,
    name: str,
    *,
    diameter_min_km: float,
    diameter_max_km: float,
    velocity_kms: float,
    mass_kg: Optional[float],
    approach_date: str,
    hazardous: bool,
    orbit_class: str,
) -> Dict[str, object]:
    return {
        "id": asteroid_id,
        "neo_reference_id": asteroid_id,
        "name": name,
        "source": "fallback",
        "is_potentially_hazardous_asteroid": hazardous,
        "estimated_diameter": {
            "kilometers": {
                "estimated_diameter_min": diameter_min_km,
                "estimated_diameter_max": diameter_max_km,
            },
        },
        "close_approach_data": [
            {
                "close_approach_date": approach_date,
                "orbiting_body": "Earth",
                "relative_velocity": {"kilometers_per_second": f"{velocity_kms:.2f}"},
            },
        ],
        "orbital_data": {"orbit_class": {"orbit_class_type": orbit_class}},
        "mass_kg": mass_kg,
    }


FALLBACK_CATALOG: Tuple[Dict[str, object], ...] = (
    _fallback_record(
        "Impactor-2025",
        "Impactor-2025",
        diameter_min_km=1.1,
        diameter_max_km=1.3,
        velocity_kms=18.0,
        mass_kg=5e11,
        approach_date="2025-10-12",
        hazardous=True,
        orbit_class="APO",
    ),
    _fallback_record(
        "2099942",
        "99942 Apophis (2004 MN4)",
        diameter_min_km=0.31,
        diameter_max_km=0.37,
        velocity_kms=7.42,
        mass_kg=6.1e10,
        approach_date="2029-04-13",
        hazardous=True,
        orbit_class="ATE",
    ),
    _fallback_record(
        "2101955",
        "101955 Bennu (1999 RQ36)",
        diameter_min_km=0.47,
        diameter_max_km=0.51,
        velocity_kms=12.7,
        mass_kg=7.329e10,
        approach_date="2135-09-25",
        hazardous=True,
        orbit_class="APO",
    ),
    _fallback_record(
        "2065803",
        "65803 Didymos (1996 GT)",
        diameter_min_km=0.75,
        diameter_max_km=0.81,
        velocity_kms=23.7,
        mass_kg=5.4e11,
        approach_date="2123-11-04",
        hazardous=True,
        orbit_class="APO",
    ),
    _fallback_record(
        "2162173",
        "162173 Ryugu (1999 JU3)",
        diameter_min_km=0.87,
        diameter_max_km=0.93,
        velocity_kms=9.5,
        mass_kg=4.5e11,
        approach_date="2076-12-06",
        hazardous=True,
        orbit_class="APO",
    ),
    _fallback_record(
        "2004179",
        "4179 Toutatis (1989 AC)",
        diameter_min_km=2.2,
        diameter_max_km=2.7,
        velocity_kms=11.0,
        mass_kg=5.0e13,
        approach_date="2069-11-05",
        hazardous=True,
        orbit_class="APO",
    ),
)


def get_fallback_asteroids() -> List[Dict[str, object]]:
    """Return the fallback catalog in a fixed order. Performs no I/O."""

    return [deepcopy(record) for record in FALLBACK_CATALOG]
