"""Catalog adapter combining the live NeoWs source with the fallback catalog."""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Mapping, Optional

import logging
import math

from scipy import constants

from .data_mock import get_fallback_asteroids
from .models import AsteroidData
from .nasa_client import CatalogUnavailable, NASAClient

if TYPE_CHECKING:  # pragma: no cover
    from .parameter_store import ParameterStore

logger = logging.getLogger(__name__)

# Nominal bulk density used only when a record carries no mass estimate.
NOMINAL_DENSITY_KG_M3 = 2600.0
AU_IN_KM = constants.astronomical_unit / constants.kilo


class MalformedRecordError(ValueError):
    """Raised when a catalog record lacks the fields the simulation needs."""


# -----------------------------------------------------------------------------
# Record projection
# -----------------------------------------------------------------------------
def extract_asteroid_data(record: Mapping[str, object]) -> AsteroidData:
    """Project a NEO catalog record onto diameter (km), velocity (km/s), mass (kg)."""

    if not isinstance(record, Mapping):
        raise MalformedRecordError(f"Catalog record must be a mapping, got {type(record).__name__}")

    diameter = _extract_diameter_km(record)
    if diameter is None:
        raise MalformedRecordError(f"Record {record.get('id')!r} has no diameter estimate")

    velocity = _extract_velocity_kms(record)
    if velocity is None:
        raise MalformedRecordError(f"Record {record.get('id')!r} has no velocity")

    mass = _safe_float(record.get("mass_kg"))
    if mass is None:
        mass = _safe_float(record.get("mass"))
    if mass is None:
        mass = estimate_mass_kg(diameter)

    return AsteroidData(diameter=diameter, velocity=velocity, mass=mass)


def estimate_mass_kg(diameter_km: float, density_kg_m3: float = NOMINAL_DENSITY_KG_M3) -> float:
    radius_m = max(diameter_km, 0.0) * constants.kilo / 2.0
    volume_m3 = (4.0 / 3.0) * math.pi * radius_m**3
    return volume_m3 * density_kg_m3


def _extract_diameter_km(record: Mapping[str, object]) -> Optional[float]:
    estimated = _mapping(_mapping(record.get("estimated_diameter")).get("kilometers"))
    diameter_min = _safe_float(estimated.get("estimated_diameter_min"))
    diameter_max = _safe_float(estimated.get("estimated_diameter_max"))
    if diameter_min is not None and diameter_max is not None:
        return (diameter_min + diameter_max) / 2.0
    if diameter_min is not None:
        return diameter_min
    if diameter_max is not None:
        return diameter_max
    return _safe_float(record.get("diameter"))


def _extract_velocity_kms(record: Mapping[str, object]) -> Optional[float]:
    approaches = record.get("close_approach_data") or []
    first_approach = _mapping(approaches[0]) if isinstance(approaches, list) and approaches else {}
    velocity = _safe_float(_mapping(first_approach.get("relative_velocity")).get("kilometers_per_second"))
    if velocity is None:
        velocity = _safe_float(record.get("velocity"))
    if velocity is None:
        velocity = _approximate_orbital_velocity(_mapping(record.get("orbital_data")))
    return velocity


def _approximate_orbital_velocity(orbit_data: Mapping[str, object]) -> Optional[float]:
    # v = 2 * pi * a / T with a in AU and T in days.
    semi_major_axis_au = _safe_float(orbit_data.get("semi_major_axis"))
    orbital_period_days = _safe_float(orbit_data.get("orbital_period"))
    if semi_major_axis_au is None or not orbital_period_days:
        return None
    circumference_km = 2 * math.pi * semi_major_axis_au * AU_IN_KM
    return circumference_km / (orbital_period_days * constants.day)


def _mapping(value: object) -> Mapping[str, object]:
    return value if isinstance(value, Mapping) else {}


def _safe_float(value: object) -> Optional[float]:
    try:
        if value is None:
            return None
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


# -----------------------------------------------------------------------------
# Catalog service
# -----------------------------------------------------------------------------
class AsteroidCatalogService:
    """Serves catalog pages from NeoWs with the built-in catalog as fallback."""

    def __init__(self, *, client: Optional[NASAClient] = None, enable_live_apis: bool = True) -> None:
        self.enable_live_apis = enable_live_apis
        self.client = client if enable_live_apis else None

    def load_catalog(self, page: int = 0) -> List[Dict[str, object]]:
        """Return catalog records for ``page``; never raises."""

        if self.client is not None:
            try:
                records = self.client.browse_asteroids(page)
            except CatalogUnavailable as exc:
                logger.warning("NEO catalog fetch failed for page %s: %s", page, exc)
            else:
                if records:
                    return records
                logger.warning("NEO catalog page %s was empty; using fallback catalog", page)
        return get_fallback_asteroids()

    def apply_record(self, store: "ParameterStore", record: Mapping[str, object]) -> AsteroidData:
        """Seed ``store`` from ``record``, or from the first fallback record if it is malformed."""

        try:
            return store.select_asteroid(record)
        except MalformedRecordError as exc:
            logger.warning("Ignoring malformed catalog record: %s", exc)
        return store.select_asteroid(get_fallback_asteroids()[0])

    def get_health_snapshot(self) -> Dict[str, object]:
        """Summarise the live catalog and fallback availability."""

        services: Dict[str, Dict[str, object]] = {}
        if self.client is None:
            services["nasa_neo_api"] = {
                "status": "disabled",
                "detail": "Live NASA API access disabled; using the fallback catalog.",
            }
        else:
            try:
                records = self.client.browse_asteroids(0)
            except CatalogUnavailable as exc:
                services["nasa_neo_api"] = {"status": "degraded", "detail": str(exc)}
            else:
                if records:
                    services["nasa_neo_api"] = {"status": "ok"}
                else:
                    services["nasa_neo_api"] = {
                        "status": "degraded",
                        "detail": "Live catalog returned no records; using the fallback catalog.",
                    }

        services["fallback_catalog"] = {
            "status": "ok",
            "detail": f"{len(get_fallback_asteroids())} built-in records available.",
        }

        statuses = {snapshot["status"] for snapshot in services.values()}
        overall = "degraded" if "degraded" in statuses else "ok"
        return {"status": overall, "services": services}
