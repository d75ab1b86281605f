from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
import requests

from astrodefense.backend import AsteroidParameters, ParameterStore


class StubResponse:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self) -> Any:
        return self._payload


class StubSession:
    """Stands in for requests.Session; replays one response or raises."""

    def __init__(self, response: Optional[StubResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params: Optional[Dict[str, Any]] = None, timeout: Optional[float] = None) -> StubResponse:
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def neo_record(
    asteroid_id: str = "3542519",
    *,
    diameter_min_km: Optional[float] = 0.2,
    diameter_max_km: Optional[float] = 0.4,
    velocity_kms: Optional[str] = "15.5",
    **extra: Any,
) -> Dict[str, Any]:
    record: Dict[str, Any] = {"id": asteroid_id, "name": f"({asteroid_id})"}
    kilometers: Dict[str, Any] = {}
    if diameter_min_km is not None:
        kilometers["estimated_diameter_min"] = diameter_min_km
    if diameter_max_km is not None:
        kilometers["estimated_diameter_max"] = diameter_max_km
    record["estimated_diameter"] = {"kilometers": kilometers}
    if velocity_kms is not None:
        record["close_approach_data"] = [
            {"close_approach_date": "2030-01-01", "relative_velocity": {"kilometers_per_second": velocity_kms}},
        ]
    else:
        record["close_approach_data"] = []
    record.update(extra)
    return record


@pytest.fixture
def baseline() -> AsteroidParameters:
    return AsteroidParameters(diameter=1.0, velocity=20.0, angle=45.0, mass=1e12, delta_v=0.0)


@pytest.fixture
def store(baseline: AsteroidParameters) -> ParameterStore:
    return ParameterStore(baseline)
