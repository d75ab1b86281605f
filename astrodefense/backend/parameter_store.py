"""Single source of truth for simulation parameters and their derived impact."""
from __future__ import annotations

from copy import deepcopy
from dataclasses import replace
from typing import Callable, Dict, List, Mapping, Optional, Union

import logging

from .data_service import extract_asteroid_data
from .models import AsteroidData, AsteroidParameters, DeflectionMethod, ImpactResult
from .physics_engine import compute_impact

logger = logging.getLogger(__name__)

Listener = Callable[[ImpactResult], None]


class UnknownParameterError(KeyError):
    """Raised when a mutation names a field AsteroidParameters does not have."""


class ParameterStore:
    """Holds the current parameters and keeps the impact snapshot in step.

    Every mutation builds a new parameter set, recomputes the impact once and
    publishes both together before returning. Values are not range-checked.
    """

    def __init__(self, defaults: Optional[AsteroidParameters] = None) -> None:
        self._defaults = replace(defaults) if defaults is not None else AsteroidParameters()
        self._listeners: List[Listener] = []
        self._parameters = replace(self._defaults)
        self._result = compute_impact(self._parameters)

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------
    def get(self) -> AsteroidParameters:
        """Return a copy of the current parameters."""

        return deepcopy(self._parameters)

    def get_result(self) -> ImpactResult:
        return self._result

    @property
    def result(self) -> ImpactResult:
        return self._result

    def snapshot(self) -> Dict[str, object]:
        return {"parameters": self._parameters.to_dict(), "impact": self._result.to_dict()}

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def set_field(self, name: str, value: object) -> ImpactResult:
        return self.update(**{name: value})

    def set_deflection(self, method: Union[DeflectionMethod, str], delta_v: float) -> ImpactResult:
        return self.update(deflection_method=method, delta_v=delta_v)

    def update(self, **changes: object) -> ImpactResult:
        """Apply several field changes as one mutation."""

        unknown = sorted(set(changes) - set(AsteroidParameters.field_names()))
        if unknown:
            raise UnknownParameterError(", ".join(unknown))
        if "deflection_method" in changes:
            changes["deflection_method"] = DeflectionMethod(changes["deflection_method"])
        return self._commit(replace(self._parameters, **changes))

    def select_asteroid(self, record: Mapping[str, object]) -> AsteroidData:
        """Seed diameter, velocity and mass from a catalog record."""

        data = extract_asteroid_data(record)
        self.update(
            diameter=data.diameter,
            velocity=data.velocity,
            mass=data.mass,
            selected_asteroid=deepcopy(dict(record)),
        )
        return data

    def reset(self) -> ImpactResult:
        return self._commit(replace(self._defaults))

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for new snapshots; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _commit(self, parameters: AsteroidParameters) -> ImpactResult:
        result = compute_impact(parameters)
        self._parameters, self._result = parameters, result
        logger.debug(
            "Recomputed impact: %.3e J, %s",
            result.energy,
            result.mission_status.value,
        )
        for listener in list(self._listeners):
            listener(result)
        return result
