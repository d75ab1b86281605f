"""NASA Near-Earth Object Web Service (NeoWs) catalog access."""
from __future__ import annotations

from typing import Dict, List, Optional

import logging

import requests


logger = logging.getLogger(__name__)

NASA_API_ROOT = "https://api.nasa.gov/neo/rest/v1"
DEFAULT_TIMEOUT = 10
DEFAULT_PAGE_SIZE = 20


class CatalogUnavailable(RuntimeError):
    """Raised when the live NEO catalog cannot be reached."""


class NASAClient:
    """Thin NeoWs wrapper returning raw catalog records.

    No retries; callers fall back to the built-in catalog.
    """

    def __init__(
        self,
        api_key: str,
        session: Optional[requests.Session] = None,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.api_key = api_key or "DEMO_KEY"
        self.session = session or requests.Session()
        self.page_size = page_size
        self._page_cache: Dict[tuple[int, int], List[Dict[str, object]]] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def browse_asteroids(self, page: int = 0) -> List[Dict[str, object]]:
        """Return one page of raw NEO records from ``/neo/browse``."""

        cache_key = (page, self.page_size)
        if cache_key in self._page_cache:
            return self._page_cache[cache_key]

        payload = self._request_json(
            "/neo/browse",
            params={"page": page, "size": self.page_size},
        )
        objects = payload.get("near_earth_objects", []) if isinstance(payload, dict) else None
        if not isinstance(objects, list):
            raise CatalogUnavailable("Unexpected NeoWs browse payload")
        records = [item for item in objects if isinstance(item, dict)]
        if records:
            self._page_cache[cache_key] = records
        return records

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _request_json(self, path: str, params: Optional[Dict[str, object]] = None) -> Dict[str, object]:
        url = f"{NASA_API_ROOT}{path}"
        merged_params: Dict[str, object] = {"api_key": self.api_key}
        if params:
            merged_params.update(params)
        try:
            response = self.session.get(url, params=merged_params, timeout=DEFAULT_TIMEOUT)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            logger.debug("NeoWs request to %s failed: %s", path, exc)
            raise CatalogUnavailable(str(exc)) from exc
        except ValueError as exc:
            raise CatalogUnavailable(f"Invalid JSON from NeoWs: {exc}") from exc
