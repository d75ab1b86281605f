"""AstroDefense Flask application entrypoint."""
from __future__ import annotations

from typing import Any, Dict, Optional

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

from .backend import (
    AsteroidCatalogService,
    NASAClient,
    ParameterStore,
    UnknownParameterError,
)
from .config import Settings, get_settings

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = ("diameter", "velocity", "angle", "mass", "delta_v")


def _prepare_changes(payload: Dict[str, Any]) -> Dict[str, Any]:
    changes: Dict[str, Any] = {}
    for name, value in payload.items():
        if name == "selected_asteroid":
            raise UnknownParameterError(name)
        changes[name] = float(value) if name in NUMERIC_FIELDS else value
    return changes


def _bad_request(message: str) -> Any:
    response = jsonify({"error": message})
    response.status_code = 400
    return response


def create_app(
    settings: Optional[Settings] = None,
    *,
    catalog_service: Optional[AsteroidCatalogService] = None,
    store: Optional[ParameterStore] = None,
) -> Flask:
    settings = settings or get_settings()
    app = Flask(__name__)
    app.json.sort_keys = False
    app.config.update(DEBUG=settings.debug)
    CORS(app)

    if catalog_service is None:
        client = NASAClient(settings.nasa_api_key, page_size=settings.catalog_page_size) if settings.use_live_apis else None
        catalog_service = AsteroidCatalogService(client=client, enable_live_apis=settings.use_live_apis)
    store = store or ParameterStore(settings.default_parameters())
    app.extensions["astrodefense.store"] = store
    app.extensions["astrodefense.catalog"] = catalog_service

    @app.route("/api/parameters", methods=["GET"])
    def get_parameters() -> Any:
        return jsonify(store.get().to_dict())

    @app.route("/api/parameters", methods=["PATCH"])
    def update_parameters() -> Any:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return _bad_request("Expected a JSON object of parameter fields")
        try:
            store.update(**_prepare_changes(payload))
        except UnknownParameterError as exc:
            return _bad_request(f"Unknown parameter: {exc.args[0]}")
        except (TypeError, ValueError) as exc:
            return _bad_request(str(exc))
        return jsonify(store.snapshot())

    @app.route("/api/parameters/reset", methods=["POST"])
    def reset_parameters() -> Any:
        store.reset()
        return jsonify(store.snapshot())

    @app.route("/api/deflection", methods=["POST"])
    def set_deflection() -> Any:
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return _bad_request("Expected a JSON object")
        current = store.get()
        try:
            method = payload.get("method", current.deflection_method)
            delta_v = float(payload.get("delta_v", current.delta_v))
            store.set_deflection(method, delta_v)
        except (TypeError, ValueError) as exc:
            return _bad_request(str(exc))
        return jsonify(store.snapshot())

    @app.route("/api/impact", methods=["GET"])
    def get_impact() -> Any:
        return jsonify(store.result.to_dict())

    @app.route("/api/asteroids", methods=["GET"])
    def asteroid_catalog() -> Any:
        page = request.args.get("page", 0, type=int)
        return jsonify({"page": page, "objects": catalog_service.load_catalog(page)})

    @app.route("/api/asteroids/select", methods=["POST"])
    def select_asteroid() -> Any:
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return _bad_request("Expected a JSON object")
        record = payload.get("record")
        if record is None:
            try:
                page = int(payload.get("page", 0))
                index = int(payload.get("index", 0))
            except (TypeError, ValueError) as exc:
                return _bad_request(str(exc))
            catalog = catalog_service.load_catalog(page)
            if not 0 <= index < len(catalog):
                return _bad_request(f"No catalog entry at index {index}")
            record = catalog[index]
        if not isinstance(record, dict):
            return _bad_request("Catalog record must be a JSON object")
        catalog_service.apply_record(store, record)
        return jsonify(store.snapshot())

    @app.route("/api/health", methods=["GET"])
    def health() -> Any:
        return jsonify(catalog_service.get_health_snapshot())

    return app


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Starting AstroDefense API (live catalog: %s)", settings.use_live_apis)
    app = create_app(settings)
    app.run(debug=settings.debug)


if __name__ == "__main__":
    main()
