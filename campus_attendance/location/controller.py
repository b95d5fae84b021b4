"""HTTP event source for the location subsystem.

The device client answers permission prompts and streams fixes; each request
is fed to the ``LocationGate`` callbacks.
"""
from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import AuthorizationState
from ..geofence.engine import Position


def register(app: Flask, container: Container) -> None:
    gate = container.location_gate
    service = container.location_service

    def _status():
        fix = gate.current_fix()
        return {
            "authorization": gate.authorization_state.value,
            "updating": gate.is_updating,
            "prompt_pending": service.prompt_pending,
            "fix": {"latitude": fix.latitude, "longitude": fix.longitude} if fix else None,
        }

    @app.route("/location", methods=["GET"], endpoint="location_status")
    def location_status():
        return jsonify(_status())

    @app.route("/location/authorization", methods=["POST"], endpoint="location_authorization")
    def location_authorization():
        data = request.get_json(silent=True) or {}
        try:
            state = AuthorizationState(data.get("state"))
        except ValueError:
            return jsonify({"success": False, "message": "Unknown authorization state"}), 400

        service.state = state
        gate.on_authorization_changed(state)
        return jsonify(_status())

    @app.route("/location/fix", methods=["POST"], endpoint="location_fix")
    def location_fix():
        data = request.get_json(silent=True) or {}
        raw = data.get("locations")
        if raw is None:
            raw = [data]
        try:
            positions = [Position(float(p["latitude"]), float(p["longitude"])) for p in raw]
        except (KeyError, TypeError, ValueError):
            return jsonify({"success": False, "message": "latitude and longitude are required"}), 400

        gate.on_locations(positions)
        return jsonify(_status())

    @app.route("/location/error", methods=["POST"], endpoint="location_error")
    def location_error():
        data = request.get_json(silent=True) or {}
        gate.on_error(RuntimeError(str(data.get("message", "unknown location error"))))
        return jsonify(_status())
