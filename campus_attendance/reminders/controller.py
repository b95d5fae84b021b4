from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..container import Container


def register(app: Flask, container: Container) -> None:
    dispatcher = container.reminders
    ui_state = {"selected_tab": "attendance"}
    dispatcher.subscribe(lambda: ui_state.update(selected_tab="attendance"))

    @app.route("/reminders/next", methods=["GET"], endpoint="reminders_next")
    def reminders_next():
        schedule = dispatcher.schedule
        now = now_local()
        return jsonify({
            "identifier": schedule.identifier,
            "title": schedule.title,
            "body": schedule.body,
            "next_trigger": schedule.next_trigger(now).isoformat(),
            "window": schedule.window_label(),
            "window_open": schedule.is_open(now),
        })

    @app.route("/reminders/response", methods=["POST"], endpoint="reminders_response")
    def reminders_response():
        data = request.get_json(silent=True) or {}
        handled = dispatcher.handle_response(str(data.get("identifier", "")))
        return jsonify({"handled": handled, "selected_tab": ui_state["selected_tab"]})

    @app.route("/tabs/<tab>", methods=["POST"], endpoint="tabs_select")
    def tabs_select(tab: str):
        if tab not in {"attendance", "history", "account"}:
            return jsonify({"success": False, "message": "Unknown tab"}), 404
        ui_state["selected_tab"] = tab
        return jsonify({"selected_tab": tab})
