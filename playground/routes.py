"""HTTP routes for the application."""
from __future__ import annotations

import os
from typing import Any, Dict, List

from flask import Blueprint, Flask, jsonify, request

from .config import AppConfig
from .presenter import root_result_payload
from .roots import ROOT_BOUND, find_integer_square_root
from .tasks import TASKS


def register_routes(app: Flask, *, config: AppConfig) -> None:
    bp = Blueprint("playground", __name__)

    def square_root_response(number: int) -> Any:
        result = find_integer_square_root(number)
        if config.debug_log:
            print(f"[Root] {number} -> {result.kind}")
        return jsonify(root_result_payload(result))

    @bp.route("/api/square-root/<int(signed=True):number>")
    def square_root(number: int) -> Any:
        return square_root_response(number)

    @bp.route("/api/square-root", methods=["POST"])
    def square_root_post() -> Any:
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict) or "number" not in data:
            return jsonify({"error": "number_required"}), 400
        number = data["number"]
        if isinstance(number, bool) or not isinstance(number, int):
            return jsonify({"error": "invalid_number", "details": f"expected integer, got {number!r}"}), 400
        return square_root_response(number)

    @bp.route("/api/tasks")
    def list_tasks() -> Any:
        return jsonify({"tasks": sorted(TASKS)})

    @bp.route("/api/task/<task_name>")
    def get_task(task_name: str) -> Any:
        task = TASKS.get(task_name)
        if not task:
            return jsonify({"error": "unknown_task"}), 404
        return jsonify({"task": task_name, "description": task["description"], "starter_code": task["starter_code"]})

    @bp.route("/ping")
    def ping() -> Any:
        return jsonify({"ok": True, "bound": ROOT_BOUND, "cwd": os.getcwd()})

    @bp.route("/routes")
    def routes() -> Any:
        rules: List[Dict[str, Any]] = []
        for rule in app.url_map.iter_rules():
            rules.append({
                "rule": rule.rule,
                "endpoint": rule.endpoint,
                "methods": sorted(m for m in rule.methods if m not in {"HEAD", "OPTIONS"}),
            })
        rules.sort(key=lambda item: item["rule"])
        return jsonify(rules)

    app.register_blueprint(bp)


__all__ = ["register_routes"]
