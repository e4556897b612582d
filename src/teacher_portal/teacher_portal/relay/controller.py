from __future__ import annotations

import logging

from flask import Flask, g, jsonify, request

from ..container import Container
from ..core.exceptions import NetworkError, RelayError, ValidationError
from ..sessions.web import login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    requires_login = login_required(container.sessions)

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance")
    @requires_login
    def api_attendance():
        payload = request.get_json(silent=True)
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            return jsonify({"success": False, "error": "Request body must be a JSON object"}), 400

        try:
            count = container.relay_service.submit_for_class(
                g.holder.current,
                class_id=str(payload.get("class_id") or ""),
                records=payload.get("records"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except NetworkError as e:
            return jsonify({"success": False, "error": str(e)}), 503
        except RelayError as e:
            return jsonify({"success": False, "error": str(e)}), 502
        except Exception:
            logger.exception("attendance relay failed")
            return jsonify({"success": False, "error": "Unexpected error while submitting attendance"}), 500

        return jsonify({"success": True, "submitted": count})
