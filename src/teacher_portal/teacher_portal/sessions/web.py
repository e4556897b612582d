from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import flash, g, jsonify, redirect, request, session, url_for

from .holder import SessionHolder
from .registry import SessionRegistry

SESSION_KEY = "portal_key"


def current_holder(registry: SessionRegistry) -> Optional[SessionHolder]:
    holder = registry.get(session.get(SESSION_KEY))
    if holder is None or not holder.is_authenticated:
        return None
    return holder


def login_required(registry: SessionRegistry):
    """Decorator factory: puts the logged-in holder on ``g.holder``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            holder = current_holder(registry)
            if holder is None:
                session.pop(SESSION_KEY, None)
                if request.path.startswith("/api/"):
                    return jsonify({"success": False, "error": "Not logged in"}), 401
                flash("Please log in to continue.", "warning")
                return redirect(url_for("login"))
            g.holder = holder
            return view(*args, **kwargs)

        return wrapper

    return decorator
