from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.constants import MSG_STORE_UNAVAILABLE
from ..sessions.web import SESSION_KEY, current_holder

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if current_holder(container.sessions) is not None:
            return redirect(url_for("classes"))

        if request.method == "POST":
            login_id = request.form.get("login_id", "")
            password = request.form.get("password", "")

            # Drop any stale holder before starting a new login.
            container.sessions.discard(session.pop(SESSION_KEY, None))
            key, holder = container.sessions.create()

            try:
                ok = holder.login(login_id, password)
            except Exception:
                logger.exception("unexpected error during login")
                container.sessions.discard(key)
                flash(MSG_STORE_UNAVAILABLE, "danger")
                return render_template("login.html", login_id=login_id), 500

            if not ok:
                # Read the failure before discard(), which logs the holder out.
                message = holder.last_error or MSG_STORE_UNAVAILABLE
                status = 503 if holder.store_unavailable else 401
                container.sessions.discard(key)
                flash(message, "danger")
                return render_template("login.html", login_id=login_id), status

            session[SESSION_KEY] = key
            # A session warning is shown on the classes page itself.
            if not holder.warning:
                flash(f"Welcome, {holder.current.teacher.name}!", "success")
            return redirect(url_for("classes"))

        return render_template("login.html", login_id="")

    @app.route("/logout", endpoint="logout")
    def logout():
        container.sessions.discard(session.pop(SESSION_KEY, None))
        session.clear()
        flash("You have been logged out.", "info")
        return redirect(url_for("login"))
