from __future__ import annotations

from flask import Flask, g, jsonify, render_template

from ..container import Container
from ..sessions.web import login_required


def register(app: Flask, container: Container) -> None:
    requires_login = login_required(container.sessions)

    @app.route("/classes", endpoint="classes")
    @requires_login
    def classes():
        auth = g.holder.current
        return render_template(
            "classes.html",
            teacher=auth.teacher,
            school_name=auth.school_name,
            sheet_links=auth.sheet_links,
            warning=auth.warning,
        )

    @app.route("/api/sheet-links", endpoint="api_sheet_links")
    @requires_login
    def api_sheet_links():
        auth = g.holder.current
        return jsonify(
            {
                "success": True,
                "teacher": {
                    "id": auth.teacher.id,
                    "name": auth.teacher.name,
                    "login_id": auth.teacher.login_id,
                    "school_id": auth.teacher.school_id,
                },
                "school": {"id": auth.school.id, "name": auth.school.name} if auth.school else None,
                "sheet_links": [link.to_dict() for link in auth.sheet_links],
                "warning": auth.warning,
            }
        )
