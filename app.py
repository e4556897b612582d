"""Dev entrypoint: `python app.py` (APP_ENV selects the settings module)."""

from src.teacher_portal.teacher_portal.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=bool(app.config.get("DEBUG", False)))
