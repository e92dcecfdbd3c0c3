"""Development entry point: ``python app.py`` or ``flask --app app run``."""

from src.cafe_backoffice.cafe_backoffice.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
