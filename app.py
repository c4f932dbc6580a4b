"""
Resume API entrypoint

    python app.py

Runs with ProductionConfig unless FLASK_ENV names another config.
"""
import os

from dotenv import load_dotenv

load_dotenv()

from resume_api import create_app, serve  # noqa: E402

app = create_app(os.environ.get("FLASK_ENV", "production"))


if __name__ == "__main__":
    serve(app)
