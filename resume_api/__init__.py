"""
Resume API Application Factory
"""
from dataclasses import dataclass
from datetime import datetime, timezone

from flask import Flask, jsonify
from flask_cors import CORS

from .config import get_config
from .services.openai_service import CompletionClient
from .services.pdf_service import PdfTextExtractor
from .storage import UploadStore


@dataclass
class ResumeServices:
    """Collaborators shared by the API routes"""
    store: UploadStore
    extractor: PdfTextExtractor
    completions: CompletionClient


def create_app(config_name=None, extractor=None, completions=None, store=None):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    app.logger.setLevel(str(app.config["LOG_LEVEL"]).upper())

    CORS(app, send_wildcard=True)

    from .gate import init_gate
    init_gate(app)

    if store is None:
        store = UploadStore(app.config["UPLOAD_FOLDER"])
    store.ensure()

    if completions is None:
        completions = CompletionClient(
            api_key=app.config["OPENAI_API_KEY"],
            model=app.config["OPENAI_MODEL"],
            timeout=app.config["OPENAI_TIMEOUT"],
        )
        ok, msg = completions.ready()
        if not ok:
            app.logger.warning("%s; analysis endpoints will fail until it is set", msg)

    app.extensions["resume_api"] = ResumeServices(
        store=store,
        extractor=extractor or PdfTextExtractor(),
        completions=completions,
    )

    from .api import api_bp
    app.register_blueprint(api_bp)

    @app.route("/")
    def index():
        return "SERVER IS ALIVE", 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route("/healthz")
    def healthz():
        """Readiness for load balancers and monitoring"""
        svc = app.extensions["resume_api"]
        ok, msg = svc.completions.ready()
        return jsonify({
            "ok": True,
            "version": app.config["APP_VERSION"],
            "time_utc": datetime.now(timezone.utc).isoformat(),
            "openai_ready": ok,
            "openai_message": msg,
            "model": getattr(svc.completions, "model", ""),
            "upload_folder": svc.store.directory,
        }), 200

    return app


def serve(app):
    """Log the listening address and run the threaded server"""
    host = app.config["HOST"]
    port = app.config["PORT"]
    app.logger.info("Server listening on http://%s:%s", host, port)
    app.run(host=host, port=port, threaded=True, debug=app.config["DEBUG"], use_reloader=False)
