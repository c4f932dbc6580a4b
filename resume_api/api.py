"""
API Blueprint - resume upload, scan, rewrite and job match

The three analysis routes share one pipeline: read the stored upload, pull
its text, build a prompt, ask the model. Any failure along the way becomes
the route's fixed 500 body; the cause only goes to the log.
"""
from typing import Callable

from flask import Blueprint, current_app, jsonify, request

from .errors import ResumeProcessingError
from .prompts import job_match_prompt, rewrite_prompt, scan_prompt

api_bp = Blueprint("api", __name__)


def services():
    return current_app.extensions["resume_api"]


def resume_text(filename) -> str:
    svc = services()
    data = svc.store.read(filename)
    return svc.extractor.extract(data)


def run_completion(error_message: str, build_prompt: Callable[[str], str], result_key: str):
    payload = request.get_json(silent=True) or {}
    filename = payload.get("filename") if isinstance(payload, dict) else None
    try:
        text = resume_text(filename)
        output = services().completions.complete(build_prompt(text))
    except ResumeProcessingError as e:
        current_app.logger.warning("%s at %s stage (filename=%r): %s", error_message, e.stage, filename, e)
        return jsonify({"error": error_message}), 500
    except Exception:
        current_app.logger.exception("%s (filename=%r)", error_message, filename)
        return jsonify({"error": error_message}), 500
    return jsonify({result_key: output}), 200


# ============ API Routes ============

@api_bp.route("/api/upload", methods=["POST"])
def upload():
    file = request.files["file"]
    filename = services().store.save(file)
    current_app.logger.info("Stored upload %r as %s", file.filename, filename)
    return jsonify({"filename": filename}), 200


@api_bp.route("/api/scan-resume", methods=["POST"])
def scan_resume():
    return run_completion("Scan failed", scan_prompt, "analysis")


@api_bp.route("/api/rewrite-resume", methods=["POST"])
def rewrite_resume():
    return run_completion("Rewrite failed", rewrite_prompt, "rewritten")


@api_bp.route("/api/job-match", methods=["POST"])
def job_match():
    payload = request.get_json(silent=True) or {}
    target_role = payload.get("targetRole") if isinstance(payload, dict) else None
    return run_completion(
        "Job match failed",
        lambda text: job_match_prompt(text, target_role),
        "matches",
    )
