"""
Shared-secret access gate

Every request except CORS preflight must carry ``x-app-key`` equal to the
configured APP_SECRET.
"""
import hmac

from flask import current_app, jsonify, request

APP_KEY_HEADER = "x-app-key"


def keys_match(supplied, secret) -> bool:
    """Equality check on the header value; None only matches None."""
    if supplied is None or secret is None:
        return supplied is secret
    return hmac.compare_digest(str(supplied).encode("utf-8"), str(secret).encode("utf-8"))


def check_app_key():
    if request.method == "OPTIONS":
        return None

    supplied = request.headers.get(APP_KEY_HEADER)
    if not keys_match(supplied, current_app.config.get("APP_SECRET")):
        current_app.logger.info("Rejected %s %s: bad or missing %s", request.method, request.path, APP_KEY_HEADER)
        return jsonify({"error": "Unauthorized"}), 401
    return None


def init_gate(app):
    """Register the gate and warn about an unset secret"""
    if app.config.get("APP_SECRET") is None:
        app.logger.warning(
            "APP_SECRET is not set: requests without %s will be accepted and requests with it rejected",
            APP_KEY_HEADER,
        )
    app.before_request(check_app_key)
