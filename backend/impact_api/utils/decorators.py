import hmac
import logging
from functools import wraps

from flask import current_app, request
from flask_jwt_extended import get_jwt, verify_jwt_in_request

from impact_api.errors import Forbidden, ServerMisconfiguration, Unauthorized

log = logging.getLogger(__name__)


def _check_api_key():
    expected = current_app.config.get("ADMIN_API_KEY")
    if not expected:
        raise ServerMisconfiguration("Server misconfigured: ADMIN_API_KEY not set")

    provided = request.headers.get("X-API-Key") or ""
    if not hmac.compare_digest(provided.encode(), expected.encode()):
        log.warning("Rejected API key on %s %s", request.method, request.path)
        raise Unauthorized()


def _check_jwt():
    # Missing, invalid or expired tokens are turned into 401 by the JWT loaders.
    verify_jwt_in_request()
    if not get_jwt().get("admin"):
        raise Forbidden()


def admin_required(fn):
    """
    Gate a view behind the deployment's auth strategy.

    Runs before the view body, so a rejected caller never reaches the store.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if current_app.config.get("AUTH_STRATEGY") == "api_key":
            _check_api_key()
        else:
            _check_jwt()
        return fn(*args, **kwargs)
    return wrapper
