from flask import current_app, jsonify
from . import api_bp


@api_bp.route("/health", methods=["GET"])
def health_check():
    return jsonify({
        "status": "ok",
        "env": current_app.config.get("ENV_NAME"),
    })
