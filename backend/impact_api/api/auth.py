from flask import current_app, request, jsonify
from flask_jwt_extended import (
    create_access_token,
    get_jwt,
    get_jwt_identity,
    jwt_required,
    set_access_cookies,
    unset_jwt_cookies,
)
from impact_api.application.auth.login import authenticate
from impact_api.normalizers.user import normalize_user_claims
from impact_api.utils.validation import optional_string
from . import api_bp


@api_bp.route("/auth/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    user = authenticate(
        email=optional_string(data, "email"),
        password=optional_string(data, "password"),
    )

    claims = user.claims()
    access_token = create_access_token(identity=user.email, additional_claims=claims)

    response = jsonify(normalize_user_claims(user.email, claims))
    max_age = int(current_app.config["JWT_ACCESS_TOKEN_EXPIRES"].total_seconds())
    set_access_cookies(response, access_token, max_age=max_age)
    return response, 200


@api_bp.route("/auth/logout", methods=["POST"])
def logout():
    response = jsonify({"success": True})
    unset_jwt_cookies(response)
    return response, 200


@api_bp.route("/auth/me", methods=["GET"])
@jwt_required()
def me():
    return jsonify(normalize_user_claims(get_jwt_identity(), get_jwt())), 200
