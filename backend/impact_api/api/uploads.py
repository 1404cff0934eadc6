from flask import jsonify, request
from impact_api.application.media.uploads import sign_upload
from impact_api.errors import BadRequest
from impact_api.utils.decorators import admin_required
from impact_api.utils.validation import optional_string
from . import api_bp


@api_bp.route("/uploads/sign", methods=["POST"])
@admin_required
def sign():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Invalid request body")

    signed = sign_upload(
        content_type=optional_string(data, "contentType"),
        extension=optional_string(data, "extension"),
        folder=optional_string(data, "folder"),
        key=optional_string(data, "key"),
    )
    return jsonify(signed), 200
