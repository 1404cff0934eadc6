from flask import jsonify, request
from impact_api.application.media.uploads import record_media
from impact_api.errors import BadRequest
from impact_api.utils.decorators import admin_required
from . import api_bp


@api_bp.route("/media", methods=["POST"])
@admin_required
def create_media():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Invalid request body")

    return jsonify(record_media(data)), 201
