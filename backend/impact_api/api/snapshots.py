from flask import g, jsonify, request
from impact_api.application.content import snapshots
from impact_api.utils.decorators import admin_required
from impact_api.utils.time import utcnow
from impact_api.utils.validation import optional_string
from . import api_bp


@api_bp.route("/snapshots", methods=["GET"])
def list_snapshots():
    result = snapshots.list_snapshots(
        limit=request.args.get("limit", snapshots.DEFAULT_LIMIT),
        skip=request.args.get("skip", 0),
    )
    return jsonify(result), 200


@api_bp.route("/snapshots", methods=["POST"])
@admin_required
def create_snapshot():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    snapshot = snapshots.create_snapshot(
        slug=g.slug,
        name=optional_string(data, "name"),
        trigger=optional_string(data, "trigger"),
    )
    return jsonify({"snapshot": snapshot}), 201


@api_bp.route("/snapshots/export", methods=["GET"])
def export_snapshot():
    document = snapshots.export_snapshot(slug=g.slug)

    filename = f"impact-report-{g.slug}-{utcnow().strftime('%Y-%m-%d')}.json"
    response = jsonify(document)
    response.headers["Content-Disposition"] = f'attachment; filename="{filename}"'
    return response, 200


@api_bp.route("/snapshots/<snapshot_id>", methods=["GET"])
def get_snapshot(snapshot_id):
    return jsonify({"snapshot": snapshots.get_snapshot(snapshot_id)}), 200


@api_bp.route("/snapshots/<snapshot_id>", methods=["DELETE"])
@admin_required
def delete_snapshot(snapshot_id):
    snapshots.delete_snapshot(snapshot_id)
    return jsonify({"success": True}), 200
