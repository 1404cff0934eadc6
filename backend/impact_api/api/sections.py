import logging

from flask import g, jsonify, request
from impact_api.application.content.section_repository import SectionRepository
from impact_api.domain.sections import get_section_type
from impact_api.errors import BadRequest, NotFound
from impact_api.utils.decorators import admin_required
from . import api_bp

log = logging.getLogger(__name__)


def _repository_for(section):
    section_type = get_section_type(section)
    if section_type is None:
        raise NotFound("Unknown section", section=section)
    return SectionRepository(section_type)


@api_bp.route("/impact/<section>", methods=["GET"])
def get_section(section):
    repository = _repository_for(section)

    data = repository.find_by_slug(g.slug)
    if data is None:
        log.info("[%s] GET not found slug=%s", section, g.slug)
        raise NotFound("Content not found", section=section)

    return jsonify({"data": data}), 200


@api_bp.route("/impact/<section>", methods=["PUT"])
@admin_required
def put_section(section):
    repository = _repository_for(section)

    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise BadRequest("Invalid request body")

    log.info("[%s] PUT slug=%s keys=%s", section, g.slug, sorted(body))
    data = repository.upsert_by_slug(g.slug, body)

    return jsonify({"data": data}), 200
