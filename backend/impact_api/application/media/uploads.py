import logging
from typing import Any, Dict, Optional

from impact_api.errors import BadRequest
from impact_api.extensions import db
from impact_api.models.media import MediaRecord
from impact_api.normalizers.media import normalize_media
from impact_api.utils.media import build_key, presign_put, public_url_for, sanitize_key
from impact_api.utils.transaction import transactional

log = logging.getLogger(__name__)


def sign_upload(
    *,
    content_type: Optional[str],
    extension: Optional[str] = None,
    folder: Optional[str] = None,
    key: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Presign a direct-to-storage PUT.

    A caller-supplied key is sanitized and used as-is; otherwise one is
    generated under `folder` (default "media").
    """
    if not content_type:
        raise BadRequest("contentType is required")

    if key is not None:
        key = sanitize_key(key)
    else:
        key = build_key(content_type, extension=extension, folder=folder)

    upload_url, expires = presign_put(key, content_type)
    log.info("Signed upload for key=%s (%s)", key, content_type)

    return {
        "uploadUrl": upload_url,
        "key": key,
        "publicUrl": public_url_for(key),
        "expiresInSeconds": expires,
    }


def _number(value, cast):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return cast(value)


def _text(value):
    if value is None:
        return None
    return str(value)


def record_media(payload: Dict[str, Any]) -> Dict[str, Any]:
    key = payload.get("key")
    public_url = payload.get("publicUrl")
    if not key or not public_url:
        raise BadRequest("key and publicUrl are required")

    entity = payload.get("entity") if isinstance(payload.get("entity"), dict) else {}

    record = MediaRecord()
    record.key = str(key)
    record.url = str(public_url)
    record.content_type = _text(payload.get("contentType"))
    record.bytes = _number(payload.get("bytes"), int)
    record.width = _number(payload.get("width"), int)
    record.height = _number(payload.get("height"), int)
    record.duration = _number(payload.get("duration"), float)
    record.alt = _text(payload.get("alt"))
    record.tag = _text(payload.get("tag"))
    record.entity_type = _text(entity.get("type", payload.get("entityType")))
    record.entity_id = _text(entity.get("id", payload.get("entityId")))

    with transactional():
        db.session.add(record)

    log.info("Media recorded id=%s key=%s", record.id, record.key)
    return {"id": record.id, "data": normalize_media(record)}
