import copy
import logging
import re
from typing import Any, Dict, Optional

from sqlalchemy.orm import defer

from impact_api.domain.sections import SECTION_TYPES
from impact_api.errors import BadRequest, NotFound
from impact_api.extensions import db
from impact_api.models.snapshot import Snapshot
from impact_api.normalizers.snapshot import normalize_snapshot
from impact_api.utils.time import isoformat_utc, utcnow
from impact_api.utils.transaction import transactional
from .section_repository import SectionRepository, resolve_slug

log = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"
EXPORT_TYPE = "impact-report-export"
DEFAULT_TRIGGER = "manual"

DEFAULT_LIMIT = 50
MAX_LIMIT = 100

SNAPSHOT_ID_RE = re.compile(r"^[0-9a-f]{24}$")


def collect_sections(slug: str, session=None) -> Dict[str, Any]:
    """
    Read every section for `slug` and key the payloads by API name.

    Sections without a document are omitted. Reads are independent, so a
    concurrent edit may or may not be reflected.
    """
    data: Dict[str, Any] = {}
    for section_type in SECTION_TYPES:
        payload = SectionRepository(section_type, session=session).find_by_slug(slug)
        if payload is not None:
            data[section_type.api_name] = copy.deepcopy(payload)
    return data


def create_snapshot(
    *,
    slug: Optional[str] = None,
    name: Optional[str] = None,
    trigger: Optional[str] = None,
) -> Dict[str, Any]:
    slug = resolve_slug(slug)
    now = utcnow()

    snapshot = Snapshot()
    snapshot.slug = slug
    snapshot.name = name or f"Snapshot {isoformat_utc(now)}"
    snapshot.trigger = trigger or DEFAULT_TRIGGER
    snapshot.created_at = now
    snapshot.data = collect_sections(slug)

    with transactional():
        db.session.add(snapshot)

    log.info(
        "Snapshot %s created for slug=%s with sections=%s",
        snapshot.id, slug, sorted(snapshot.data),
    )
    return normalize_snapshot(snapshot)


def clamp_pagination(limit, skip):
    try:
        limit = int(limit)
    except (TypeError, ValueError):
        limit = DEFAULT_LIMIT
    try:
        skip = int(skip)
    except (TypeError, ValueError):
        skip = 0
    return min(max(limit, 1), MAX_LIMIT), max(skip, 0)


def list_snapshots(*, limit=DEFAULT_LIMIT, skip=0) -> Dict[str, Any]:
    limit, skip = clamp_pagination(limit, skip)

    query = Snapshot.query.options(defer(Snapshot.data))
    total = query.count()
    rows = (
        query.order_by(Snapshot.created_at.desc(), Snapshot.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )

    return {
        "snapshots": [normalize_snapshot(s, include_data=False) for s in rows],
        "total": total,
        "limit": limit,
        "skip": skip,
    }


def _load(snapshot_id: str) -> Snapshot:
    if not snapshot_id or not SNAPSHOT_ID_RE.match(snapshot_id):
        raise BadRequest("Invalid snapshot id")

    snapshot = db.session.get(Snapshot, snapshot_id)
    if snapshot is None:
        raise NotFound("Snapshot not found")
    return snapshot


def get_snapshot(snapshot_id: str) -> Dict[str, Any]:
    return normalize_snapshot(_load(snapshot_id))


def delete_snapshot(snapshot_id: str) -> None:
    snapshot = _load(snapshot_id)
    with transactional():
        db.session.delete(snapshot)
    log.info("Snapshot %s deleted", snapshot_id)


def export_snapshot(*, slug: Optional[str] = None) -> Dict[str, Any]:
    """Same fan-out as create_snapshot, returned instead of persisted."""
    slug = resolve_slug(slug)
    return {
        "_meta": {
            "version": EXPORT_VERSION,
            "exportedAt": isoformat_utc(utcnow()),
            "type": EXPORT_TYPE,
            "slug": slug,
        },
        "data": collect_sections(slug),
    }
