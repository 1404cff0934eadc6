# impact_api/normalizers/snapshot.py
from __future__ import annotations

from typing import Any, Dict

from impact_api.models.snapshot import Snapshot
from impact_api.utils.time import isoformat_utc


def normalize_snapshot(snapshot: Snapshot, include_data: bool = True) -> Dict[str, Any]:
    """
    Normalizes a Snapshot model into API-safe JSON.

    Notes:
    - list views pass include_data=False; the column is deferred there and
      must not be touched
    """
    base: Dict[str, Any] = {
        "_id": snapshot.id,
        "name": snapshot.name,
        "trigger": snapshot.trigger,
        "slug": snapshot.slug,
        "createdAt": isoformat_utc(snapshot.created_at),
    }

    if include_data:
        base["data"] = snapshot.data or {}

    return base
