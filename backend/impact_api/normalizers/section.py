import copy

from impact_api.utils.time import isoformat_utc


def normalize_section(document):
    """
    Stored section document -> API payload.

    Identity (id, collection, slug) never leaves the store; the payload is a
    deep copy so callers can't mutate the session-tracked JSON.
    """
    data = copy.deepcopy(document.content or {})
    data["updatedAt"] = isoformat_utc(document.updated_at)
    return data
