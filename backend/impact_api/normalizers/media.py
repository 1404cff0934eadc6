from impact_api.utils.time import isoformat_utc


def normalize_media(record):
    entity = None
    if record.entity_type or record.entity_id:
        entity = {"type": record.entity_type, "id": record.entity_id}

    return {
        "key": record.key,
        "url": record.url,
        "contentType": record.content_type,
        "bytes": record.bytes,
        "width": record.width,
        "height": record.height,
        "duration": record.duration,
        "alt": record.alt,
        "tag": record.tag,
        "entity": entity,
        "createdAt": isoformat_utc(record.created_at),
    }
