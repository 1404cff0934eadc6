from impact_api.errors import BadRequest


def optional_string(data, field):
    """Return data[field] if it is a string or absent, otherwise 400."""
    value = data.get(field)
    if value is not None and not isinstance(value, str):
        raise BadRequest(f"{field} must be a string")
    return value
