"""Shared helper functions."""

from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from myapp.shared.exceptions import InvalidArgumentError

SortOrder = Tuple[str, bool]  # (property, descending)

_DIRECTIONS = {"asc": False, "desc": True}

NDJSON_MEDIA_TYPES = ("application/x-ndjson", "application/ndjson")
JSON_MEDIA_TYPE = "application/json"


def parse_sort(
    values: Optional[Iterable[str]],
    allowed_properties: Mapping[str, str],
    entity_name: str
) -> List[SortOrder]:
    """Parse ``sort`` query values such as ``id,desc`` into sort orders.

    Each value is ``property[,property...][,asc|desc]``; the trailing
    direction applies to every property before it and defaults to ascending.
    Values may be repeated to sort on several keys.

    ``allowed_properties`` maps the names clients sort on to the stored
    field names, which is what the returned orders carry.
    """
    orders: List[SortOrder] = []
    for value in values or []:
        parts = [part.strip() for part in value.split(",") if part.strip()]
        if not parts:
            continue

        descending = False
        if parts[-1].lower() in _DIRECTIONS:
            descending = _DIRECTIONS[parts.pop().lower()]
            if not parts:
                raise InvalidArgumentError(
                    f"Sort direction '{value}' has no property", entity_name, "sortinvalid"
                )

        for prop in parts:
            if prop not in allowed_properties:
                raise InvalidArgumentError(
                    f"Cannot sort on unknown property '{prop}'", entity_name, "sortinvalid"
                )
            orders.append((allowed_properties[prop], descending))
    return orders


def build_location(api_prefix: str, path_segment: str, entity_id) -> str:
    """Build the Location of a newly created entity, e.g. ``/api/as/1``."""
    return f"{api_prefix.rstrip('/')}/{path_segment}/{entity_id}"


def accept_qualities(accept: Optional[str]) -> Dict[str, float]:
    """Map each media type of an ``Accept`` header to its ``q`` value.

    A missing ``q`` counts as 1.0; an unparsable one as 0.0.
    """
    qualities: Dict[str, float] = {}
    for item in (accept or "").split(","):
        params = item.split(";")
        media_type = params[0].strip().lower()
        if not media_type:
            continue

        quality = 1.0
        for param in params[1:]:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value.strip())
                except ValueError:
                    quality = 0.0
        qualities[media_type] = max(quality, qualities.get(media_type, 0.0))
    return qualities


def wants_ndjson(accept: Optional[str]) -> bool:
    """Check whether an ``Accept`` header prefers newline-delimited JSON.

    NDJSON wins when it is acceptable (``q > 0``) and either JSON is not
    listed or NDJSON has a strictly higher quality.
    """
    qualities = accept_qualities(accept)
    ndjson_quality = max(qualities.get(media_type, 0.0) for media_type in NDJSON_MEDIA_TYPES)
    if ndjson_quality <= 0:
        return False

    json_quality = qualities.get(JSON_MEDIA_TYPE)
    return json_quality is None or ndjson_quality > json_quality
