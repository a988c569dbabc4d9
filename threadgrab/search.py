from typing import Optional

from .models import JsonValue

MAX_DEPTH = 50
VIDEO_VERSIONS_KEY = "video_versions"


def _first_version_url(record: dict) -> Optional[str]:
    """URL of the first entry of a non-empty ``video_versions`` list.

    The origin lists renditions best-first; taking the first one is a
    heuristic, not a guarantee.
    """
    versions = record.get(VIDEO_VERSIONS_KEY)
    if not isinstance(versions, list) or not versions:
        return None
    first = versions[0]
    if isinstance(first, dict):
        url = first.get("url")
        if isinstance(url, str) and url:
            return url
    return None


def find_video_url(value: JsonValue, depth: int = 0) -> Optional[str]:
    """Depth-first search for the first video rendition URL in a parsed payload.

    Lists are walked in index order, dicts in key order. A branch nested
    deeper than MAX_DEPTH yields None without failing the whole search.
    """
    if depth > MAX_DEPTH:
        return None

    if isinstance(value, list):
        for item in value:
            found = find_video_url(item, depth + 1)
            if found:
                return found
        return None

    if isinstance(value, dict):
        found = _first_version_url(value)
        if found:
            return found
        for item in value.values():
            found = find_video_url(item, depth + 1)
            if found:
                return found
        return None

    # str / int / float / bool / None
    return None
