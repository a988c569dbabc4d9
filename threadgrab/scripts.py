import re
import json
import logging
from typing import Iterator

from .models import JsonValue

logger = logging.getLogger("threadgrab")

SERVER_DATA_MARKER = "ScheduledServerJS"
THREAD_MARKER = "thread_items"
VIDEO_MARKER = "video_versions"

_DATA_SCRIPT = re.compile(
    r'<script[^>]*type="application/json"[^>]*data-sjs[^>]*>([\s\S]*?)</script>',
    re.IGNORECASE,
)
_ANY_SCRIPT = re.compile(r'<script[^>]*>([\s\S]*?)</script>', re.IGNORECASE)


def iter_script_bodies(html: str) -> Iterator[str]:
    """Bodies of every <script> element, in document order."""
    for m in _ANY_SCRIPT.finditer(html or ""):
        yield m.group(1)


def iter_data_scripts(html: str) -> Iterator[str]:
    """Bodies of server-rendered JSON scripts that may carry thread data.

    Cheap substring checks run before any parse; most data scripts on a post
    page are unrelated to the post itself.
    """
    for m in _DATA_SCRIPT.finditer(html or ""):
        content = m.group(1)
        if SERVER_DATA_MARKER not in content:
            continue
        if THREAD_MARKER not in content and VIDEO_MARKER not in content:
            continue
        yield content


def iter_payloads(html: str) -> Iterator[JsonValue]:
    """Parsed payloads of the candidate data scripts.

    A payload that fails to parse is skipped and the scan goes on.
    """
    for content in iter_data_scripts(html):
        logger.debug("Found promising script tag with thread data")
        try:
            payload = json.loads(content)
        except (json.JSONDecodeError, RecursionError) as e:
            logger.debug(f"Failed to parse script JSON: {e}")
            continue
        yield payload
