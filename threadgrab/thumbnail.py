import re
import logging
from typing import Optional

from .escapes import clean_url
from .http import PARSE_EXCEPTIONS

logger = logging.getLogger("threadgrab")

_OG_IMAGE = (
    re.compile(r'<meta[^>]*property="og:image"[^>]*content="([^"]+)"', re.IGNORECASE),
    re.compile(r'<meta[^>]*content="([^"]+)"[^>]*property="og:image"', re.IGNORECASE),
)


def extract_thumbnail(html: str) -> Optional[str]:
    """og:image of the page, or None. Never raises."""
    try:
        for pattern in _OG_IMAGE:
            m = pattern.search(html or "")
            if m:
                logger.debug("Found thumbnail")
                return clean_url(m.group(1))
    except PARSE_EXCEPTIONS as e:
        logger.debug(f"Thumbnail extraction skipped: {e}")
    return None
