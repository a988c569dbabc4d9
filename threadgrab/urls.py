import re
import logging

from .errors import InvalidInput, UnsupportedHost, PostIdNotFound
from .models import NormalizedTarget

logger = logging.getLogger("threadgrab")

THREADS_HOSTS = ("threads.net", "threads.com")

_URL_IN_TEXT = re.compile(r'https?://[^\s<>"\']+')
_POST_ID = re.compile(r'/post/([A-Za-z0-9_-]+)')


def normalize_url(raw) -> NormalizedTarget:
    """Validate a user supplied post link and extract its post id.

    Accepts bare links ("threads.net/@user/post/ABC") as well as share text
    with a link inside it. Never touches the network.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidInput()
    url = raw.strip()
    # 分享文案中可能夹带链接，只取 Threads 域名的那个
    for embedded in _URL_IN_TEXT.findall(url):
        if any(h in embedded.lower() for h in THREADS_HOSTS):
            url = embedded
            break

    if not any(h in url.lower() for h in THREADS_HOSTS):
        raise UnsupportedHost()

    if not url.lower().startswith(("http://", "https://")):
        url = "https://" + url
    logger.debug(f"Normalized URL: {url}")

    m = _POST_ID.search(url)
    if not m:
        raise PostIdNotFound()
    post_id = m.group(1)
    logger.debug(f"Post ID: {post_id}")
    return NormalizedTarget(url=url, post_id=post_id)
