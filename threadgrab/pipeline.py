import logging
from typing import Optional, Sequence, Union

from .errors import ExtractionError, InvalidInput, Internal, VideoNotFound
from .escapes import clean_url
from .http import PageFetcher
from .models import DiagnosticInfo, ExtractResult, ExtractionRequest
from .scripts import THREAD_MARKER, VIDEO_MARKER
from .strategies import DEFAULT_STRATEGIES, BaseStrategy, run_strategies
from .thumbnail import extract_thumbnail
from .urls import normalize_url

logger = logging.getLogger("threadgrab")

# ─── 提取入口 ──────────────────────────────────────────────────────────────────

def diagnose(html: str) -> DiagnosticInfo:
    """Marker flags that tell a changed page layout apart from a garbage response."""
    html = html or ""
    return DiagnosticInfo(
        html_length=len(html),
        has_video_marker=VIDEO_MARKER in html,
        has_thread_marker=THREAD_MARKER in html,
        has_mp4_marker=".mp4" in html,
    )


def extract(request: Union[ExtractionRequest, str], fetcher: Optional[PageFetcher] = None,
            strategies: Optional[Sequence[BaseStrategy]] = None) -> ExtractResult:
    """统一提取入口: normalize → fetch → strategies → clean → thumbnail."""
    if not isinstance(request, ExtractionRequest):
        request = ExtractionRequest(raw_url=request)
    target = normalize_url(request.raw_url)
    page = (fetcher or PageFetcher()).fetch(target)

    candidate = run_strategies(page, DEFAULT_STRATEGIES if strategies is None else strategies)
    thumbnail = extract_thumbnail(page.html)

    if candidate is None:
        debug = diagnose(page.html)
        logger.warning(
            f"No video found with any method: post={target.post_id} "
            f"video_versions={debug.has_video_marker} thread_items={debug.has_thread_marker} "
            f"mp4={debug.has_mp4_marker}"
        )
        raise VideoNotFound(debug=debug)

    return ExtractResult(
        video_url=clean_url(candidate.url),
        thumbnail=thumbnail,
        post_id=target.post_id,
        url=target.url,
        strategy=candidate.strategy,
    )


def handle_request(payload, fetcher: Optional[PageFetcher] = None) -> tuple[int, dict]:
    """Request boundary: ``{"url": ...}`` in, ``(status, body)`` out."""
    try:
        if not isinstance(payload, dict):
            raise InvalidInput()
        request = ExtractionRequest(raw_url=payload.get("url"))
        result = extract(request, fetcher=fetcher)
        return 200, result.to_dict()
    except ExtractionError as e:
        return e.status, e.to_dict()
    except Exception as e:
        # Anything else is a bug or an unforeseen page shape.
        logger.exception(f"Download error: {e}")
        err = Internal()
        return err.status, err.to_dict()
