import re
import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .http import PARSE_EXCEPTIONS
from .models import FetchedPage, VideoCandidate
from .scripts import iter_payloads, iter_script_bodies
from .search import find_video_url

logger = logging.getLogger("threadgrab")

# "/" escaped either as a unicode escape or as "\/"
_ESC_SLASH = r'(?:\\u002[fF]|\\/)'
_ESC_SCHEME = r'https:' + _ESC_SLASH + _ESC_SLASH

# ─── 基类 ──────────────────────────────────────────────────────────────────────

class BaseStrategy(ABC):
    """One way of locating a video URL in a fetched post page."""

    name: str = ""

    @abstractmethod
    def attempt(self, page: FetchedPage) -> Optional[VideoCandidate]:
        ...

    def _found(self, url: str) -> VideoCandidate:
        logger.debug(f"[{self.name}] Found video URL: {url[:100]}")
        return VideoCandidate(url=url, strategy=self.name)

# ─── 结构化数据 ────────────────────────────────────────────────────────────────

class StructuredDataStrategy(BaseStrategy):
    """Parse the server-rendered data scripts and walk them for video_versions."""

    name = "structured"

    def attempt(self, page: FetchedPage) -> Optional[VideoCandidate]:
        for payload in iter_payloads(page.html):
            try:
                url = find_video_url(payload)
            except PARSE_EXCEPTIONS as e:
                logger.debug(f"[{self.name}] skipping payload: {e}")
                continue
            if url:
                return self._found(url)
        return None

# ─── 文本回退 ──────────────────────────────────────────────────────────────────

class ScriptVideoVersionsStrategy(BaseStrategy):
    """video_versions literal inside any script, even one that is not valid JSON."""

    name = "script_video_versions"
    pattern = re.compile(r'"video_versions"\s*:\s*\[\s*\{[^}]*"url"\s*:\s*"([^"]+)"', re.IGNORECASE)

    def attempt(self, page: FetchedPage) -> Optional[VideoCandidate]:
        for content in iter_script_bodies(page.html):
            m = self.pattern.search(content)
            if m:
                return self._found(m.group(1))
        return None


class ScriptCdnUrlStrategy(BaseStrategy):
    """Escaped CDN .mp4 URL inside any script."""

    name = "script_cdn_url"
    pattern = re.compile(_ESC_SCHEME + r'scontent[^"]*?\.mp4[^"]*')

    def attempt(self, page: FetchedPage) -> Optional[VideoCandidate]:
        for content in iter_script_bodies(page.html):
            m = self.pattern.search(content)
            if m:
                return self._found(m.group(0))
        return None


class RawHtmlUrlStrategy(BaseStrategy):
    """Last resort: escaped .mp4 URLs anywhere in the page."""

    name = "raw_html_url"
    patterns = (
        re.compile(_ESC_SCHEME + r'scontent[^"\'\s]*?\.mp4[^"\'\s]*', re.IGNORECASE),
        re.compile(_ESC_SCHEME + r'video[^"\'\s]*?\.mp4[^"\'\s]*', re.IGNORECASE),
        re.compile(r'"url":"(' + _ESC_SCHEME + r'[^"]*cdninstagram[^"]*\.mp4[^"]*)"', re.IGNORECASE),
    )

    def attempt(self, page: FetchedPage) -> Optional[VideoCandidate]:
        for pattern in self.patterns:
            m = pattern.search(page.html or "")
            if m:
                return self._found(m.group(1) if pattern.groups else m.group(0))
        return None


DEFAULT_STRATEGIES: tuple = (
    StructuredDataStrategy(),
    ScriptVideoVersionsStrategy(),
    ScriptCdnUrlStrategy(),
    RawHtmlUrlStrategy(),
)


def run_strategies(page: FetchedPage, strategies: Sequence[BaseStrategy] = DEFAULT_STRATEGIES) -> Optional[VideoCandidate]:
    """Run strategies in order and return the first candidate found.

    A strategy that trips over an unexpected payload shape counts as a miss.
    """
    for strategy in strategies:
        try:
            candidate = strategy.attempt(page)
        except PARSE_EXCEPTIONS as e:
            logger.warning(f"[{strategy.name}] 解析失败: {e}")
            continue
        if candidate and candidate.url:
            return candidate
        logger.debug(f"[{strategy.name}] no match")
    return None
