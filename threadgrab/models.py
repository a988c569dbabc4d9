from dataclasses import dataclass
from typing import Optional, Union

# Parsed payload of one data script: dict / list / str / int / float / bool / None
JsonValue = Union[dict, list, str, int, float, bool, None]

# ─── 数据结构 ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ExtractionRequest:
    raw_url: str = ""

@dataclass(frozen=True)
class NormalizedTarget:
    url: str = ""
    post_id: str = ""

@dataclass
class FetchedPage:
    html: str = ""
    status_code: int = 0
    url: str = ""  # final URL after redirects

@dataclass
class VideoCandidate:
    url: str = ""
    strategy: str = ""

@dataclass
class DiagnosticInfo:
    html_length: int = 0
    has_video_marker: bool = False
    has_thread_marker: bool = False
    has_mp4_marker: bool = False

    def to_dict(self) -> dict:
        return {
            "htmlLength": self.html_length,
            "hasVideoMarker": self.has_video_marker,
            "hasThreadMarker": self.has_thread_marker,
            "hasMp4Marker": self.has_mp4_marker,
        }

@dataclass
class ExtractResult:
    video_url: str = ""
    thumbnail: Optional[str] = None
    post_id: str = ""
    url: str = ""
    strategy: str = ""  # which strategy located the video

    def to_dict(self) -> dict:
        """Response body handed back to the caller."""
        return {"videoUrl": self.video_url, "thumbnail": self.thumbnail}
