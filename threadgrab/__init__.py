from .models import (
    JsonValue,
    ExtractionRequest,
    NormalizedTarget,
    FetchedPage,
    VideoCandidate,
    DiagnosticInfo,
    ExtractResult,
)
from .errors import (
    ErrorKind,
    ExtractionError,
    InvalidInput,
    UnsupportedHost,
    PostIdNotFound,
    FetchFailed,
    VideoNotFound,
    Internal,
)
from .urls import normalize_url
from .http import BROWSER_HEADERS, DESKTOP_UA, TIMEOUT, PageFetcher
from .escapes import clean_url
from .search import MAX_DEPTH, find_video_url
from .scripts import iter_data_scripts, iter_payloads, iter_script_bodies
from .strategies import (
    BaseStrategy,
    StructuredDataStrategy,
    ScriptVideoVersionsStrategy,
    ScriptCdnUrlStrategy,
    RawHtmlUrlStrategy,
    DEFAULT_STRATEGIES,
    run_strategies,
)
from .thumbnail import extract_thumbnail
from .pipeline import diagnose, extract, handle_request

__version__ = "0.1.0"
