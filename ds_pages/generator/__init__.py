"""Rendering, change detection, and persistence of design-system doc pages."""

from .cache import check_cache, should_write
from .content import HtmlContentRenderer
from .errors import (
    CacheReadError,
    DirectoryCreateError,
    GenerationError,
    PageGenerationError,
    ReservedNameError,
    WriteError,
)
from .hashing import content_digest
from .models import (
    CacheDecision,
    CacheReason,
    GenerationReport,
    PageFailure,
    RenderMode,
    RenderTarget,
    TargetOutcome,
)
from .page_generator import PageGenerator, select_mode
from .page_tree import PageTreeRenderer
from .paths import DocsPath, DocsPathResolver
from .renderer import PageRenderer
from .writer import DirectoryWriter

__all__ = [
    "CacheDecision",
    "CacheReadError",
    "CacheReason",
    "DirectoryCreateError",
    "DirectoryWriter",
    "DocsPath",
    "DocsPathResolver",
    "GenerationError",
    "GenerationReport",
    "HtmlContentRenderer",
    "PageFailure",
    "PageGenerationError",
    "PageGenerator",
    "PageRenderer",
    "PageTreeRenderer",
    "RenderMode",
    "RenderTarget",
    "ReservedNameError",
    "TargetOutcome",
    "WriteError",
    "check_cache",
    "content_digest",
    "select_mode",
]
