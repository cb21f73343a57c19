"""Path Parser — splits a raw article request path into category path and slug.

Invariants:
    - Marker absent → InvalidPathError("missing article prefix")
    - No segments after the marker → InvalidPathError("empty path")
    - One segment after the marker → InvalidPathError("missing category segment")
    - Last segment is the article slug; the rest, joined by "/", the category path
    - Never touches the repository

Design Decisions:
    - Empty segments (leading, trailing, doubled slashes) are discarded before
      counting, so "/article/" and "/article//" are both the empty case
"""

from learn_api.core.content_types import ArticlePath
from learn_api.core.domain_types import ARTICLE_PATH_MARKER
from learn_api.core.errors import ErrorContext, InvalidPathError


def parse_article_path(raw_path: str, marker: str = ARTICLE_PATH_MARKER) -> ArticlePath:
    """Parse `.../article/<category>/.../<slug>`. Pure, no IO."""
    start = raw_path.find(marker)
    if start == -1:
        raise InvalidPathError(
            "missing article prefix", ErrorContext(identifier=raw_path),
        )

    remainder = raw_path[start + len(marker):]
    segments = [s for s in remainder.split("/") if s]

    if not segments:
        raise InvalidPathError("empty path", ErrorContext(identifier=raw_path))
    if len(segments) == 1:
        raise InvalidPathError(
            "missing category segment",
            ErrorContext(identifier=raw_path, article_slug=segments[0]),
        )

    return ArticlePath(
        category_path="/".join(segments[:-1]),
        article_slug=segments[-1],
    )
