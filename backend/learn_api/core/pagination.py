"""Article Pagination — normalizes page/limit inputs and computes pagination metadata.

Invariants:
    - Absent page/limit → defaults (1 and 10)
    - Unparsable page/limit text, including digit strings too long to convert,
      is treated as absent → default (never not-a-number, never raises)
    - page is clamped to >= 1 (no upper bound); limit to [1, max_limit]
    - Out-of-range input is clamped, never rejected
    - total_pages = ceil(total / limit), 0 when total is 0
    - has_next_page = page < total_pages; has_previous_page = page > 1
    - No slicing here: the repository returns exactly one page of rows

Design Decisions:
    - Raw inputs arrive as text so one parse policy covers every caller
    - ArticlePaginator holds the configured defaults; the functions stay usable alone
"""

import re

from learn_api.core.content_types import PaginationMeta, PaginationRequest

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int_or_none(raw: str | int | None) -> int | None:
    """Parse an integer query value; None when absent or unparsable."""
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # beyond the interpreter's int-from-string digit limit
        return None


def parse_pagination(
    page: str | int | None,
    limit: str | int | None,
    *,
    default_page: int = DEFAULT_PAGE,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> PaginationRequest:
    """Normalize raw page/limit inputs into an effective PaginationRequest."""
    parsed_page = parse_int_or_none(page)
    parsed_limit = parse_int_or_none(limit)
    if parsed_page is None:
        parsed_page = default_page
    if parsed_limit is None:
        parsed_limit = default_limit

    return PaginationRequest(
        page=max(1, parsed_page),
        limit=min(max(1, parsed_limit), max_limit),
    )


def build_pagination_meta(request: PaginationRequest, total: int) -> PaginationMeta:
    """Pagination metadata for one page of a listing with `total` items."""
    if total < 0:
        raise ValueError(f"total must be >= 0, got {total}")
    total_pages = -(-total // request.limit)
    return PaginationMeta(
        page=request.page,
        limit=request.limit,
        total=total,
        total_pages=total_pages,
        has_next_page=request.page < total_pages,
        has_previous_page=request.page > 1,
    )


class ArticlePaginator:
    """Pagination policy with configured defaults."""

    def __init__(
        self,
        default_page: int = DEFAULT_PAGE,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ):
        self.default_page = default_page
        self.default_limit = default_limit
        self.max_limit = max_limit

    def normalize(
        self, page: str | int | None, limit: str | int | None,
    ) -> PaginationRequest:
        return parse_pagination(
            page, limit,
            default_page=self.default_page,
            default_limit=self.default_limit,
            max_limit=self.max_limit,
        )

    def meta(self, request: PaginationRequest, total: int) -> PaginationMeta:
        return build_pagination_meta(request, total)
