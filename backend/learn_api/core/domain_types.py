"""Domain Types — constants and enums shared across the learn content API.

Invariants:
    - ROOT_PARENT_ID (0) and None both mean "no parent"
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum


# ─── Constants ───────────────────────────────────────────────────

ROOT_PARENT_ID = 0
ARTICLE_PATH_MARKER = "/article/"
READ_CAPABILITY = "learn:read"


# ─── Enums ───────────────────────────────────────────────────────

class IdentifierKind(str, Enum):
    """How an incoming category identifier is looked up."""
    NUMERIC = "numeric"
    SLUG = "slug"


class PublishStatus(str, Enum):
    """Article publication states — only PUBLISH is ever served."""
    PUBLISH = "publish"
    DRAFT = "draft"
    PRIVATE = "private"
    TRASH = "trash"
