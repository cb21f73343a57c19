"""Content Types — read-only projections of categories, articles and pagination.

Invariants:
    - Built per request from repository data, discarded after the response
    - Category.children is only populated by the tree builder, never persisted
    - Article.category_path is the canonical path: root-to-parent category slugs
    - PaginationMeta.total_pages is 0 when total is 0

Design Decisions:
    - Plain dataclasses, not ORM rows or Pydantic models: core stays free of
      persistence and transport concerns; schemas/ converts at the boundary
"""

from dataclasses import dataclass, field
from datetime import datetime

from learn_api.core.domain_types import ROOT_PARENT_ID


@dataclass
class Category:
    """A node of the category forest."""
    id: int
    name: str
    slug: str
    description: str = ""
    parent_id: int | None = ROOT_PARENT_ID
    article_count: int = 0
    children: list["Category"] = field(default_factory=list)

    @property
    def has_parent(self) -> bool:
        return bool(self.parent_id)


@dataclass(frozen=True)
class ArticleImage:
    original: str
    thumbnail: str
    medium: str
    title: str = ""
    caption: str = ""


@dataclass(frozen=True)
class ArticleCategoryRef:
    id: int
    name: str
    slug: str


@dataclass(frozen=True)
class ArticleAuthor:
    id: int
    name: str


@dataclass(frozen=True)
class ArticleSponsor:
    name: str = ""
    image_url: str = ""
    image_sidebar_url: str = ""
    image_content_url: str = ""
    extra_data: str = ""


@dataclass(frozen=True)
class ArticleSeo:
    title: str
    description: str
    canonical: str = ""
    focus_keyword: str = ""
    seo_score: int = 0
    og_title: str = ""
    og_description: str = ""
    og_image: str = ""
    twitter_title: str = ""
    twitter_description: str = ""
    twitter_image: str = ""


@dataclass(frozen=True)
class LocationGeopoint:
    latitude: str
    longitude: str


@dataclass
class Article:
    """A published article with its display fields."""
    id: int
    slug: str
    url: str
    title: str
    excerpt: str
    published_at: datetime
    category_path: tuple[str, ...] = ()
    content: str = ""
    images: list[ArticleImage] = field(default_factory=list)
    categories: list[ArticleCategoryRef] = field(default_factory=list)
    author: ArticleAuthor | None = None
    keywords: list[str] = field(default_factory=list)
    is_sponsored: bool = False
    sponsor: ArticleSponsor = field(default_factory=ArticleSponsor)
    seo: ArticleSeo | None = None
    location: LocationGeopoint | None = None


@dataclass
class ArticlePage:
    """One page of articles as returned by the repository, plus the full count."""
    items: list[Article]
    total: int


@dataclass(frozen=True)
class FeaturedImage:
    original: str
    thumbnail: str
    medium: str


@dataclass(frozen=True)
class ArticleSummary:
    id: int
    slug: str
    title: str
    excerpt: str
    featured_image: FeaturedImage | None
    published_at: datetime


@dataclass(frozen=True)
class PaginationRequest:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PaginationMeta:
    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


@dataclass(frozen=True)
class ArticleListing:
    articles: list[ArticleSummary]
    pagination: PaginationMeta


@dataclass(frozen=True)
class ArticlePath:
    """A hierarchical article path split into category path and article slug."""
    category_path: str
    article_slug: str
