"""Learn Schemas — Pydantic response models for categories and articles.

Invariants:
    - Built from core dataclasses via from_attributes (no hand-copied fields)
    - Serialized with camelCase aliases (parentId, featuredImage, hasNextPage, ...)
    - featuredImage is null when the article has no images

Design Decisions:
    - Category responses use the success/data/message envelope of the legacy
      learn endpoints; article responses are returned bare
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LearnSchema(BaseModel):
    """Base schema: camelCase on the wire, attribute access from dataclasses."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


# --- Categories ---------------------------------------------------------------

class CategoryResponse(LearnSchema):
    id: int
    name: str
    slug: str
    description: str
    parent_id: int | None
    article_count: int
    children: list["CategoryResponse"] = []


class CategoryListResponse(LearnSchema):
    success: bool = True
    data: list[CategoryResponse]
    message: str = "Categories retrieved successfully"
    total: int


class CategoryDetailResponse(LearnSchema):
    success: bool = True
    data: CategoryResponse
    message: str = "Category retrieved successfully"


# --- Article listing ----------------------------------------------------------

class FeaturedImageResponse(LearnSchema):
    original: str
    thumbnail: str
    medium: str


class ArticleSummaryResponse(LearnSchema):
    id: int
    slug: str
    title: str
    excerpt: str
    featured_image: FeaturedImageResponse | None
    published_at: datetime


class PaginationMetaResponse(LearnSchema):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class ArticleListResponse(LearnSchema):
    articles: list[ArticleSummaryResponse]
    pagination: PaginationMetaResponse


# --- Full article -------------------------------------------------------------

class ArticleImageResponse(LearnSchema):
    original: str
    thumbnail: str
    medium: str
    title: str
    caption: str


class ArticleCategoryResponse(LearnSchema):
    id: int
    name: str
    slug: str


class ArticleAuthorResponse(LearnSchema):
    id: int
    name: str


class ArticleSponsorResponse(LearnSchema):
    name: str
    image_url: str
    image_sidebar_url: str
    image_content_url: str
    extra_data: str


class ArticleSeoResponse(LearnSchema):
    title: str
    description: str
    canonical: str
    focus_keyword: str
    seo_score: int
    og_title: str
    og_description: str
    og_image: str
    twitter_title: str
    twitter_description: str
    twitter_image: str


class LocationResponse(LearnSchema):
    latitude: str
    longitude: str


class ArticleResponse(LearnSchema):
    id: int
    slug: str
    url: str
    title: str
    excerpt: str
    content: str
    published_at: datetime
    category_path: list[str]
    images: list[ArticleImageResponse]
    categories: list[ArticleCategoryResponse]
    author: ArticleAuthorResponse | None
    keywords: list[str]
    is_sponsored: bool
    sponsor: ArticleSponsorResponse
    seo: ArticleSeoResponse | None
    location: LocationResponse | None
