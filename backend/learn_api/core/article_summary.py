"""Article Summary — list-view projection of a full article.

Invariants:
    - slug is the final segment of the article URL (trailing "/" ignored)
    - featured_image comes from the first image only; None when there are no images
"""

from learn_api.core.content_types import Article, ArticleSummary, FeaturedImage


def slug_from_url(url: str) -> str:
    return url.rstrip("/").split("/")[-1]


def summarize_article(article: Article) -> ArticleSummary:
    featured = None
    if article.images:
        first = article.images[0]
        featured = FeaturedImage(
            original=first.original,
            thumbnail=first.thumbnail,
            medium=first.medium,
        )
    return ArticleSummary(
        id=article.id,
        slug=slug_from_url(article.url),
        title=article.title,
        excerpt=article.excerpt,
        featured_image=featured,
        published_at=article.published_at,
    )
