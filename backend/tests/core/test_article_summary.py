"""Article Summary — list-view projection of full articles."""

from datetime import datetime, timezone

import pytest

from learn_api.core.article_summary import slug_from_url, summarize_article
from learn_api.core.content_types import Article, ArticleImage, FeaturedImage


def make_article(article_id, slug, category_path, **fields):
    url = "https://example.com/learn/" + "/".join((*category_path, slug))
    return Article(
        id=article_id, slug=slug, url=url, title=slug.title(), excerpt=f"About {slug}",
        published_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
        category_path=category_path, **fields,
    )


@pytest.mark.parametrize("url,expected", [
    ("https://example.com/learn/travel-tips/guatemala-guide", "guatemala-guide"),
    ("https://example.com/learn/travel-tips/guatemala-guide/", "guatemala-guide"),
    ("https://example.com/learn/packing-list", "packing-list"),
])
def test_slug_from_url(url, expected):
    assert slug_from_url(url) == expected


def test_summary_copies_list_fields():
    article = make_article(10, "guatemala-guide", ("travel-tips",), content="<p>long</p>")
    summary = summarize_article(article)
    assert summary.id == 10
    assert summary.slug == "guatemala-guide"
    assert summary.title == article.title
    assert summary.excerpt == article.excerpt
    assert summary.published_at == article.published_at


def test_featured_image_from_first_image():
    article = make_article(
        10, "guatemala-guide", ("travel-tips",),
        images=[
            ArticleImage("https://cdn/a.jpg", "https://cdn/a-150.jpg", "https://cdn/a-300.jpg"),
            ArticleImage("https://cdn/b.jpg", "https://cdn/b-150.jpg", "https://cdn/b-300.jpg"),
        ],
    )
    assert summarize_article(article).featured_image == FeaturedImage(
        "https://cdn/a.jpg", "https://cdn/a-150.jpg", "https://cdn/a-300.jpg",
    )


def test_no_images_means_no_featured_image():
    article = make_article(11, "packing-list", ("travel-tips",))
    assert summarize_article(article).featured_image is None


def test_slug_taken_from_url_not_stored_slug():
    article = make_article(12, "stored-slug", ("culture",))
    article.url = "https://example.com/learn/culture/public-slug/"
    assert summarize_article(article).slug == "public-slug"
