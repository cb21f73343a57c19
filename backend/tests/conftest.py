"""Root conftest — shared test configuration, an in-memory ContentRepository and SQL fixtures.

Invariants:
    - Tests never reach a real PostgreSQL instance
    - Every SQL test gets a fresh in-memory SQLite database
    - InMemoryContentRepository honours the ContentRepository contract:
      misses return None, listings return one page plus the full count
"""

import os
from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

from learn_api.core.content_types import (  # noqa: E402
    Article, ArticleImage, ArticlePage, Category,
)
from learn_api.db.base import Base  # noqa: E402
from learn_api.models import ArticleRecord, CategoryRecord  # noqa: E402


class InMemoryContentRepository:
    """ContentRepository fake that records every call it receives."""

    def __init__(self, categories: list[Category], articles: list[Article]):
        self.categories = categories
        self.articles = articles
        self.calls: list[tuple] = []

    async def list_categories(self) -> list[Category]:
        self.calls.append(("list_categories",))
        return list(self.categories)

    async def get_category_by_id(self, category_id: int) -> Category | None:
        self.calls.append(("get_category_by_id", category_id))
        return next((c for c in self.categories if c.id == category_id), None)

    async def get_category_by_slug(self, slug: str) -> Category | None:
        self.calls.append(("get_category_by_slug", slug))
        return next((c for c in self.categories if c.slug == slug), None)

    async def get_articles_by_category(
        self, category_slug: str, page: int, limit: int,
    ) -> ArticlePage:
        self.calls.append(("get_articles_by_category", category_slug, page, limit))
        matching = [a for a in self.articles if category_slug in a.category_path]
        start = (page - 1) * limit
        return ArticlePage(items=matching[start:start + limit], total=len(matching))

    async def get_article_by_id(self, article_id: int) -> Article | None:
        self.calls.append(("get_article_by_id", article_id))
        return next((a for a in self.articles if a.id == article_id), None)

    async def get_article_by_slug(self, slug: str) -> Article | None:
        self.calls.append(("get_article_by_slug", slug))
        return next((a for a in self.articles if a.slug == slug), None)

    async def get_article_by_path(
        self, category_path: str, article_slug: str,
    ) -> Article | None:
        self.calls.append(("get_article_by_path", category_path, article_slug))
        return next(
            (
                a for a in self.articles
                if a.slug == article_slug and "/".join(a.category_path) == category_path
            ),
            None,
        )


def make_article(
    article_id: int, slug: str, category_path: tuple[str, ...], **fields,
) -> Article:
    url = "https://example.com/learn/" + "/".join((*category_path, slug))
    defaults = dict(
        title=slug.replace("-", " ").title(),
        excerpt=f"About {slug}",
        published_at=datetime(2024, 1, article_id % 28 + 1, tzinfo=timezone.utc),
    )
    defaults.update(fields)
    return Article(
        id=article_id, slug=slug, url=url, category_path=category_path, **defaults,
    )


@pytest.fixture
def sample_categories() -> list[Category]:
    return [
        Category(1, "Travel Tips", "travel-tips", article_count=3),
        Category(2, "Central America", "central-america", parent_id=1, article_count=2),
        Category(3, "Culture", "culture", article_count=1),
        Category(4, "Heritage", "heritage", parent_id=3, article_count=1),
    ]


@pytest.fixture
def sample_articles() -> list[Article]:
    return [
        make_article(
            10, "guatemala-guide", ("travel-tips", "central-america"),
            images=[ArticleImage(
                original="https://cdn.example.com/gt.jpg",
                thumbnail="https://cdn.example.com/gt-150.jpg",
                medium="https://cdn.example.com/gt-300.jpg",
            )],
        ),
        make_article(11, "packing-list", ("travel-tips",)),
        make_article(12, "antigua-heritage", ("culture", "heritage")),
    ]


@pytest.fixture
def repository(sample_categories, sample_articles) -> InMemoryContentRepository:
    return InMemoryContentRepository(sample_categories, sample_articles)


# ─── SQL fixtures ────────────────────────────────────────────────


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


def _published(day: int, month: int = 1) -> datetime:
    return datetime(2024, month, day, tzinfo=timezone.utc)


@pytest.fixture
async def seeded_db(test_db):
    """Category forest with an empty category, an orphan and a repeated slug.

    travel-tips (1)           packing-list (11)
        central-america (2)   guatemala-guide (10), belize-basics (14), draft (13)
    culture (3)               antigua-heritage (12, also in heritage)
        heritage (4)
        central-america (8)   guatemala-guide (15)
    empty (5, no articles)
    lost (7, parent 99 missing)
    """
    categories = {
        cid: CategoryRecord(
            id=cid, name=name, slug=slug, parent_id=parent, article_count=count,
        )
        for cid, name, slug, parent, count in [
            (1, "Travel Tips", "travel-tips", 0, 3),
            (2, "Central America", "central-america", 1, 2),
            (3, "Culture", "culture", 0, 1),
            (4, "Heritage", "heritage", 3, 1),
            (5, "Empty", "empty", 0, 0),
            (7, "Lost", "lost", 99, 1),
            (8, "Central America", "central-america", 3, 1),
        ]
    }
    test_db.add_all(categories.values())
    test_db.add_all([
        ArticleRecord(
            id=10, slug="guatemala-guide", title="Guatemala Guide",
            excerpt="Everything about Guatemala", content="<p>Guatemala</p>",
            published_at=_published(10), author_id=5, author_name="Ana",
            keywords=["guatemala", "travel"],
            is_sponsored=True, sponsor_name="Acme Tours",
            sponsor_image_url="https://cdn.example.com/acme.png",
            images=[{
                "original": "https://cdn.example.com/gt.jpg",
                "thumbnail": "https://cdn.example.com/gt-150.jpg",
                "medium": "https://cdn.example.com/gt-300.jpg",
            }],
            meta={
                "rank_math_title": "Guatemala Travel Guide",
                "rank_math_seo_score": "81",
                "latitude": "14.6349",
                "longitude": "-90.5069",
            },
            categories=[categories[2]],
        ),
        ArticleRecord(
            id=11, slug="packing-list", title="Packing List",
            published_at=_published(11), categories=[categories[1]],
        ),
        ArticleRecord(
            id=12, slug="antigua-heritage", title="Antigua Heritage",
            published_at=_published(12), categories=[categories[3], categories[4]],
        ),
        ArticleRecord(
            id=13, slug="draft-post", title="Draft", status="draft",
            published_at=_published(13), categories=[categories[2]],
        ),
        ArticleRecord(
            id=14, slug="belize-basics", title="Belize Basics",
            published_at=_published(1, month=2), categories=[categories[2]],
        ),
        ArticleRecord(
            id=15, slug="guatemala-guide", title="Guatemalan Culture",
            published_at=_published(15), categories=[categories[8]],
        ),
    ])
    await test_db.commit()
    return test_db
