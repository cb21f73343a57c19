"""Article Builder — turns stored post meta into article display fields.

Invariants:
    - Pure functions over plain mappings (no ORM rows, no IO)
    - SEO fields fall back along a fixed chain: post → SEO → Open Graph → Twitter
    - An unparsable SEO score is 0, never an error
    - A location needs both latitude and longitude, otherwise None
    - Missing sponsor values become empty strings

Design Decisions:
    - Meta keys are the RankMath/WordPress names the content store already uses
"""

from collections.abc import Mapping

from learn_api.core.content_types import (
    ArticleImage, ArticleSeo, ArticleSponsor, LocationGeopoint,
)
from learn_api.core.pagination import parse_int_or_none


class MetaKeys:
    """Post meta keys read by the builders."""
    LATITUDE = "latitude"
    LONGITUDE = "longitude"
    SEO_TITLE = "rank_math_title"
    SEO_DESCRIPTION = "rank_math_description"
    SEO_CANONICAL_URL = "rank_math_canonical_url"
    SEO_FOCUS_KEYWORD = "rank_math_focus_keyword"
    SEO_SCORE = "rank_math_seo_score"
    OG_TITLE = "rank_math_facebook_title"
    OG_DESCRIPTION = "rank_math_facebook_description"
    OG_IMAGE = "rank_math_facebook_image"
    TWITTER_TITLE = "rank_math_twitter_title"
    TWITTER_DESCRIPTION = "rank_math_twitter_description"
    TWITTER_IMAGE = "rank_math_twitter_image"


def build_seo(meta: Mapping[str, str], title: str, excerpt: str) -> ArticleSeo:
    """SEO block with the fallback chain applied."""
    seo_title = meta.get(MetaKeys.SEO_TITLE, title)
    seo_description = meta.get(MetaKeys.SEO_DESCRIPTION, excerpt)
    og_title = meta.get(MetaKeys.OG_TITLE, seo_title)
    og_description = meta.get(MetaKeys.OG_DESCRIPTION, seo_description)
    og_image = meta.get(MetaKeys.OG_IMAGE, "")
    score = parse_int_or_none(meta.get(MetaKeys.SEO_SCORE))

    return ArticleSeo(
        title=seo_title,
        description=seo_description,
        canonical=meta.get(MetaKeys.SEO_CANONICAL_URL, ""),
        focus_keyword=meta.get(MetaKeys.SEO_FOCUS_KEYWORD, ""),
        seo_score=score if score is not None else 0,
        og_title=og_title,
        og_description=og_description,
        og_image=og_image,
        twitter_title=meta.get(MetaKeys.TWITTER_TITLE, og_title),
        twitter_description=meta.get(MetaKeys.TWITTER_DESCRIPTION, og_description),
        twitter_image=meta.get(MetaKeys.TWITTER_IMAGE, og_image),
    )


def build_location(meta: Mapping[str, str]) -> LocationGeopoint | None:
    latitude = meta.get(MetaKeys.LATITUDE)
    longitude = meta.get(MetaKeys.LONGITUDE)
    if not latitude or not longitude:
        return None
    return LocationGeopoint(latitude=latitude, longitude=longitude)


def build_sponsor(fields: Mapping[str, str | None]) -> ArticleSponsor:
    return ArticleSponsor(
        name=fields.get("name") or "",
        image_url=fields.get("image_url") or "",
        image_sidebar_url=fields.get("image_sidebar_url") or "",
        image_content_url=fields.get("image_content_url") or "",
        extra_data=fields.get("extra_data") or "",
    )


def build_images(raw_images: list[dict] | None, fallback_title: str = "") -> list[ArticleImage]:
    """Images from stored JSON; a missing size falls back to the original URL."""
    images = []
    for raw in raw_images or []:
        original = raw.get("original")
        if not original:
            continue
        images.append(ArticleImage(
            original=original,
            thumbnail=raw.get("thumbnail") or original,
            medium=raw.get("medium") or original,
            title=raw.get("title") or fallback_title,
            caption=raw.get("caption") or "",
        ))
    return images


def build_article_url(base_url: str, category_path: str, slug: str) -> str:
    base = base_url.rstrip("/")
    if category_path:
        return f"{base}/{category_path}/{slug}"
    return f"{base}/{slug}"
