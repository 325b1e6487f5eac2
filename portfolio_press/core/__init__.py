"""
Core domain models and business logic.

This package contains data types and index logic that are independent
of any specific pipeline stage.
"""

from .index import build_tag_index, check_tag_index, ensure_unique_slugs, sort_by_date
from .metrics import reading_minutes, word_count
from .slugs import slugify
from .types import Article, Page, ResumeEntry, Site, Tag

__all__ = [
    "Article",
    "Page",
    "ResumeEntry",
    "Site",
    "Tag",
    "build_tag_index",
    "check_tag_index",
    "ensure_unique_slugs",
    "reading_minutes",
    "slugify",
    "sort_by_date",
    "word_count",
]
