"""Slug and output-path helpers.

Every output document lives at ``<folder>/index.html`` so links can use
pretty URLs ending in a slash. The home page is the only document at the
root of the output tree.
"""

from __future__ import annotations

import re
import unicodedata

_NON_SLUG = re.compile(r"[^a-z0-9]+")

INDEX_FILE = "index.html"


def slugify(value: str) -> str:
    """Convert a string to a URL-safe slug.

    Accented characters are folded to ASCII, everything else that is not
    alphanumeric collapses into single hyphens.

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Café & Crème")
        'cafe-creme'
    """
    normalized = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    slug = _NON_SLUG.sub("-", normalized.lower()).strip("-")
    return slug or "untitled"


def document_path(*parts: str) -> str:
    """Relative output path of the document for the given URL segments."""
    segments = [part.strip("/") for part in parts if part and part.strip("/")]
    if not segments:
        return INDEX_FILE
    return "/".join(segments + [INDEX_FILE])


def href_for(path: str) -> str:
    """Site-absolute link for a relative document path."""
    if path == INDEX_FILE:
        return "/"
    if path.endswith("/" + INDEX_FILE):
        return "/" + path[: -len(INDEX_FILE)]
    return "/" + path


def absolute_url(base_url: str, path: str) -> str:
    return base_url.rstrip("/") + href_for(path)
