"""
portfolio-press - static portfolio and blog site generator.

This package turns a content folder (markdown articles with YAML front
matter, a JSON resume and static assets) into a navigable static HTML
site with a shared layout, a blog index, one page per article and one
page per tag.

Main entry point is the CLI via `portfolio-press build` command.

Example:
    $ portfolio-press build -i content/ -o public/
"""

__all__ = [
    "__version__",
    "AppConfig",
    "load_config",
    "run_publish",
    "PublishError",
    "slugify",
]
__version__ = "0.1.0"

from .config import AppConfig, load_config
from .core.slugs import slugify
from .errors import PublishError
from .runner import run_publish
