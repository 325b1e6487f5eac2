"""Structured resume data loader.

The resume is a JSON array of job records:

    [{"title": "...", "company": "...", "location": "...",
      "date": "...", "application": "..."}]

A missing file or one that does not decode to that shape aborts the run.
Silently rendering an empty resume is never an option.
"""

from __future__ import annotations

import json
from pathlib import Path

from ..core.types import ResumeEntry
from ..errors import ResourceDecodeError, ResourceNotFoundError
from ..logging_utils import get_logger

logger = get_logger("input.resume")

RESUME_FIELDS = ("title", "company", "location", "date", "application")


def load_resume(path: Path) -> list[ResumeEntry]:
    """Decode resume entries in file order.

    Raises:
        ResourceNotFoundError: The file does not exist
        ResourceDecodeError: The file is not a JSON array of job records
    """
    if not path.is_file():
        raise ResourceNotFoundError("Resume data not found", path)

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ResourceDecodeError(f"Cannot decode resume data: {exc}", path) from exc

    if not isinstance(raw, list):
        raise ResourceDecodeError("Resume data must be a JSON array", path)

    entries = []
    for idx, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ResourceDecodeError(f"Resume record {idx} is not an object", path)
        missing = [key for key in RESUME_FIELDS if key not in item]
        if missing:
            raise ResourceDecodeError(
                f"Resume record {idx} is missing {', '.join(missing)}", path
            )
        wrong = [key for key in RESUME_FIELDS if not isinstance(item[key], str)]
        if wrong:
            raise ResourceDecodeError(
                f"Resume record {idx} has non-string {', '.join(wrong)}", path
            )
        entries.append(ResumeEntry(**{key: item[key] for key in RESUME_FIELDS}))

    logger.debug("Loaded %d resume entries from %s", len(entries), path)
    return entries
