"""Map Notion page properties onto Hugo front matter fields."""

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Any, Mapping, Optional

from artifacts.models import PostFields

DEFAULT_TITLE = "Untitled Post"

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_SLUG_CHARS = re.compile(r"[^\w-]+", re.ASCII)


def slugify(title: str) -> str:
    """Lower-case ``title``, hyphenate whitespace, drop non-word characters."""

    hyphenated = _WHITESPACE_RUN.sub("-", title.lower())
    return _NON_SLUG_CHARS.sub("", hyphenated)


def _property(properties: Mapping[str, Any], name: str, kind: str) -> Any:
    prop = properties.get(name) or {}
    return prop.get(kind)


def _first_plain_text(items: Any) -> str:
    if not items:
        return ""
    return items[0].get("plain_text") or ""


def extract_fields(
    page: Mapping[str, Any], today: Optional[date] = None
) -> PostFields:
    """Return title, slug, date and tags for ``page`` with fallbacks applied.

    Absent properties, ``None`` values and empty lists or strings all fall
    back to the defaults: ``"Untitled Post"``, a slug derived from the
    title, today's UTC date and no tags.
    """

    properties: Mapping[str, Any] = page.get("properties") or {}

    title = (
        _first_plain_text(_property(properties, "Name", "title"))
        or DEFAULT_TITLE
    )
    slug = _first_plain_text(
        _property(properties, "Slug", "rich_text")
    ) or slugify(title)

    date_value = _property(properties, "Date", "date") or {}
    post_date = date_value.get("start")
    if not post_date:
        current = today or datetime.now(timezone.utc).date()
        post_date = current.isoformat()

    tags = [
        tag.get("name", "")
        for tag in _property(properties, "Tags", "multi_select") or []
    ]

    return PostFields(title=title, slug=slug, date=post_date, tags=tags)
