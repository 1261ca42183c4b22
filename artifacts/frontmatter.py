"""Assemble Hugo posts from front matter fields and a Markdown body."""

from __future__ import annotations

from .models import PostFields

FRONT_MATTER_DELIMITER = "---"


def escape_title(title: str) -> str:
    """Backslash-escape double quotes so the title stays a quoted scalar."""

    return title.replace('"', '\\"')


def render_tags(tags: list[str]) -> str:
    return "[" + ", ".join(f'"{tag}"' for tag in tags) + "]"


def render_front_matter(fields: PostFields) -> str:
    """Return the YAML header block, including the trailing blank line.

    Only the title is escaped. Slug, date and tags are written as-is and
    ``draft`` is always ``false`` for synced posts.
    """

    lines = [
        FRONT_MATTER_DELIMITER,
        f'title: "{escape_title(fields.title)}"',
        f'date: "{fields.date}"',
        f'slug: "{fields.slug}"',
        f"tags: {render_tags(fields.tags)}",
        "draft: false",
        FRONT_MATTER_DELIMITER,
    ]
    return "\n".join(lines) + "\n\n"


def assemble_document(fields: PostFields, body: str) -> str:
    return render_front_matter(fields) + body
