"""Convert Notion page bodies into Markdown through notion2md."""

from __future__ import annotations

from typing import Any, Callable, Optional

try:
    from notion2md.exporter.block import (  # type: ignore[import-not-found]
        StringExporter,
    )
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'notion2md'. Install with pip install notion2md"
    ) from exc

BodyConverter = Callable[[str], str]


def normalize_markdown(markdown_text: str) -> str:
    """Trim outer blank lines and end non-empty Markdown with one newline."""

    markdown_text = markdown_text.strip("\n")
    if not markdown_text.strip():
        return ""
    return markdown_text + "\n"


class NotionMarkdownConverter:
    """Default body converter; block parsing is left to notion2md.

    notion2md authenticates with its own client, which reads the
    ``NOTION_TOKEN`` environment variable.
    """

    def __init__(self, exporter_class: Optional[Callable[..., Any]] = None) -> None:
        self.exporter_class = exporter_class or StringExporter

    def page_to_markdown(self, page_id: str) -> str:
        exporter = self.exporter_class(block_id=page_id)
        return normalize_markdown(exporter.export())

    def __call__(self, page_id: str) -> str:
        return self.page_to_markdown(page_id)


__all__ = ["BodyConverter", "NotionMarkdownConverter", "normalize_markdown"]
