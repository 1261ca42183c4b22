"""Execution wrapper for the Notion to Hugo sync pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, List, Optional

from artifacts.formats.markdown import BodyConverter
from artifacts.frontmatter import assemble_document
from artifacts.writer import ensure_output_dir, write_post
from pipelines.notion_sync.options import SyncOptions
from pipelines.notion_sync.properties import extract_fields
from pipelines.notion_sync.query import query_published_pages


def _empty_path_list() -> List[Path]:
    return []


@dataclass(slots=True)
class SyncSummary:
    """Posts written by a run, in the order they were written."""

    written: List[Path] = field(default_factory=_empty_path_list)
    unchanged: List[Path] = field(default_factory=_empty_path_list)


def run(
    options: SyncOptions,
    *,
    client: Any,
    convert_body: BodyConverter,
    today: Optional[date] = None,
) -> SyncSummary:
    """Query published rows and write one Markdown post per row.

    Rows are handled one at a time in query order (newest first), so when
    two rows share a slug the one returned later overwrites the earlier.
    Any API or filesystem error propagates and stops the run; posts written
    before the failure stay on disk.
    """

    print(
        "Starting Notion content sync for database ID:"
        f" {options.database_id}"
    )
    pages = query_published_pages(client, options.database_id)

    output_dir = Path(options.output_dir)
    if ensure_output_dir(output_dir):
        print(f"Created content directory: {output_dir}")

    summary = SyncSummary()
    for page in pages:
        fields = extract_fields(page, today=today)
        body = convert_body(page["id"])
        document = assemble_document(fields, body)
        result = write_post(
            output_dir,
            fields.slug,
            document,
            extension=options.file_extension,
        )
        summary.written.append(result.path)
        if result.changed:
            print(f"✅ Generated: {result.path}")
        else:
            summary.unchanged.append(result.path)
            print(f"⏭️ Unchanged: {result.path}")

    print(
        "Notion content sync complete. All published posts have been"
        f" processed ({len(summary.written)} total)."
    )
    return summary


__all__ = ["SyncSummary", "run"]
