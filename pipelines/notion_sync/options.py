from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_EXTENSION = ".md"


@dataclass(slots=True)
class SyncOptions:
    """Inputs controlling a single Notion to Hugo sync run."""

    notion_token: str
    database_id: str
    output_dir: Path
    file_extension: str = DEFAULT_EXTENSION
