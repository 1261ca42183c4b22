"""Filesystem helpers for the generated post tree."""

from __future__ import annotations

from pathlib import Path

from pipelines.common.checksum import write_text_if_changed

from .models import WrittenPost


def ensure_output_dir(path: Path) -> bool:
    """Create ``path`` and its parents; return True when it was missing."""

    path = Path(path)
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    return True


def post_path(directory: Path, slug: str, extension: str = ".md") -> Path:
    return Path(directory) / f"{slug}{extension}"


def write_post(
    directory: Path,
    slug: str,
    document: str,
    *,
    extension: str = ".md",
) -> WrittenPost:
    """Replace ``<directory>/<slug><extension>`` with ``document``."""

    target = post_path(directory, slug, extension)
    changed = write_text_if_changed(target, document)
    return WrittenPost(path=target, changed=changed)
