"""Deterministic path helpers for the Hugo content tree."""

from __future__ import annotations

import os
from pathlib import Path

CONTENT_DIR_NAME = "content"
POSTS_DIR_NAME = "posts"


def base_dir() -> Path:
    """Return the site base directory with optional override for tests."""
    override = os.getenv("NOTION_SYNC_BASE")
    if override:
        return Path(override).resolve()
    return Path.cwd()


def content_root() -> Path:
    return base_dir() / CONTENT_DIR_NAME


def posts_output_root() -> Path:
    return content_root() / POSTS_DIR_NAME
