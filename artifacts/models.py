"""Shared dataclasses for generated post artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


def _empty_tags() -> List[str]:
    return []


@dataclass(slots=True)
class PostFields:
    """Front matter values extracted from one database row."""

    title: str
    slug: str
    date: str
    tags: List[str] = field(default_factory=_empty_tags)


@dataclass(slots=True)
class WrittenPost:
    """Location of a generated post and whether its bytes changed."""

    path: Path
    changed: bool
