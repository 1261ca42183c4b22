"""Checksum utilities to keep post writes idempotent."""

from __future__ import annotations

import hashlib
from pathlib import Path


def sha256_bytes(data: bytes) -> str:
    digest = hashlib.sha256()
    digest.update(data)
    return digest.hexdigest()


def sha256_file(path: Path) -> str | None:
    if not path.is_file():
        return None
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()


def write_text_if_changed(path: Path, text: str) -> bool:
    """Replace ``path`` with UTF-8 ``text`` unless it already holds it."""
    data = text.encode("utf-8")
    if sha256_file(path) == sha256_bytes(data):
        return False
    with path.open("wb") as handle:
        handle.write(data)
    return True
