"""Artifact generation helpers for synced Hugo posts."""

from .frontmatter import assemble_document, render_front_matter
from .models import PostFields, WrittenPost
from .writer import ensure_output_dir, post_path, write_post

__all__ = [
    "PostFields",
    "WrittenPost",
    "assemble_document",
    "ensure_output_dir",
    "post_path",
    "render_front_matter",
    "write_post",
]
