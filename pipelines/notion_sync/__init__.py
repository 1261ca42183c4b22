"""Notion database to Hugo content sync pipeline."""

from .options import SyncOptions
from .runner import SyncSummary, run

__all__ = ["SyncOptions", "SyncSummary", "run"]
