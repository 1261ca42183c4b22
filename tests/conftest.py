"""Shared fakes for the Notion API surface used by the sync pipeline."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest


def rich(text: str, href: Optional[str] = None, **annotations: bool) -> Dict[str, Any]:
    return {
        "type": "text",
        "plain_text": text,
        "href": href,
        "annotations": annotations,
    }


def make_page(
    page_id: str,
    *,
    title: Optional[str] = None,
    slug: Optional[str] = None,
    date: Optional[str] = None,
    tags: Optional[List[str]] = None,
    flagged: bool = True,
) -> Dict[str, Any]:
    properties: Dict[str, Any] = {"draft": {"type": "checkbox", "checkbox": flagged}}
    if title is not None:
        properties["Name"] = {"type": "title", "title": [rich(title)]}
    if slug is not None:
        properties["Slug"] = {"type": "rich_text", "rich_text": [rich(slug)]}
    if date is not None:
        properties["Date"] = {"type": "date", "date": {"start": date}}
    if tags is not None:
        properties["Tags"] = {
            "type": "multi_select",
            "multi_select": [{"name": name} for name in tags],
        }
    return {"object": "page", "id": page_id, "properties": properties}


class FakeDatabases:
    def __init__(self, pages: List[Dict[str, Any]]) -> None:
        self.pages = pages
        self.calls: List[Dict[str, Any]] = []

    def query(self, **kwargs: Any) -> Dict[str, Any]:
        self.calls.append(kwargs)
        flag = kwargs["filter"]["property"]
        wanted = kwargs["filter"]["checkbox"]["equals"]
        rows = [
            page
            for page in self.pages
            if page["properties"].get(flag, {}).get("checkbox") == wanted
        ]
        for sort in reversed(kwargs.get("sorts", [])):
            rows.sort(
                key=lambda page: (
                    (page["properties"].get(sort["property"]) or {}).get("date")
                    or {}
                ).get("start")
                or "",
                reverse=sort["direction"] == "descending",
            )
        return {"object": "list", "results": rows, "has_more": False, "next_cursor": None}


class FakeNotionClient:
    def __init__(self, pages: Optional[List[Dict[str, Any]]] = None) -> None:
        self.databases = FakeDatabases(pages or [])


def exporter_for(bodies: Dict[str, str]) -> Any:
    """Return a notion2md-style exporter class serving canned Markdown."""

    class CannedExporter:
        created: List[str] = []

        def __init__(self, block_id: str, **_: Any) -> None:
            self.block_id = block_id
            CannedExporter.created.append(block_id)

        def export(self) -> str:
            return bodies[self.block_id]

    return CannedExporter


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Run in an empty working directory without real Notion credentials."""

    monkeypatch.chdir(tmp_path)
    for name in ("NOTION_TOKEN", "NOTION_DATABASE_ID", "NOTION_SYNC_CONFIG", "NOTION_SYNC_BASE"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
