"""Database query for rows that are ready to be published."""

from __future__ import annotations

from typing import Any, Dict, List

PUBLISH_FLAG_PROPERTY = "draft"
SORT_PROPERTY = "Date"


def build_query(database_id: str) -> Dict[str, Any]:
    """Return the keyword arguments passed to ``databases.query``."""

    # The checkbox is named "draft" but a ticked box marks a publishable row.
    return {
        "database_id": database_id,
        "filter": {
            "property": PUBLISH_FLAG_PROPERTY,
            "checkbox": {"equals": True},
        },
        "sorts": [
            {"property": SORT_PROPERTY, "direction": "descending"},
        ],
    }


def query_published_pages(client: Any, database_id: str) -> List[Dict[str, Any]]:
    """Run one filtered, newest-first query and return its result rows.

    Only the first response page is used; ``next_cursor`` is not followed.
    """

    response = client.databases.query(**build_query(database_id))
    return list(response.get("results", []))
