"""Sync published Notion database rows into Hugo Markdown posts."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, Sequence

try:
    from notion_client import Client  # type: ignore[import-not-found]
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'notion-client'. Install with pip install"
        " notion-client"
    ) from exc

from artifacts.formats.markdown import NotionMarkdownConverter
from config_loader import (
    DATABASE_VAR,
    TOKEN_VAR,
    ConfigError,
    MissingCredentialsError,
    load_env_file,
    resolve_sync_settings,
)
from pipelines.notion_sync import run


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Return CLI arguments for the Notion sync step."""

    parser = argparse.ArgumentParser(
        description=(
            "Export Notion database rows whose 'draft' checkbox is ticked"
            " into Hugo Markdown posts."
        ),
    )
    parser.add_argument(
        "--config",
        help="Optional JSON config file (defaults to notion_sync.json).",
    )
    parser.add_argument(
        "--output-dir",
        help="Override the posts directory (defaults to content/posts).",
    )
    parser.add_argument(
        "--env-file",
        help="Load variables from this file instead of ./.env.",
    )
    return parser.parse_args(argv)


def report_failure(exc: BaseException) -> None:
    """Print ``exc`` and any Notion API details it carries to stderr."""

    print(
        "An error occurred during Notion content sync:"
        f" {type(exc).__name__}: {exc}",
        file=sys.stderr,
    )
    for label, attribute in (
        ("Notion API Status", "status"),
        ("Notion API Code", "code"),
        ("Notion API Response Body", "body"),
    ):
        value: Any = getattr(exc, attribute, None)
        if value:
            print(f"{label}: {value}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``notion-sync`` CLI; returns the exit status."""

    args = parse_args(argv)
    try:
        load_env_file(args.env_file)
        options = resolve_sync_settings(
            config_path=args.config,
            output_dir=args.output_dir,
        )
    except ConfigError as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        if isinstance(exc, MissingCredentialsError):
            print(
                f"Define {TOKEN_VAR} and {DATABASE_VAR} in the environment, a"
                " .env file for local runs, or the CI secrets.",
                file=sys.stderr,
            )
        return 1

    try:
        client = Client(auth=options.notion_token)
        converter = NotionMarkdownConverter()
        run(options, client=client, convert_body=converter)
    except Exception as exc:  # noqa: BLE001
        report_failure(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
