"""Turns raw registry tool output into the text returned to callers."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, List, Optional

UNKNOWN = "Unknown"
NO_DESCRIPTION = "No description available"


def parse_structured(raw: str) -> Any:
    """Parse JSON output. Raises ``ValueError`` when ``raw`` is not JSON."""
    return json.loads(raw)


def parse_or_text(raw: str) -> Any:
    """Parse JSON output, falling back to the trimmed raw text."""
    try:
        return parse_structured(raw)
    except ValueError:
        return raw.strip()


def render_value(value: Any) -> str:
    """Strings pass through; every other JSON value is pretty-printed."""
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False)


def format_package_info(package_name: str, value: Any, field: Optional[str] = None) -> str:
    suffix = f" ({field})" if field else ""
    return f'NPM Package Information for "{package_name}"{suffix}:\n\n{render_value(value)}'


def format_modified_date(value: Any) -> str:
    """
    Render an ISO-8601 timestamp as a short en-US calendar date (``1/15/2024``).

    Missing values render as ``Unknown``; unparseable ones are shown as given.
    """
    if not value:
        return UNKNOWN
    text = str(value)
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return text
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def _author_name(author: Any) -> str:
    if isinstance(author, dict):
        return author.get("name") or UNKNOWN
    if isinstance(author, str) and author:
        return author
    return UNKNOWN


def format_search_entry(index: int, entry: Dict[str, Any]) -> str:
    return (
        f"{index}. **{entry.get('name') or UNKNOWN}** ({entry.get('version') or UNKNOWN})\n"
        f"   {entry.get('description') or NO_DESCRIPTION}\n"
        f"   Author: {_author_name(entry.get('author'))}\n"
        f"   Modified: {format_modified_date(entry.get('date'))}"
    )


def format_search_results(query: str, results: List[Dict[str, Any]]) -> str:
    blocks = "\n\n".join(
        format_search_entry(index, entry) for index, entry in enumerate(results, start=1)
    )
    return f'NPM Search Results for "{query}" ({len(results)} packages):\n\n{blocks}'


def format_no_results(query: str) -> str:
    return f'No packages found for query: "{query}"'
