"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import datetime as dt


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_tags(value: str | list[object] | None) -> list[str]:
    """Normalize a tag list or comma-separated string into non-empty strings."""
    if isinstance(value, str):
        return [segment.strip() for segment in value.split(",") if segment.strip()]
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip()
            if text:
                normalized.append(text)
        return normalized
    return []


def _parse_timestamp(value: dt.datetime | dt.date | str | None) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime(value.year, value.month, value.day)
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = ["_normalize_tags", "_optional_str", "_parse_timestamp"]
