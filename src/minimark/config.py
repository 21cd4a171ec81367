from __future__ import annotations

from dataclasses import fields
from typing import Mapping, Optional, Tuple

from .models import RenderOptions


OPTION_KEYS = {item.name for item in fields(RenderOptions)}


def _parse_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def split_option(token: str) -> Tuple[str, str]:
    if "=" not in token:
        raise ValueError("Expected KEY=VALUE format.")
    key, value = token.split("=", 1)
    key = key.strip()
    if not key:
        raise ValueError("Option key cannot be empty.")
    return key, value


def options_from_mapping(values: Mapping[str, str]) -> RenderOptions:
    """Build :class:`RenderOptions` from string values, rejecting unknown keys."""
    unknown = sorted(set(values) - OPTION_KEYS)
    if unknown:
        raise ValueError(f"Unknown option(s): {', '.join(unknown)}.")
    return RenderOptions(
        callbacks=_parse_optional(values.get("callbacks")) or "default",
        root=_parse_optional(values.get("root")),
    )

