"""Field naming helpers."""

from __future__ import annotations

import re
from typing import Any, Mapping

_UPPER = re.compile(r"[A-Z]")


def to_dash_case(name: str) -> str:
    """Convert a camel-like name to dash-case (``createdAt`` -> ``created-at``).

    Underscores are left alone, so snake_case names keep their convention.
    """
    if not name:
        return name
    head = name[0].lower() + name[1:]
    return _UPPER.sub(lambda match: "-" + match.group(0).lower(), head)


def dasherize_keys(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``mapping`` with dash-cased keys."""
    return {to_dash_case(key): value for key, value in mapping.items()}
