"""Base license template definition."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LicenseTemplate:
    """A bundled license template.

    Templates are plain text files whose body may contain the `{author}`
    and `{date}` placeholders.
    """

    name: str  # stored key, e.g. "MIT.txt"
    base_name: str  # e.g. "MIT"
    suffix: str  # ".txt" | ".md" | ""
    body: str
