"""Configuration schema for licenseit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LicenseitConfig:
    """licenseit configuration schema.

    The only recognized key is `author`. None means "not set".
    """

    author: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        result: dict[str, Any] = {}
        if self.author is not None:
            result["author"] = self.author
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LicenseitConfig:
        """Create from a dictionary. Unknown keys are ignored."""
        author_raw = data.get("author")
        if author_raw is None:
            return cls()
        author = str(author_raw).strip()
        return cls(author=author or None)


EMPTY_CONFIG = LicenseitConfig()
