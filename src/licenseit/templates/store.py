"""Read-only store of bundled license templates."""

from __future__ import annotations

from pathlib import Path

from licenseit.errors import TemplateNotFoundError


def get_package_templates_path() -> Path:
    """Get path to package-bundled license templates."""
    return Path(__file__).parent / "default"


class TemplateStore:
    """Template bodies keyed by file name.

    The store never writes to its root. Names are opaque keys: anything that
    is not a plain file directly inside the root is reported as missing.
    """

    def __init__(self, root: Path | None = None) -> None:
        """Initialize with a templates directory (defaults to the bundled one)."""
        self._root = root if root is not None else get_package_templates_path()

    @property
    def root(self) -> Path:
        return self._root

    def list_names(self) -> list[str]:
        """List all template names, sorted."""
        if not self._root.is_dir():
            return []
        return sorted(
            item.name
            for item in self._root.iterdir()
            if item.is_file() and not item.name.startswith(".")
        )

    def has(self, name: str) -> bool:
        """Check if a template with this exact name exists."""
        return name in self.list_names()

    def read_body(self, name: str) -> str:
        """Read a template body.

        Raises:
            TemplateNotFoundError: If no template has this exact name.
        """
        if not self.has(name):
            raise TemplateNotFoundError(name)
        return (self._root / name).read_text(encoding="utf-8")
