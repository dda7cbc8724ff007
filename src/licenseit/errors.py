"""Exceptions raised while generating a license."""

from __future__ import annotations

from pathlib import Path


class LicenseitError(Exception):
    """Base exception for licenseit."""


class TemplateNotFoundError(LicenseitError):
    """Raised when no bundled template matches a base name."""

    def __init__(self, base_name: str) -> None:
        self.base_name = base_name
        super().__init__(
            f"could not find a template for '{base_name}' with supported extensions"
        )


class MissingAuthorError(LicenseitError):
    """Raised when no source produced a non-empty author."""

    def __init__(self) -> None:
        super().__init__("Author is required.")


class ConfigReadError(LicenseitError):
    """Raised when a config file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"could not read config file '{path}': {reason}")


class DirectoryError(LicenseitError):
    """Raised when the output directory cannot be created."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"could not create directory '{path}': {cause}")


class AbortedByUserError(LicenseitError):
    """Raised when the user declines to overwrite an existing file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"operation aborted by user; '{path}' exists")


class WriteError(LicenseitError):
    """Raised when the license file cannot be written."""

    def __init__(self, path: Path, cause: OSError | UnicodeError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"could not write license to file '{path}': {cause}")
