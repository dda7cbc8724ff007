"""License generation: resolve author and template, render, write."""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from licenseit.author import ResolvedAuthor, resolve_author
from licenseit.templates import LicenseTemplate, TemplateStore, load_template, render
from licenseit.writer import ConfirmOverwrite, write_license

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LicenseRequest:
    """Inputs for a single license generation."""

    template: str  # base name, e.g. "MIT"
    author: str | None = None
    config_path: Path | None = None
    file_name: str | None = None
    directory: Path = Path(".")
    date: str | None = None  # defaults to the current year


@dataclass(frozen=True)
class LicenseResult:
    """Outcome of a successful generation."""

    path: Path
    author: ResolvedAuthor
    template: LicenseTemplate


def default_file_name(template: LicenseTemplate) -> str:
    """Output file name: base name plus the suffix of the resolved template."""
    return template.base_name + template.suffix


def generate_license(
    request: LicenseRequest,
    *,
    prompt_author: Callable[[], str],
    confirm_overwrite: ConfirmOverwrite,
    warn: Callable[[str], None] | None = None,
    store: TemplateStore | None = None,
    today: dt.date | None = None,
) -> LicenseResult:
    """Generate a license file.

    Steps stop at the first error, which propagates as a LicenseitError:
    1. Resolve the author (MissingAuthorError)
    2. Resolve and load the template (TemplateNotFoundError)
    3. Render with the date (default: current year)
    4. Write to the output directory (DirectoryError, AbortedByUserError,
       WriteError)
    """
    author = resolve_author(
        request.author, request.config_path, prompt_author, warn=warn
    )

    template = load_template(request.template, store or TemplateStore())
    logger.debug("Loaded template %s", template.name)

    date = request.date
    if date is None:
        date = str((today or dt.date.today()).year)
    content = render(template.body, author.name, date)

    file_name = request.file_name or default_file_name(template)
    path = write_license(content, file_name, request.directory, confirm_overwrite)

    return LicenseResult(path=path, author=author, template=template)
