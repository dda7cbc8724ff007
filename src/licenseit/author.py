"""Author resolution: explicit value, then config file, then prompt."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from licenseit.config.loader import load_config
from licenseit.errors import MissingAuthorError

logger = logging.getLogger(__name__)


class AuthorSource(Enum):
    """Where the resolved author came from."""

    EXPLICIT = "explicit"
    CONFIG = "config"
    INTERACTIVE = "interactive"


@dataclass(frozen=True)
class ResolvedAuthor:
    """An author name and the single source that produced it."""

    name: str
    source: AuthorSource


def resolve_author(
    explicit: str | None,
    config_path: Path | None,
    prompt: Callable[[], str],
    warn: Callable[[str], None] | None = None,
) -> ResolvedAuthor:
    """Resolve the license author.

    Precedence (highest to lowest), first non-empty value wins:
    1. `explicit` (e.g. --author). The config file is not read.
    2. Config file: `config_path` if given, else the default location.
       Errors reading an explicit path are passed to `warn`; errors at the
       default location are ignored.
    3. `prompt()`, trimmed.

    Raises:
        MissingAuthorError: If every source is empty.
    """
    if explicit and explicit.strip():
        logger.debug("Using explicit author")
        return ResolvedAuthor(explicit.strip(), AuthorSource.EXPLICIT)

    config, error = load_config(config_path)
    if error is not None:
        logger.warning("%s", error)
        if warn is not None:
            warn(str(error))
    if config.author:
        logger.debug("Using author from config")
        return ResolvedAuthor(config.author, AuthorSource.CONFIG)

    answer = (prompt() or "").strip()
    if answer:
        logger.debug("Using author from prompt")
        return ResolvedAuthor(answer, AuthorSource.INTERACTIVE)

    raise MissingAuthorError()
