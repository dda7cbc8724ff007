"""Resolve a template base name to a stored template."""

from __future__ import annotations

import logging

from licenseit.errors import TemplateNotFoundError
from licenseit.templates.base import LicenseTemplate
from licenseit.templates.store import TemplateStore

logger = logging.getLogger(__name__)

# Candidate suffixes in priority order (first match wins)
TEMPLATE_SUFFIXES: tuple[str, ...] = (".txt", ".md")


def _is_valid_base_name(base_name: str) -> bool:
    if not base_name or base_name in (".", ".."):
        return False
    return "/" not in base_name and "\\" not in base_name


def resolve_template_name(
    base_name: str,
    store: TemplateStore,
    suffixes: tuple[str, ...] = TEMPLATE_SUFFIXES,
) -> str:
    """Find the stored template name for a base name.

    Resolution order:
    1. `base_name` + each suffix, in the given order
    2. `base_name` itself as an exact name

    Raises:
        TemplateNotFoundError: If nothing matches, or the base name is not a
            plain key (empty or containing a path separator).
    """
    if not _is_valid_base_name(base_name):
        raise TemplateNotFoundError(base_name)

    names = set(store.list_names())
    for suffix in suffixes:
        candidate = base_name + suffix
        if candidate in names:
            logger.debug("Resolved template '%s' to '%s'", base_name, candidate)
            return candidate

    if base_name in names:
        logger.debug("Resolved template '%s' by exact name", base_name)
        return base_name

    raise TemplateNotFoundError(base_name)


def template_suffix(name: str, base_name: str) -> str:
    """Return the suffix a resolved name adds to its base name."""
    if name.startswith(base_name):
        return name[len(base_name) :]
    return ""


def load_template(
    base_name: str,
    store: TemplateStore,
    suffixes: tuple[str, ...] = TEMPLATE_SUFFIXES,
) -> LicenseTemplate:
    """Resolve a base name and load the matching template."""
    name = resolve_template_name(base_name, store, suffixes)
    return LicenseTemplate(
        name=name,
        base_name=base_name,
        suffix=template_suffix(name, base_name),
        body=store.read_body(name),
    )
