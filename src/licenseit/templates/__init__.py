"""License template store, resolution and rendering."""

from licenseit.templates.base import LicenseTemplate
from licenseit.templates.renderer import render
from licenseit.templates.resolver import (
    TEMPLATE_SUFFIXES,
    load_template,
    resolve_template_name,
)
from licenseit.templates.store import TemplateStore, get_package_templates_path

__all__ = [
    "LicenseTemplate",
    "TEMPLATE_SUFFIXES",
    "TemplateStore",
    "get_package_templates_path",
    "load_template",
    "render",
    "resolve_template_name",
]
