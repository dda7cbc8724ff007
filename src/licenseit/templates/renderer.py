"""Placeholder substitution for license templates."""

import re

AUTHOR_PLACEHOLDER = "{author}"
DATE_PLACEHOLDER = "{date}"

_PLACEHOLDER_RE = re.compile(
    "|".join(re.escape(token) for token in (AUTHOR_PLACEHOLDER, DATE_PLACEHOLDER))
)


def render(body: str, author: str, date: str) -> str:
    """Replace `{author}` and `{date}` in a template body.

    Both tokens are substituted in a single pass, so a value containing the
    other token is copied through verbatim. Everything else is unchanged.
    """
    values = {AUTHOR_PLACEHOLDER: author, DATE_PLACEHOLDER: date}
    return _PLACEHOLDER_RE.sub(lambda match: values[match.group(0)], body)
