"""Template substitution for the composed changelog."""

from __future__ import annotations

from typing import Optional, Sequence

PLACEHOLDER = "$changes"


def render(template: Optional[str], lines: Sequence[str]) -> str:
    """Join ``lines`` and substitute them for the first ``$changes`` in ``template``.

    Without a template the joined lines are returned unchanged.
    """
    body = "\n".join(lines)
    if template is None:
        return body
    return template.replace(PLACEHOLDER, body, 1)
