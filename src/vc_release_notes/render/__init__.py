"""
Markdown rendering of classified commits.

:func:`compose` turns classified commits into changelog lines and
:func:`render` substitutes them into the configured template.
"""

from .composer import build_subject, compose  # noqa: F401
from .template import render  # noqa: F401
