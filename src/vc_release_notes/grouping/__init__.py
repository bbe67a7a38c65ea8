"""
Conventional Commits parsing and classification.

This package parses commit messages against the Conventional Commits
grammar and sorts commits into parsed entries and breaking changes. See
:mod:`vc_release_notes.grouping.commit_parser`,
:mod:`vc_release_notes.grouping.commit_classifier` and
:mod:`vc_release_notes.grouping.group_model` for details.
"""

from .commit_classifier import classify_commits  # noqa: F401
from .commit_parser import parse_commit_message  # noqa: F401
from .group_model import BreakingChange, ClassificationResult, Note, ParsedCommit  # noqa: F401
