"""
Data model for the changelog configuration.

A :class:`ChangelogConfig` is built once per run and never mutated by the
pipeline. Group order is significant: it is the order of the sections in
the generated changelog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class GroupConfig:
    """A named changelog section collecting one or more commit types.

    Attributes
    ----------
    title : str
        Section heading text.
    icon : Optional[str]
        Emoji shortcode shown before the title when icons are enabled.
    types : FrozenSet[str]
        Commit types (case-sensitive) rendered in this section.
    """

    title: str
    types: FrozenSet[str]
    icon: Optional[str] = None


@dataclass(frozen=True)
class ChangelogConfig:
    """Complete changelog configuration for one run."""

    groups: Tuple[GroupConfig, ...]
    template: Optional[str] = None
    skip_markers: FrozenSet[str] = field(default_factory=frozenset)
    exclude_types: FrozenSet[str] = field(default_factory=frozenset)
