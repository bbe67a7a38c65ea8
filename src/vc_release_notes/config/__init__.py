"""
Configuration for vc_release_notes.

Provides the changelog configuration model, the built-in default
configuration, and a loader for user-supplied JSON or YAML documents.
See :mod:`vc_release_notes.config.loader` for details.
"""

from .loader import ConfigError, config_from_dict, load_config  # noqa: F401
from .model import ChangelogConfig, GroupConfig  # noqa: F401
