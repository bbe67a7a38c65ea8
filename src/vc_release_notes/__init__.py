"""
Top-level package for vc_release_notes.

This package builds release notes from the Conventional Commits history of
a repository branch since its latest tag. The CLI entry point lives in
``vc_release_notes.cli``.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
