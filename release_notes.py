#!/usr/bin/env python
"""
Thin wrapper script to invoke the vc_release_notes CLI.

Running ``python release_notes.py`` is equivalent to running the
``release-notes`` console script installed via ``pyproject.toml``.
"""

from vc_release_notes.cli import main


if __name__ == "__main__":
    main(prog_name="release-notes")
