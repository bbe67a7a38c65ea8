"""
GitHub Actions step outputs.

Multi-line values are written to the file named by ``GITHUB_OUTPUT``
using the heredoc form ``name<<DELIMITER``. A random delimiter is chosen
per value so that the value itself cannot terminate it early.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Union


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class OutputError(Exception):
    """Raised when a step output cannot be written."""

    pass


def write_github_output(output_path: Union[str, Path], name: str, value: str) -> None:
    """Append ``name=value`` to the GitHub Actions output file.

    Raises
    ------
    OutputError
        If the file cannot be written.
    """
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    try:
        with open(output_path, "a", encoding="utf-8") as handle:
            handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    except OSError as exc:
        logger.error("Failed to write output '%s' to %s: %s", name, output_path, exc)
        raise OutputError(f"Failed to write output '{name}': {exc}") from exc
    logger.debug("Wrote output '%s' (%d characters) to %s", name, len(value), output_path)
