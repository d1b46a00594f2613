"""
Core data models for srm.

This module contains:
- TEMP_ROOT: Fixed directory prefix for relocated copies
- destination_for: Derives the destination path for a source path
- RelocationResult: Outcome of a completed relocation
"""

from dataclasses import dataclass, field
from datetime import datetime

from .relocation_stage import RelocationStage

# Prefix joined to the source path verbatim, not via os.path.join
TEMP_ROOT = "/tmp/"
COPY_SUFFIX = "_copy"


def destination_for(path: str, temp_root: str = TEMP_ROOT) -> str:
    """
    Build the destination for ``path`` as ``<temp_root><path>_copy``.

    The pieces are concatenated as strings, so a path containing separators
    maps to a nested location under ``temp_root``.

    Args:
        path: Source path exactly as given on the command line.
        temp_root: Directory prefix, including its trailing separator.

    Returns:
        The destination path string.
    """
    return f"{temp_root}{path}{COPY_SUFFIX}"


@dataclass
class RelocationResult:
    """Outcome of a single relocation."""
    source: str                       # Original path as given
    destination: str                  # Path of the copy
    bytes_copied: int = 0             # Size of the copy in bytes
    stage: RelocationStage = RelocationStage.START  # Stage reached; DELETED once returned
    timestamp: datetime = field(default_factory=datetime.now)  # Invocation start
