"""
RelocationStage enum for the copy-then-delete workflow.

A relocation advances through the stages in order:
1. Start - Nothing has been checked yet
2. Validated - The source path exists
3. Copied - The destination holds a full copy of the source
4. Deleted - The original has been removed (sole success terminal)
"""

from enum import Enum


class RelocationStage(Enum):
    """Encodes how far a single relocation has progressed."""
    START = "start"            # Invocation began
    VALIDATED = "validated"    # Source exists
    COPIED = "copied"          # Copy to the temporary location finished
    DELETED = "deleted"        # Original removed
