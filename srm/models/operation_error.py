"""
Error types for the relocation workflow.

OperationError is a closed hierarchy with one subclass per failing phase:
- NoInputSpecified: no file argument, or the named file does not exist
- CopyFailed: the copy to the temporary location failed
- DeleteFailed: the original could not be removed after a successful copy

The wrapped OSError is kept on ``cause`` for diagnostics, and ``stage`` records
the last stage the relocation completed before failing (None when the error
came from argument resolution).
"""

from enum import Enum
from typing import Optional

from .relocation_stage import RelocationStage


class ErrorKind(Enum):
    """Tag identifying which OperationError variant is active."""
    NO_INPUT_SPECIFIED = "no_input_specified"
    COPY_FAILED = "copy_failed"
    DELETE_FAILED = "delete_failed"


class OperationError(Exception):
    """Base class for every failure raised by the relocation workflow."""

    kind: ErrorKind
    stage: Optional[RelocationStage] = None

    def __init__(self, cause: Optional[OSError] = None) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return "Relocation failed"


class NoInputSpecified(OperationError):
    """
    No usable input file.

    Raised both when no positional argument was given and when the given
    path does not exist. In the latter case ``path`` records the argument.
    """

    kind = ErrorKind.NO_INPUT_SPECIFIED

    def __init__(self, path: Optional[str] = None) -> None:
        super().__init__()
        self.path = path
        self.args = (path,)

    def __str__(self) -> str:
        return "No input file specified"


class CopyFailed(OperationError):
    """The copy step failed; the original file is untouched."""

    kind = ErrorKind.COPY_FAILED

    def __init__(self, cause: OSError) -> None:
        super().__init__(cause)

    def __str__(self) -> str:
        return f"Failed to copy file: {self.cause}"


class DeleteFailed(OperationError):
    """The delete step failed; both the copy and the original exist."""

    kind = ErrorKind.DELETE_FAILED

    def __init__(self, cause: OSError) -> None:
        super().__init__(cause)

    def __str__(self) -> str:
        return f"Failed to delete original file: {self.cause}"
