"""srm - move a file to /tmp as copy-then-delete.

The original file is removed only after its copy in /tmp is complete, and
each failing phase is reported with its own error type.
"""

__version__ = "0.1.0"

from .models import (
    ErrorKind,
    OperationError,
    NoInputSpecified,
    CopyFailed,
    DeleteFailed,
    RelocationResult,
    RelocationStage,
)
from .operations import FileRelocator, copy_file, delete_file, process_file

__all__ = [
    "__version__",
    "ErrorKind",
    "OperationError",
    "NoInputSpecified",
    "CopyFailed",
    "DeleteFailed",
    "RelocationResult",
    "RelocationStage",
    "FileRelocator",
    "copy_file",
    "delete_file",
    "process_file",
]

