"""
Models package for srm.

This package provides convenient imports for all data models:
- RelocationStage: Enum for the workflow stages
- RelocationResult: Outcome of a relocation
- destination_for: Destination path derivation
- ErrorKind: Enum tagging the error variants
- OperationError, NoInputSpecified, CopyFailed, DeleteFailed: Error types
"""

from .relocation_stage import RelocationStage
from .data_models import TEMP_ROOT, RelocationResult, destination_for
from .operation_error import (
    ErrorKind,
    OperationError,
    NoInputSpecified,
    CopyFailed,
    DeleteFailed,
)

__all__ = [
    "RelocationStage",
    "RelocationResult",
    "TEMP_ROOT",
    "destination_for",
    "ErrorKind",
    "OperationError",
    "NoInputSpecified",
    "CopyFailed",
    "DeleteFailed",
]
