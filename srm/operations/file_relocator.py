"""
File relocation module for srm.

This module contains the FileRelocator class, which moves a file into the
temporary directory by copying it and only then deleting the original, plus
the copy_file and delete_file helpers it is built from.
"""

import logging
import os
import shutil
from typing import Optional

from rich.console import Console

from srm.models import (
    TEMP_ROOT,
    CopyFailed,
    DeleteFailed,
    NoInputSpecified,
    OperationError,
    RelocationResult,
    RelocationStage,
    destination_for,
)

# Configure module logger
logger = logging.getLogger('srm.operations')


def copy_file(source: str, destination: str) -> int:
    """
    Copy ``source`` to ``destination``, including permission bits.

    Parameters:
        source (str): File to copy.
        destination (str): Path of the copy. Its parent directory must exist.

    Returns:
        int: Number of bytes written to ``destination``.

    Raises:
        CopyFailed: Wrapping the OSError if the source is missing or not a
            regular file, or the destination cannot be written.
    """
    try:
        shutil.copyfile(source, destination)
        shutil.copymode(source, destination)
        return os.stat(destination).st_size
    except OSError as e:
        logger.debug(f"Copy failed: {source} -> {destination}: {e}")
        raise CopyFailed(e) from e


def delete_file(path: str) -> None:
    """
    Remove the file at ``path``.

    Raises:
        DeleteFailed: Wrapping the OSError if the file cannot be removed.
    """
    try:
        os.remove(path)
    except OSError as e:
        logger.debug(f"Delete failed: {path}: {e}")
        raise DeleteFailed(e) from e


class FileRelocator:
    """
    Moves a single file into the temporary directory as copy-then-delete.

    The original is deleted only after the copy has completed, so any failure
    leaves the original in place. Progress messages go to ``console`` and
    diagnostics to ``error_console``.
    """

    def __init__(
        self,
        temp_root: str = TEMP_ROOT,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> None:
        """
        Create a FileRelocator.

        Parameters:
            temp_root (str): Prefix for destination paths, trailing separator included.
            console (Console): Console for success messages. Defaults to stdout.
            error_console (Console): Console for diagnostics. Defaults to stderr.
        """
        self.temp_root = temp_root
        self.console = console or Console(soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, soft_wrap=True)

    def process(self, path: str) -> RelocationResult:
        """
        Copy ``path`` into the temporary directory and delete the original.

        Parameters:
            path (str): File to relocate.

        Returns:
            RelocationResult: Source, destination and byte count, at stage DELETED.

        Raises:
            NoInputSpecified: If ``path`` does not exist.
            CopyFailed: If the copy fails. Nothing is deleted.
            DeleteFailed: If the original cannot be removed after the copy.
            Each error carries the last completed stage on ``stage``.
        """
        result = RelocationResult(
            source=path,
            destination=destination_for(path, self.temp_root),
        )

        try:
            return self._relocate(result)
        except OperationError as e:
            e.stage = result.stage
            logger.debug(f"Relocation of {path} stopped after stage {result.stage.value}")
            raise

    def _relocate(self, result: RelocationResult) -> RelocationResult:
        path = result.source
        if not os.path.exists(path):
            self._error(f"Error: Input file '{path}' does not exist")
            raise NoInputSpecified(path=path)
        result.stage = RelocationStage.VALIDATED
        logger.debug(f"Validated source: {path}")

        try:
            result.bytes_copied = copy_file(path, result.destination)
        except CopyFailed as e:
            self._error(f"Error during file copy: {e}")
            raise
        result.stage = RelocationStage.COPIED
        self._info(
            f"Successfully copied {result.bytes_copied} bytes to {result.destination}"
        )

        delete_file(path)
        result.stage = RelocationStage.DELETED
        logger.debug(f"Deleted original: {path}")
        self._info("Original file successfully deleted")

        return result

    def _info(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)

    def _error(self, message: str) -> None:
        self.error_console.print(message, markup=False, highlight=False)


def process_file(path: str) -> RelocationResult:
    """Relocate ``path`` with a default FileRelocator."""
    return FileRelocator().process(path)
