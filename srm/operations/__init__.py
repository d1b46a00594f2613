"""File operations package for srm.

This package provides the FileRelocator class for moving a file into the
temporary directory as copy-then-delete, and the copy_file and delete_file
helpers it uses.

Example:
    >>> from srm.operations import FileRelocator
    >>> result = FileRelocator().process("notes.txt")
    >>> print(f"Copied {result.bytes_copied} bytes to {result.destination}")
"""

from .file_relocator import FileRelocator, copy_file, delete_file, process_file

__all__ = ["FileRelocator", "copy_file", "delete_file", "process_file"]
