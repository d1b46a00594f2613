"""
Argument resolution for srm.

Extracts the single input path from an argv-style list of strings.
"""

import sys
from typing import Optional, Sequence

from srm.models import NoInputSpecified


def get_input_file(argv: Optional[Sequence[str]] = None) -> str:
    """
    Return the first positional argument from ``argv``.

    Args:
        argv: Argument list shaped like ``sys.argv``, with the program name at
            index 0. Defaults to the live ``sys.argv``. Anything past index 1
            is ignored.

    Returns:
        The file path to process.

    Raises:
        NoInputSpecified: If no positional argument was supplied.
    """
    if argv is None:
        argv = sys.argv
    if len(argv) < 2:
        raise NoInputSpecified()
    return argv[1]
