"""Pytest fixtures for srm tests."""

import io
import logging
import os
import tempfile
import uuid
from pathlib import Path
from typing import Generator

import pytest
from rich.console import Console

from srm.models import TEMP_ROOT
from srm.operations import FileRelocator


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single component")
    config.addinivalue_line("markers", "integration: tests touching the real /tmp")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def dest_root(temp_dir: Path) -> str:
    """Destination prefix standing in for /tmp/, with trailing separator."""
    root = temp_dir / "dest"
    root.mkdir()
    return str(root) + os.sep


@pytest.fixture
def work_dir(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Source directory that is also the current working directory."""
    work = temp_dir / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def sample_files(temp_dir: Path) -> dict[str, Path]:
    """Create test files of various sizes with known content.

    Creates:
        - empty.txt: 0 bytes
        - small.txt: 1KB with 'a' characters
        - medium.txt: 1MB with 'b' characters
        - binary.bin: every byte value

    Returns:
        Dictionary mapping file names to their paths.
    """
    files = {}

    empty_file = temp_dir / "empty.txt"
    empty_file.touch()
    files["empty"] = empty_file

    small_file = temp_dir / "small.txt"
    small_file.write_bytes(b"a" * 1024)
    files["small"] = small_file

    medium_file = temp_dir / "medium.txt"
    medium_file.write_bytes(b"b" * (1024 * 1024))
    files["medium"] = medium_file

    binary_file = temp_dir / "binary.bin"
    binary_file.write_bytes(bytes(range(256)))
    files["binary"] = binary_file

    return files


@pytest.fixture
def output() -> io.StringIO:
    """Buffer capturing success messages."""
    return io.StringIO()


@pytest.fixture
def error_output() -> io.StringIO:
    """Buffer capturing diagnostics."""
    return io.StringIO()


@pytest.fixture
def relocator(dest_root: str, output: io.StringIO, error_output: io.StringIO) -> FileRelocator:
    """FileRelocator writing under ``dest_root`` with captured consoles."""
    return FileRelocator(
        temp_root=dest_root,
        console=Console(file=output, soft_wrap=True),
        error_console=Console(file=error_output, soft_wrap=True),
    )


@pytest.fixture
def unique_name() -> Generator[str, None, None]:
    """A file name unlikely to exist, whose /tmp copy is removed afterwards.

    Yields:
        Bare file name (no directory part).
    """
    name = f"srm_test_{uuid.uuid4().hex}.txt"
    yield name
    copy = Path(f"{TEMP_ROOT}{name}_copy")
    if copy.exists():
        copy.unlink()


@pytest.fixture
def reset_srm_logger() -> Generator[logging.Logger, None, None]:
    """Restore the srm logger's handlers and level after a test."""
    srm_logger = logging.getLogger("srm")
    handlers = list(srm_logger.handlers)
    level = srm_logger.level
    yield srm_logger
    srm_logger.handlers[:] = handlers
    srm_logger.setLevel(level)


@pytest.fixture
def dash_name() -> Generator[str, None, None]:
    """A unique file name starting with '-', whose /tmp copy is removed afterwards.

    Avoids 'v' and 'V' so no character matches a short option.
    """
    name = f"-srm_{uuid.uuid4().hex}.txt"
    yield name
    copy = Path(f"{TEMP_ROOT}{name}_copy")
    if copy.exists():
        copy.unlink()
