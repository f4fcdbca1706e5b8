"""Whole-file read and write helpers.

All helpers read and write UTF-8 text and raise `FileError` (an `OSError`
subclass) with the path in the message, chained to the original error.
"""
import logging
from pathlib import Path
from typing import Union

from ..core.exceptions import FileError

# Initialize a logger for this module.
logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_file(path: PathLike) -> str:
    """Returns the full contents of a text file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"cannot read file {path}: {e}") from e


def write_file(path: PathLike, content: str) -> None:
    """Writes `content` to `path`, creating or truncating the file."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise FileError(f"cannot write file {path}: {e}") from e


def create_file(path: PathLike, content: str) -> bool:
    """Creates `path` with `content` unless it already exists.

    Returns:
        bool: True if the file was created, False if it already existed.
    """
    try:
        # Mode "x" fails if the file already exists.
        with open(path, "x", encoding="utf-8") as f:
            f.write(content)
    except FileExistsError:
        logger.debug(f"Not creating {path}: file already exists")
        return False
    except OSError as e:
        raise FileError(f"cannot create file {path}: {e}") from e
    return True


def append_file(path: PathLike, content: str) -> None:
    """Appends `content` to `path`, creating the file if needed."""
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise FileError(f"cannot append to file {path}: {e}") from e
