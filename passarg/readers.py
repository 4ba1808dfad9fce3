"""Low-level readers for file-like password sources."""

import getpass
import io
import os
import sys
import warnings
from pathlib import Path
from typing import TextIO

from passarg.exceptions import PassArgIOError, UnsupportedPlatformError
from passarg.utils.logging import get_logger

logger = get_logger(__name__)

ENCODING = "utf-8"

# Raw descriptors can't be adopted by number on Windows consoles
FD_SUPPORTED = os.name != "nt"


def read_line(stream: TextIO) -> str:
    """
    Strips one trailing "\\n" and nothing else, so a secret may end in "\\r".

    Strips one trailing "\n" and nothing else, so a secret may end in "\r".
    Returns an empty string at end of stream.

    Raises:
        PassArgIOError: If the read fails or the data is not valid text
    """
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise PassArgIOError(f"Failed to read line: {e}", e) from e

    if line.endswith("\n"):
        line = line[:-1]
    return line


def canonicalize(path: str) -> str:
    """
    Resolve a path to its absolute, symlink-free form.

    Raises:
        PassArgIOError: If any component of the path does not exist
    """
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError) as e:
        raise PassArgIOError(f"Cannot resolve path '{path}': {e}", e) from e


def open_file(canonical_path: str) -> TextIO:
    """
    Open a file for line reading.

    Raises:
        PassArgIOError: Not found, permission denied, is a directory, ...
    """
    try:
        stream = open(canonical_path, "r", encoding=ENCODING, newline="\n")
    except OSError as e:
        raise PassArgIOError(f"Cannot open '{canonical_path}': {e}", e) from e

    logger.debug(f"Opened password file: {canonical_path}")
    return stream


def adopt_fd(number: int) -> TextIO:
    """
    Take ownership of an inherited file descriptor.

    The returned stream owns the descriptor: closing the stream closes the
    descriptor, so nothing else may close it independently.

    Raises:
        UnsupportedPlatformError: On platforms without raw descriptors
        PassArgIOError: If the descriptor is not open or not readable
    """
    if not FD_SUPPORTED:
        raise UnsupportedPlatformError(
            f"fd:{number} is not supported on this platform ({os.name})"
        )

    try:
        stream = os.fdopen(number, "r", encoding=ENCODING, newline="\n")
    except (OSError, ValueError, OverflowError, TypeError) as e:
        raise PassArgIOError(f"Cannot read file descriptor {number}: {e}", e) from e

    logger.debug(f"Adopted file descriptor: {number}")
    return stream


def stdin_stream() -> TextIO:
    """
    Return the process-wide standard input stream (never closed here).

    Switches it to split lines on "\\n" only, like files and descriptors,
    unless something has already read from it.
    """
    stream = sys.stdin
    if stream is None:
        raise PassArgIOError("Standard input is not available")

    if isinstance(stream, io.TextIOWrapper):
        try:
            stream.reconfigure(newline="\n")
        except io.UnsupportedOperation:
            logger.warning("stdin already read from; keeping its newline handling")
    return stream


def prompt_password(text: str) -> str:
    """
    Prompt for a password on the controlling terminal without echo.

    getpass falls back to reading stdin when there is no terminal; that
    would take a line meant for a stdin argument, so it is an error here.

    Raises:
        PassArgIOError: If no terminal is available or input ends
    """
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("error", getpass.GetPassWarning)
            return getpass.getpass(text)
    except getpass.GetPassWarning as e:
        raise PassArgIOError("No terminal available to prompt for password", e) from e
    except EOFError as e:
        raise PassArgIOError("End of input while prompting for password", e) from e
    except OSError as e:
        raise PassArgIOError(f"Cannot prompt for password: {e}", e) from e
