"""Password argument resolver - turns source descriptors into secrets."""

import os
from typing import Callable, Iterable, Optional, TextIO

from passarg.exceptions import EnvironmentLookupError, PassArgIOError
from passarg.parser import parse
from passarg.readers import (
    ENCODING,
    adopt_fd,
    canonicalize,
    open_file,
    prompt_password,
    read_line,
    stdin_stream,
)
from passarg.types import EnvVar, Fd, File, Literal, Prompt, Source, Stdin
from passarg.utils.logging import get_logger

logger = get_logger(__name__)


class PassArgResolver:
    """
    Reads one password per call from the given source.

    Files and descriptors are opened on first use and kept open, so every
    later argument naming the same source reads the next line. Which line
    an argument gets is decided by call order alone.

    The resolver owns every file and descriptor it opens and closes them on
    close() (or when used as a context manager). Standard input is shared
    and is never closed.

    Not thread-safe: use one resolver per thread or serialize calls.

    Usage:
        with PassArgResolver() as resolver:
            pass_in = resolver.resolve_arg(args.pass_in)
            pass_out = resolver.resolve_arg(args.pass_out)
    """

    def __init__(self, prompt: Callable[[str], str] = prompt_password):
        self.files: dict[str, TextIO] = {}
        self.fds: dict[int, TextIO] = {}
        self.stdin: Optional[TextIO] = None
        self._prompt = prompt

    def __enter__(self) -> "PassArgResolver":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def resolve(self, source: Source) -> str:
        """
        Resolve a source descriptor to its secret.

        Raises:
            EnvironmentLookupError: env: variable unset or undecodable
            PassArgIOError: open/read failure on a file, descriptor or stdin
            UnsupportedPlatformError: fd: on a platform without descriptors
        """
        if isinstance(source, Literal):
            return source.value
        if isinstance(source, EnvVar):
            return self._read_env(source.name)
        if isinstance(source, File):
            return self._read_cached(self.files, canonicalize(source.path), open_file)
        if isinstance(source, Fd):
            return self._read_cached(self.fds, source.number, adopt_fd)
        if isinstance(source, Stdin):
            return read_line(self._stdin_stream())
        if isinstance(source, Prompt):
            return self._prompt(source.text)
        raise TypeError(f"Unsupported source: {source!r}")

    def resolve_arg(self, text: str) -> str:
        """Parse a password argument and resolve it."""
        return self.resolve(parse(text))

    def resolve_args(self, texts: Iterable[str]) -> list[str]:
        """Resolve several arguments in order, sharing this resolver's sources."""
        return [self.resolve_arg(text) for text in texts]

    def close(self) -> None:
        """Close every file and descriptor opened by this resolver."""
        streams = list(self.files.values()) + list(self.fds.values())
        self.files.clear()
        self.fds.clear()
        # stdin belongs to the process
        self.stdin = None

        for stream in streams:
            stream.close()

        if streams:
            logger.debug(f"Closed {len(streams)} password source(s)")

    def _read_env(self, name: str) -> str:
        value = os.environ.get(name)
        if value is None:
            raise EnvironmentLookupError(name)

        # Undecodable bytes come through os.environ as lone surrogates
        try:
            value.encode(ENCODING)
        except UnicodeEncodeError as e:
            raise EnvironmentLookupError(name, "is not valid text") from e

        logger.debug(f"Resolved password from env var '{name}'")
        return value

    def _read_cached(self, cache: dict, key, opener: Callable) -> str:
        """
        Read the next line from the cached reader for key, opening it first
        if needed.

        A failed open or read leaves no entry for key, so a later call
        starts fresh on the corrected source.
        """
        stream = cache.get(key)
        if stream is None:
            stream = opener(key)
        else:
            logger.debug(f"Reusing open password source: {key}")

        try:
            line = read_line(stream)
        except PassArgIOError:
            cache.pop(key, None)
            stream.close()
            raise

        cache[key] = stream
        return line

    def _stdin_stream(self) -> TextIO:
        if self.stdin is None:
            self.stdin = stdin_stream()
        return self.stdin


def read_pass_arg(text: str) -> str:
    """
    Resolve a single password argument with a throwaway resolver.

    Any file or descriptor opened is closed before returning, so use a
    PassArgResolver when several arguments may share a source.
    """
    with PassArgResolver() as resolver:
        return resolver.resolve_arg(text)
