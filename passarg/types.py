"""Source descriptors produced by the parser."""

from dataclasses import dataclass
from typing import Union

DEFAULT_PROMPT = "Password: "


@dataclass(frozen=True)
class Literal:
    """The secret is the payload itself (pass:<value>)."""

    value: str

    def to_arg(self) -> str:
        return f"pass:{self.value}"


@dataclass(frozen=True)
class EnvVar:
    """Secret read from an environment variable at resolve time (env:<name>)."""

    name: str

    def to_arg(self) -> str:
        return f"env:{self.name}"


@dataclass(frozen=True)
class File:
    """
    First unread line of a file (file:<path>).

    The path is kept exactly as given; it is canonicalized by the resolver.
    """

    path: str

    def to_arg(self) -> str:
        return f"file:{self.path}"


@dataclass(frozen=True)
class Fd:
    """First unread line of an inherited file descriptor (fd:<number>)."""

    number: int

    def to_arg(self) -> str:
        return f"fd:{self.number}"


@dataclass(frozen=True)
class Stdin:
    """First unread line of standard input (stdin)."""

    def to_arg(self) -> str:
        return "stdin"


@dataclass(frozen=True)
class Prompt:
    """Interactive prompt (prompt or prompt:<text>)."""

    text: str = DEFAULT_PROMPT

    def to_arg(self) -> str:
        if self.text == DEFAULT_PROMPT:
            return "prompt"
        return f"prompt:{self.text}"


Source = Union[Literal, EnvVar, File, Fd, Stdin, Prompt]
