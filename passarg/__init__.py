"""OpenSSL-style password argument handling."""

# Public API
from passarg.exceptions import (
    EnvironmentLookupError,
    MalformedDescriptorNumberError,
    PassArgError,
    PassArgIOError,
    UnrecognizedSourceTypeError,
    UnsupportedPlatformError,
)
from passarg.parser import parse
from passarg.resolver import PassArgResolver, read_pass_arg
from passarg.types import DEFAULT_PROMPT, EnvVar, Fd, File, Literal, Prompt, Source, Stdin

__all__ = [
    "parse",
    "PassArgResolver",
    "read_pass_arg",
    "Source",
    "Literal",
    "EnvVar",
    "File",
    "Fd",
    "Stdin",
    "Prompt",
    "DEFAULT_PROMPT",
    "PassArgError",
    "UnrecognizedSourceTypeError",
    "MalformedDescriptorNumberError",
    "EnvironmentLookupError",
    "PassArgIOError",
    "UnsupportedPlatformError",
]
