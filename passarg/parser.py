"""Parser for OpenSSL-style password arguments."""

import re
from typing import Optional

from passarg.exceptions import MalformedDescriptorNumberError, UnrecognizedSourceTypeError
from passarg.registry import get_source_builder, register_source
from passarg.types import DEFAULT_PROMPT, EnvVar, Fd, File, Literal, Prompt, Source, Stdin

FD_PATTERN = re.compile(r"[+-]?[0-9]+")

# Descriptors are C ints
FD_MIN = -(2**31)
FD_MAX = 2**31 - 1


def _require_payload(prefix: str, payload: Optional[str]) -> str:
    if payload is None:
        raise UnrecognizedSourceTypeError(prefix)
    return payload


def _reject_payload(prefix: str, payload: Optional[str]) -> None:
    if payload is not None:
        raise UnrecognizedSourceTypeError(prefix)


@register_source("pass")
def _literal(payload: Optional[str]) -> Source:
    return Literal(_require_payload("pass", payload))


@register_source("env")
def _env(payload: Optional[str]) -> Source:
    return EnvVar(_require_payload("env", payload))


@register_source("file")
def _file(payload: Optional[str]) -> Source:
    return File(_require_payload("file", payload))


@register_source("fd")
def _fd(payload: Optional[str]) -> Source:
    text = _require_payload("fd", payload)
    if not FD_PATTERN.fullmatch(text):
        raise MalformedDescriptorNumberError(text)

    number = int(text)
    if not FD_MIN <= number <= FD_MAX:
        raise MalformedDescriptorNumberError(text)
    return Fd(number)


@register_source("stdin")
def _stdin(payload: Optional[str]) -> Source:
    _reject_payload("stdin", payload)
    return Stdin()


@register_source("prompt")
def _prompt(payload: Optional[str]) -> Source:
    return Prompt(DEFAULT_PROMPT if payload is None else payload)


def parse(text: str) -> Source:
    """
    Parse a password argument into a source descriptor.

    Only the first colon separates the type from its payload; anything
    after it, further colons included, is taken verbatim.

    Args:
        text: Argument such as "pass:secret", "file:key.txt" or "stdin"

    Returns:
        Source descriptor

    Raises:
        UnrecognizedSourceTypeError: Unknown type or empty argument
        MalformedDescriptorNumberError: fd: payload is not an integer
    """
    prefix, sep, rest = text.partition(":")
    payload = rest if sep else None

    try:
        builder = get_source_builder(prefix)
    except KeyError:
        raise UnrecognizedSourceTypeError(prefix) from None

    return builder(payload)
