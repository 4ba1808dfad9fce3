"""Builder table for the fixed set of argument prefixes."""

from typing import Callable, Optional

from passarg.types import Source

SourceBuilder = Callable[[Optional[str]], Source]

# The grammar is closed: these are the only prefixes there will ever be
PREFIXES = ("pass", "env", "file", "fd", "stdin", "prompt")

_BUILDERS: dict[str, SourceBuilder] = {}


def register_source(prefix: str):
    """
    Decorator binding one of the fixed prefixes to its builder.

    The builder receives the text after the first colon, or None when the
    argument has no colon at all.

    Raises:
        ValueError: If prefix is not one of PREFIXES or already bound
    """
    if prefix not in PREFIXES:
        raise ValueError(f"'{prefix}' is not a password argument type")
    if prefix in _BUILDERS:
        raise ValueError(f"Builder for '{prefix}' already registered")

    def decorator(func: SourceBuilder) -> SourceBuilder:
        _BUILDERS[prefix] = func
        return func

    return decorator


def get_source_builder(prefix: str) -> SourceBuilder:
    """
    Get builder by prefix.

    Raises:
        KeyError: If prefix not registered
    """
    if prefix not in _BUILDERS:
        available = ", ".join(_BUILDERS.keys()) or "none"
        raise KeyError(f"Unknown source type: '{prefix}'. Available: {available}")
    return _BUILDERS[prefix]


def available_prefixes() -> list[str]:
    """Registered prefixes in registration order."""
    return list(_BUILDERS.keys())
