"""Custom exceptions for password argument handling."""

from typing import Optional


class PassArgError(Exception):
    """Base exception for all password argument errors."""

    pass


class UnrecognizedSourceTypeError(PassArgError):
    """Raised when an argument has an unknown prefix or is empty."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid type {token!r}")


class MalformedDescriptorNumberError(PassArgError):
    """Raised when the text after 'fd:' is not an integer."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid file descriptor number {text!r}")


class EnvironmentLookupError(PassArgError):
    """Raised when an environment variable is unset or not decodable."""

    def __init__(self, name: str, reason: str = "not set"):
        self.name = name
        super().__init__(f"environment variable {name!r} {reason}")


class PassArgIOError(PassArgError):
    """Raised when opening or reading a file, descriptor or stdin fails."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class UnsupportedPlatformError(PassArgIOError):
    """Raised when a source kind is not available on this platform."""

    pass
