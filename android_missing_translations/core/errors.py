"""Errors raised by the translation check pipeline.

Every error aborts the run; callers print the message and exit non-zero.
"""

from pathlib import Path
from typing import Optional, Union


class TranslationCheckError(Exception):
    """Base class for all pipeline errors."""


class TraversalError(TranslationCheckError):
    """A directory in the project tree could not be read."""

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        message = f"unable to read directory {self.path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ParseError(TranslationCheckError):
    """A resource file could not be read or is not a valid resources document."""

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None, reason: str = ''):
        self.path = Path(path)
        self.cause = cause
        detail = reason or (str(cause) if cause is not None else '')
        message = f"unable to parse XML file at {self.path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NoDefaultLocaleError(TranslationCheckError):
    """No resource file resolved to the default locale."""

    def __init__(self, message: str = "unable to find string resources for default locale"):
        super().__init__(message)
