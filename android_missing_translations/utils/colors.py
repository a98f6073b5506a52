"""ANSI color codes for terminal output."""

import os


class Colors:
    """ANSI color codes used by the console report and log formatter."""

    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    # https://no-color.org
    enabled = 'NO_COLOR' not in os.environ

    @classmethod
    def _wrap(cls, code: str, text: str) -> str:
        if not cls.enabled:
            return text
        return f"{code}{text}{cls.ENDC}"

    @classmethod
    def success(cls, text: str) -> str:
        """Return text in green color."""
        return cls._wrap(cls.OKGREEN, text)

    @classmethod
    def error(cls, text: str) -> str:
        """Return text in red color."""
        return cls._wrap(cls.FAIL, text)

    @classmethod
    def warning(cls, text: str) -> str:
        """Return text in yellow color."""
        return cls._wrap(cls.WARNING, text)

    @classmethod
    def bold(cls, text: str) -> str:
        """Return text in bold."""
        return cls._wrap(cls.BOLD, text)
