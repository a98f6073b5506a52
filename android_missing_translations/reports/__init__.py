"""Report modules."""

from .json_reporter import JSONReporter
from .markdown_reporter import MarkdownReporter
from .console_reporter import ConsoleReporter

__all__ = [
    'JSONReporter',
    'MarkdownReporter',
    'ConsoleReporter',
]
