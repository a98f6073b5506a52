"""
Android Missing Translations
============================

Finds strings defined in an Android project's default ``values/`` resources
that are missing from one or more translated ``values-*/`` resource sets.

Usage:
    from android_missing_translations import TranslationChecker, GitIgnoreFilter

    result = TranslationChecker('./my-app', path_filter=GitIgnoreFilter()).run()
    for record in result.missing_translations:
        print(record.name, record.missing_locales)

CLI:
    android-missing-translations check --project-dir ./my-app
    android-missing-translations check --output-format markdown --github-actions
    android-missing-translations init
"""

from .__version__ import __version__, __author__, __description__

# Core exports
from .core.errors import TranslationCheckError, TraversalError, ParseError, NoDefaultLocaleError
from .core.path_filter import (
    PathFilter,
    NullPathFilter,
    ExcludePatternFilter,
    GitIgnoreFilter,
    CompositePathFilter,
)
from .core.file_manager import ResourceFileManager
from .core.analyzer import (
    MissingTranslation,
    MissingTranslationAnalyzer,
    AnalysisResult,
    TranslationChecker,
)

# Format adapters
from .frameworks.base import BaseAdapter, StringEntry, DEFAULT_LOCALE
from .frameworks.android import AndroidAdapter

# Reports
from .reports.json_reporter import JSONReporter
from .reports.markdown_reporter import MarkdownReporter

__all__ = [
    '__version__',
    '__author__',
    '__description__',
    'TranslationCheckError',
    'TraversalError',
    'ParseError',
    'NoDefaultLocaleError',
    'PathFilter',
    'NullPathFilter',
    'ExcludePatternFilter',
    'GitIgnoreFilter',
    'CompositePathFilter',
    'ResourceFileManager',
    'MissingTranslation',
    'MissingTranslationAnalyzer',
    'AnalysisResult',
    'TranslationChecker',
    'BaseAdapter',
    'StringEntry',
    'DEFAULT_LOCALE',
    'AndroidAdapter',
    'JSONReporter',
    'MarkdownReporter',
]
