"""Core modules: discovery, aggregation and analysis."""

from .errors import TranslationCheckError, TraversalError, ParseError, NoDefaultLocaleError
from .path_filter import (
    PathFilter,
    NullPathFilter,
    ExcludePatternFilter,
    GitIgnoreFilter,
    CompositePathFilter,
)
from .file_manager import ResourceFileManager, LocaleIndex
from .analyzer import (
    MissingTranslation,
    MissingTranslationAnalyzer,
    AnalysisResult,
    TranslationChecker,
)

__all__ = [
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
    'LocaleIndex',
    'MissingTranslation',
    'MissingTranslationAnalyzer',
    'AnalysisResult',
    'TranslationChecker',
]
