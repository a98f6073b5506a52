"""Missing translation analysis."""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union
from dataclasses import dataclass, field

from ..frameworks.base import BaseAdapter, DEFAULT_LOCALE
from ..utils.logging import get_logger
from .errors import NoDefaultLocaleError
from .file_manager import LocaleIndex, ResourceFileManager
from .path_filter import PathFilter

logger = get_logger('core.analyzer')


@dataclass
class MissingTranslation:
    """A default-locale string and the locales that lack it."""
    name: str
    value: str
    missing_locales: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'value': self.value,
            'missing_locales': list(self.missing_locales),
        }

    @property
    def missing_locales_string(self) -> str:
        return ', '.join(self.missing_locales)


@dataclass
class AnalysisResult:
    """Outcome of a full check run."""
    root: Path
    missing_translations: List[MissingTranslation] = field(default_factory=list)
    locales: List[str] = field(default_factory=list)  # sorted, default included
    files: List[Path] = field(default_factory=list)
    files_by_locale: Dict[str, List[Path]] = field(default_factory=dict)
    default_string_count: int = 0

    @property
    def has_missing(self) -> bool:
        return bool(self.missing_translations)

    @property
    def translated_locales(self) -> List[str]:
        return [locale for locale in self.locales if locale != DEFAULT_LOCALE]

    def missing_count_by_locale(self) -> Dict[str, int]:
        """Number of default strings each translated locale lacks."""
        counts = {locale: 0 for locale in self.translated_locales}
        for record in self.missing_translations:
            for locale in record.missing_locales:
                counts[locale] = counts.get(locale, 0) + 1
        return counts


class MissingTranslationAnalyzer:
    """
    Compares every locale against the default locale.

    A default string is reported once, with the sorted list of locales whose
    index lacks its name. Strings present everywhere are not reported.
    """

    def __init__(self, default_locale: str = DEFAULT_LOCALE):
        self.default_locale = default_locale

    def analyze(self, index: LocaleIndex) -> List[MissingTranslation]:
        """
        Find default strings missing from other locales.

        Args:
            index: {locale: {name: StringEntry}} as built by the aggregator

        Returns:
            Records sorted by string name

        Raises:
            NoDefaultLocaleError: If the index has no default locale
        """
        if self.default_locale not in index:
            raise NoDefaultLocaleError()

        default_strings = index[self.default_locale]
        other_locales = sorted(locale for locale in index if locale != self.default_locale)

        records = []
        for name in sorted(default_strings):
            missing = [locale for locale in other_locales if name not in index[locale]]
            if missing:
                records.append(MissingTranslation(
                    name=name,
                    value=default_strings[name].value,
                    missing_locales=missing,
                ))

        return records


class TranslationChecker:
    """
    Runs discovery, aggregation and analysis for one project tree.

    Usage:
        checker = TranslationChecker('./my-app', path_filter=GitIgnoreFilter())
        result = checker.run()
        for record in result.missing_translations:
            print(record.name, record.missing_locales)
    """

    def __init__(
        self,
        root: Union[str, Path],
        adapter: Optional[BaseAdapter] = None,
        path_filter: Optional[PathFilter] = None,
        ignored_locales: Optional[Iterable[str]] = None,
    ):
        """
        Initialize checker.

        Args:
            root: Project root directory
            adapter: Resource format adapter, AndroidAdapter by default
            path_filter: Filter for skipped entries, none skipped by default
            ignored_locales: Locale keys to leave out of the comparison
        """
        if adapter is None:
            from ..frameworks.android import AndroidAdapter
            adapter = AndroidAdapter()

        self.root = Path(root)
        self.adapter = adapter
        self.file_manager = ResourceFileManager(
            self.adapter,
            path_filter=path_filter,
            ignored_locales=ignored_locales,
        )
        self.analyzer = MissingTranslationAnalyzer(default_locale=self.adapter.default_locale)

    def run(self) -> AnalysisResult:
        """
        Run the full check.

        Raises:
            TraversalError, ParseError, NoDefaultLocaleError
        """
        logger.info("Scanning %s for string resources...", self.root)
        files = self.file_manager.discover(self.root)

        index = self.file_manager.aggregate(files)
        logger.info("Found %d resource file(s) across %d locale(s)", len(files), len(index))

        records = self.analyzer.analyze(index)
        logger.debug("%d string(s) missing from at least one locale", len(records))

        return AnalysisResult(
            root=self.root,
            missing_translations=records,
            locales=sorted(index),
            files=files,
            files_by_locale={locale: list(paths) for locale, paths in self.file_manager.languages.items()},
            default_string_count=len(index[self.adapter.default_locale]),
        )
