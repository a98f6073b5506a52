"""Resource file discovery and per-locale aggregation."""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union
from collections import defaultdict

from ..frameworks.base import BaseAdapter, StringEntry
from ..utils.logging import get_logger
from .errors import ParseError, TraversalError
from .path_filter import NullPathFilter, PathFilter

logger = get_logger('core.file_manager')

# locale -> string name -> entry
LocaleIndex = Dict[str, Dict[str, StringEntry]]


class ResourceFileManager:
    """
    Finds resource files in a project tree and merges their strings by locale.

    Discovery order is part of the contract: directory entries are visited
    depth-first in name order, and when two files of the same locale define
    the same name, the one visited later wins.
    """

    def __init__(
        self,
        adapter: BaseAdapter,
        path_filter: Optional[PathFilter] = None,
        ignored_locales: Optional[Iterable[str]] = None,
    ):
        """
        Initialize file manager.

        Args:
            adapter: Format adapter (e.g., AndroidAdapter)
            path_filter: Decides which entries are skipped; nothing is skipped by default
            ignored_locales: Locale keys left out of the index entirely
        """
        self.adapter = adapter
        self.path_filter = path_filter or NullPathFilter()
        self.ignored_locales = set(ignored_locales or ())
        self.languages: Dict[str, List[Path]] = defaultdict(list)  # locale -> files

    def discover(self, root: Union[str, Path]) -> List[Path]:
        """
        Recursively collect resource files under ``root``.

        Args:
            root: Project root directory

        Returns:
            Resource file paths in traversal order

        Raises:
            TraversalError: If root or a nested directory cannot be read
        """
        root = Path(root)
        files: List[Path] = []
        self._walk(root, root, files)
        logger.debug("discovered %d resource file(s) under %s", len(files), root)
        return files

    def _walk(self, root: Path, directory: Path, files: List[Path]) -> None:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise TraversalError(directory, e) from e

        for entry in entries:
            # pruned before recursing
            if self.path_filter.is_ignored(root, entry):
                continue

            if entry.is_dir():
                if entry.is_symlink():
                    logger.debug("not following symlinked directory %s", entry)
                    continue
                self._walk(root, entry, files)
            elif self.adapter.is_resource_file(entry):
                files.append(entry)

    def aggregate(self, files: Iterable[Union[str, Path]]) -> LocaleIndex:
        """
        Parse files in order and index their entries by locale and name.

        Every file registers its locale, even when it yields no entries.

        Args:
            files: Resource files, usually from ``discover``

        Returns:
            {locale: {name: StringEntry}}

        Raises:
            ParseError: If a file cannot be read or parsed
        """
        index: LocaleIndex = {}
        self.languages.clear()

        for file_path in files:
            file_path = Path(file_path)
            locale = self.adapter.extract_language_code(file_path)

            if locale in self.ignored_locales:
                logger.debug("skipping %s (locale '%s' ignored)", file_path, locale)
                continue

            try:
                content = file_path.read_bytes()
            except OSError as e:
                raise ParseError(file_path, e, reason=f"unable to read file: {e}") from e

            entries = self.adapter.parse_localization_file(content, file_path)

            strings = index.setdefault(locale, {})
            for entry in entries:
                if entry.name in strings:
                    logger.debug("%s: '%s' overrides an earlier definition for locale '%s'",
                                 file_path, entry.name, locale)
                strings[entry.name] = entry

            self.languages[locale].append(file_path)
            logger.debug("%s -> %s: %d string(s)", file_path, locale, len(entries))

        return index

    def load(self, root: Union[str, Path]) -> LocaleIndex:
        """Discover and aggregate in one call."""
        return self.aggregate(self.discover(root))
