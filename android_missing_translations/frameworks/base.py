"""Base adapter interface for localization resource formats."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union
from dataclasses import dataclass


DEFAULT_LOCALE = 'default'


@dataclass(frozen=True)
class StringEntry:
    """One localized string as found in a resource file."""
    name: str
    value: str
    translatable: Optional[str] = None  # raw attribute value, None when absent

    @property
    def is_translatable(self) -> bool:
        """Only an explicit ``false`` (any case) opts a string out."""
        if self.translatable is None:
            return True
        return self.translatable.lower() != 'false'


class BaseAdapter(ABC):
    """Base adapter for format-specific resource handling."""

    default_locale: str = DEFAULT_LOCALE

    @abstractmethod
    def is_resource_file(self, file_path: Path) -> bool:
        """Return True if the file holds localized strings for this format."""
        pass

    @abstractmethod
    def parse_localization_file(
        self,
        content: bytes,
        file_path: Optional[Union[str, Path]] = None
    ) -> List[StringEntry]:
        """
        Parse a resource file's bytes into translatable entries.

        Args:
            content: Raw file content
            file_path: Path used to attribute parse errors

        Returns:
            Entries in document order, non-translatable ones removed

        Raises:
            ParseError: If the content is not a valid resource document
        """
        pass

    @abstractmethod
    def extract_language_code(self, file_path: Union[str, Path]) -> str:
        """
        Derive the locale key of a resource file.

        Args:
            file_path: Resource file path

        Returns:
            Locale key, ``default_locale`` for the base resource set
        """
        pass
