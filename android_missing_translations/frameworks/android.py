"""Android ``res/values*/`` XML resource adapter."""

from pathlib import Path
from typing import List, Optional, Union
from xml.etree import ElementTree

from .base import BaseAdapter, StringEntry
from ..core.errors import ParseError
from ..utils.logging import get_logger

logger = get_logger('frameworks.android')


class AndroidAdapter(BaseAdapter):
    """
    Reads Android string resources.

    Layout conventions:
    - ``values/`` holds the default (untranslated) strings
    - ``values-<qualifier>/`` holds one locale, e.g. ``values-fr``,
      ``values-zh-rCN`` or ``values-b+sr+Latn``
    - only direct ``<string>`` children of ``<resources>`` are considered;
      ``<plurals>`` and ``<string-array>`` are not
    """

    VALUES_DIR_PREFIX = 'values'
    RESOURCE_EXTENSION = '.xml'
    ROOT_TAG = 'resources'
    STRING_TAG = 'string'

    def is_resource_file(self, file_path: Path) -> bool:
        """
        Check whether a file is a values resource file.

        The directory prefix match is case-sensitive; the extension match is not.
        """
        file_path = Path(file_path)
        return (
            file_path.parent.name.startswith(self.VALUES_DIR_PREFIX)
            and file_path.suffix.lower() == self.RESOURCE_EXTENSION
        )

    def parse_localization_file(
        self,
        content: bytes,
        file_path: Optional[Union[str, Path]] = None
    ) -> List[StringEntry]:
        """
        Extract translatable ``<string>`` entries from a resources document.

        Args:
            content: Raw XML bytes
            file_path: Path used to attribute parse errors

        Returns:
            Entries in document order, ``translatable="false"`` ones removed

        Raises:
            ParseError: On malformed XML or a root element other than <resources>
        """
        path = Path(file_path) if file_path is not None else Path('<memory>')

        try:
            root = ElementTree.fromstring(content)
        except ElementTree.ParseError as e:
            raise ParseError(path, e) from e

        if _local_name(root.tag) != self.ROOT_TAG:
            raise ParseError(
                path,
                reason=f"expected <{self.ROOT_TAG}> root element, found <{_local_name(root.tag)}>"
            )

        entries = []
        for elem in root:
            if _local_name(elem.tag) != self.STRING_TAG:
                continue

            name = elem.get('name')
            if not name:
                logger.debug("%s: skipping <string> without a name attribute", path)
                continue

            entry = StringEntry(
                name=name,
                value=_char_data(elem),
                translatable=elem.get('translatable'),
            )
            if entry.is_translatable:
                entries.append(entry)

        return entries

    def extract_language_code(self, file_path: Union[str, Path]) -> str:
        """
        Resolve the locale key from the parent directory name.

        ``values`` (any case) -> ``default``; otherwise everything after the
        first dash, so ``values-zh-rCN`` -> ``zh-rCN``. Names without a dash or
        with nothing after it fall back to ``default``.
        """
        parent = Path(file_path).parent.name
        if parent.lower() == self.VALUES_DIR_PREFIX:
            return self.default_locale

        _, sep, suffix = parent.partition('-')
        if not sep or not suffix:
            return self.default_locale

        return suffix


def _local_name(tag: str) -> str:
    """Strip an ``{namespace}`` prefix from an element tag."""
    return tag.rsplit('}', 1)[-1]


def _char_data(elem: ElementTree.Element) -> str:
    """Direct character data of an element: its text plus the tails of inline children."""
    parts = [elem.text or '']
    parts.extend(child.tail or '' for child in elem)
    return ''.join(parts)
