"""Markdown report generator, suited to PR comments."""

from pathlib import Path
from typing import List, Sequence

from ..core.analyzer import MissingTranslation
from ..utils.logging import get_logger

logger = get_logger('reports.markdown')

DEFAULT_TITLE = "Missing Translations"
FOOTER = "_Generated using [Android Missing Translations][1]._"
FOOTER_LINK = "[1]: https://github.com/ashutoshgngwr/android-missing-translations"


class MarkdownReporter:
    """Render missing translations as a Markdown document with one table."""

    HEADERS = ['#', 'Name', 'Default Value', 'Missing Locales']

    @staticmethod
    def render(records: Sequence[MissingTranslation], title: str = DEFAULT_TITLE) -> str:
        """
        Render records as Markdown.

        Args:
            records: Missing translation records
            title: Level-one heading

        Returns:
            Markdown text
        """
        lines = [f"# {title}", ""]

        if not records:
            lines.append("No missing translations found.")
        else:
            lines.extend(MarkdownReporter.render_table(records))

        lines.extend(["", FOOTER, "", FOOTER_LINK, ""])
        return '\n'.join(lines)

    @staticmethod
    def render_table(records: Sequence[MissingTranslation]) -> List[str]:
        """Table lines for the records, header included."""
        rows = [
            [
                str(i),
                f"`{_escape_cell(record.name)}`",
                _escape_cell(record.value),
                _escape_cell(record.missing_locales_string),
            ]
            for i, record in enumerate(records, 1)
        ]

        widths = [len(header) for header in MarkdownReporter.HEADERS]
        for row in rows:
            widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

        def format_row(cells: List[str]) -> str:
            padded = [cell.ljust(width) for cell, width in zip(cells, widths)]
            return "| " + " | ".join(padded) + " |"

        lines = [
            format_row(MarkdownReporter.HEADERS),
            "|" + "|".join("-" * (width + 2) for width in widths) + "|",
        ]
        lines.extend(format_row(row) for row in rows)
        return lines

    @staticmethod
    def generate(
        records: Sequence[MissingTranslation],
        output_path: Path,
        title: str = DEFAULT_TITLE
    ) -> Path:
        """Write the Markdown report to a file and return its path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(MarkdownReporter.render(records, title=title))

        logger.info("Markdown report: %s", output_path)
        return output_path


def _escape_cell(text: str) -> str:
    """Keep a value inside one table cell."""
    text = text.replace('\\', '\\\\').replace('|', '\\|')
    text = text.replace('\r\n', '\n').replace('\r', '\n')
    return text.replace('\n', '<br>')
