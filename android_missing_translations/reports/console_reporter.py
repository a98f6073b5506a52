"""Console summary for humans running the check locally."""

import sys
from typing import Optional, TextIO

from ..core.analyzer import AnalysisResult
from ..utils.colors import Colors


class ConsoleReporter:
    """Print a colored summary of a check run."""

    @staticmethod
    def print_summary(result: AnalysisResult, stream: Optional[TextIO] = None, limit: int = 10):
        """
        Print a short per-locale summary and the first missing strings.

        Args:
            result: Analysis result
            stream: Output stream, stderr by default so stdout keeps only the report
            limit: Maximum number of strings listed
        """
        out = stream or sys.stderr

        def emit(line: str = ''):
            print(line, file=out)

        emit()
        emit(Colors.bold('TRANSLATION COMPLETENESS'))
        emit("=" * 70)
        emit(f"Project: {result.root}")
        emit(f"Resource files: {len(result.files)}")
        emit(f"Default strings: {result.default_string_count}")
        emit()

        counts = result.missing_count_by_locale()
        if counts:
            emit(f"{'Locale':<15} {'Files':<7} {'Missing':<10} {'Completion':<15}")
            emit("-" * 70)
            for locale in sorted(counts):
                completion = ConsoleReporter._completion(result.default_string_count, counts[locale])
                file_count = len(result.files_by_locale.get(locale, []))
                emit(f"{locale:<15} {file_count:<7} {counts[locale]:<10} {ConsoleReporter._progress_bar(completion)}")
            emit()
        else:
            emit(Colors.warning("No translated locales found"))
            emit()

        if not result.has_missing:
            emit(f"{Colors.success('✓')} No missing translations found")
            return

        emit(Colors.bold(f"Missing translations ({len(result.missing_translations)})"))
        emit("-" * 70)
        for record in result.missing_translations[:limit]:
            emit(f"  {Colors.warning(record.name)}: {record.missing_locales_string}")
        if len(result.missing_translations) > limit:
            emit(f"  ... and {len(result.missing_translations) - limit} more")

    @staticmethod
    def _completion(total: int, missing: int) -> float:
        if total <= 0:
            return 100.0
        return round((total - missing) / total * 100, 1)

    @staticmethod
    def _progress_bar(percent: float, width: int = 20) -> str:
        """Completion bar colored by threshold."""
        filled = int(width * percent / 100)
        bar = '█' * filled + '░' * (width - filled)

        if percent >= 100:
            color = Colors.success
        elif percent >= 80:
            color = Colors.warning
        else:
            color = Colors.error

        return f"{color(bar)} {percent:.1f}%"
