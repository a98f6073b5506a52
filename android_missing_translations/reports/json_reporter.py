"""JSON report generator."""

import json
from pathlib import Path
from typing import Sequence

from ..core.analyzer import MissingTranslation
from ..utils.logging import get_logger

logger = get_logger('reports.json')


class JSONReporter:
    """Render missing translations as a JSON array."""

    @staticmethod
    def render(records: Sequence[MissingTranslation], pretty: bool = True) -> str:
        """
        Render records as JSON.

        Output shape:
            [{"name": "...", "value": "...", "missing_locales": ["de", "fr"]}]

        Args:
            records: Missing translation records
            pretty: Indent with two spaces

        Returns:
            JSON text (``[]`` when there are no records)
        """
        data = [record.to_dict() for record in records]
        if pretty:
            return json.dumps(data, indent=2, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)

    @staticmethod
    def generate(records: Sequence[MissingTranslation], output_path: Path, pretty: bool = True) -> Path:
        """Write the JSON report to a file and return its path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(JSONReporter.render(records, pretty=pretty))
            f.write('\n')

        logger.info("JSON report: %s", output_path)
        return output_path
