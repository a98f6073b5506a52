"""GitHub Actions step outputs."""

import os
import sys
import uuid
from pathlib import Path
from typing import Optional, TextIO


def escape_command_value(value: str) -> str:
    """Escape a value for the legacy ``::set-output`` workflow command."""
    value = value.replace('%', '%25')
    value = value.replace('\r', '%0D')
    value = value.replace('\n', '%0A')
    value = value.replace(':', '%3A')
    value = value.replace(',', '%2C')
    return value


def set_github_output(key: str, value: str, stream: Optional[TextIO] = None) -> None:
    """
    Publish a step output.

    Appends a multi-line ``key<<DELIMITER`` block to the file named by
    ``GITHUB_OUTPUT`` when the runner provides one, otherwise prints the
    legacy ``::set-output`` command followed by a blank line.

    Args:
        key: Output name, e.g. ``report``
        value: Output value, may span lines
        stream: Stream for the legacy command, stdout by default
    """
    output_file = os.environ.get('GITHUB_OUTPUT')

    if output_file:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with open(Path(output_file), 'a', encoding='utf-8') as f:
            f.write(f"{key}<<{delimiter}\n{value}\n{delimiter}\n")
        return

    out = stream or sys.stdout
    print(f"::set-output name={key}::{escape_command_value(value)}", file=out)
    print(file=out)
