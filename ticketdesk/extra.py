"""Console and text helpers: CSV line parsing, string splitting, screen control."""

from __future__ import annotations

import subprocess
import sys
from typing import IO

MAX_LINE_LENGTH = 1024
MAX_FIELDS = 300

CONTINUE_PROMPT = "Presione una tecla para continuar..."


def _parse_csv_fields(line: str, separator: str) -> list[str]:
    """Split one CSV line into fields, honouring quoted fields.

    A quoted field runs until a quote that is directly followed by the
    separator. Two separators in a row are read as one. A field that ends
    with a stray quote loses it.
    """
    fields: list[str] = []
    size = len(line)
    pos = 0
    while pos < size and len(fields) < MAX_FIELDS - 1:
        if line[pos] == '"':
            start = pos + 1
            end = start
            while end < size and not (
                line[end] == '"' and line[end + 1 : end + 2] == separator
            ):
                end += 1
        else:
            start = pos
            end = line.find(separator, start)
            if end == -1:
                end = size

        if end < size:
            pos = end + 1
            if line[pos : pos + 1] == separator:
                pos += 1
        else:
            pos = size

        stop = end
        closing = pos - 2
        if start <= closing < end and line[closing] == '"':
            stop = closing
        fields.append(line[start:stop])
    return fields


def read_csv_line(file: IO[str], separator: str) -> list[str] | None:
    """Read the next line of ``file`` and return its fields.

    Returns ``None`` at end of file. At most ``MAX_LINE_LENGTH - 1``
    characters are read per call and at most ``MAX_FIELDS - 1`` fields
    are returned.
    """
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    line = file.readline(MAX_LINE_LENGTH - 1)
    if not line:
        return None
    line = line.split("\n", 1)[0]
    return _parse_csv_fields(line, separator)


def split_string(text: str, delim: str) -> list[str]:
    """Split ``text`` on any character of ``delim``, trimming spaces.

    Empty pieces between consecutive delimiters are dropped.
    """
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delim:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return [token.strip(" ") for token in tokens]


def clear_screen() -> None:
    """Clear the terminal."""
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def wait_for_key(stream: IO[str] | None = None) -> None:
    """Prompt the user and wait until a line is entered on ``stream``."""
    source = sys.stdin if stream is None else stream
    print(CONTINUE_PROMPT, flush=True)
    source.readline()