"""Library for formatting extracted dependencies as output."""

from collections.abc import Generator
import json
import sys
from typing import Any, TextIO

import yaml

PADDING = 4
EMPTY_VALUE = "-"


def format_columns(
    headers: list[str], rows: list[list[str]]
) -> Generator[str, None, None]:
    """Yield the headers and rows aligned to the widest value of each column."""
    data = [headers] + rows
    if not headers:
        return
    widths = [max(len(row[i]) for row in data) + PADDING for i in range(len(headers))]
    for row in data:
        yield "".join(value.ljust(width) for value, width in zip(row, widths))


class TableFormatter:
    """A formatter that prints human readable columns of selected keys."""

    def __init__(self, keys: list[str]) -> None:
        """Initialize TableFormatter with the keys to print as columns."""
        self._keys = keys

    def format(self, data: list[dict[str, Any]]) -> Generator[str, None, None]:
        """Format the data objects, using a placeholder for missing keys."""
        if not data:
            return
        rows = [
            [
                str(value) if (value := row.get(key)) is not None else EMPTY_VALUE
                for key in self._keys
            ]
            for row in data
        ]
        yield from format_columns([key.upper() for key in self._keys], rows)

    def print(self, data: list[dict[str, Any]], file: TextIO = sys.stdout) -> None:
        """Output the data objects."""
        for line in self.format(data):
            print(line.rstrip(), file=file)


class YamlFormatter:
    """A formatter that prints a yaml list."""

    def print(self, data: list[dict[str, Any]], file: TextIO = sys.stdout) -> None:
        """Output the data objects."""
        print(yaml.dump(data, sort_keys=False, explicit_start=True), end="", file=file)


class JsonFormatter:
    """A formatter that prints a json list."""

    def print(self, data: list[dict[str, Any]], file: TextIO = sys.stdout) -> None:
        """Output the data objects."""
        json.dump(data, sort_keys=False, indent=4, fp=file)
        print(file=file)
