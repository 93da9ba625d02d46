"""A small grep: print the lines of a file that contain a query."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


def _lines(content: str) -> list[str]:
    lines = [line.removesuffix("\r") for line in content.split("\n")]
    if content.endswith("\n"):
        lines.pop()
    return lines


def search(query: str, content: str) -> list[str]:
    """Return the lines of content that contain query."""
    return [line for line in _lines(content) if query in line]


def search_case_insensitive(query: str, content: str) -> list[str]:
    """Return the lines of content that contain query, ignoring case."""
    query = query.lower()
    return [line for line in _lines(content) if query in line.lower()]


@dataclass
class Config:
    """What to search for, where, and whether case matters."""

    query: str
    file_path: str
    ignore_case: bool = False

    @classmethod
    def build(cls, args: Iterable[str]) -> Config:
        """Build from command-line arguments, the program name first.

        Case is ignored when the IGNORE_CASE environment variable is set.
        """
        items = iter(args)
        next(items, None)
        query = next(items, None)
        if query is None:
            raise ValueError("Didn't get a query string")
        file_path = next(items, None)
        if file_path is None:
            raise ValueError("Didn't get a file_path string")
        return cls(query, file_path, "IGNORE_CASE" in os.environ)


def run(config: Config) -> None:
    """Search the configured file and print every matching line."""
    content = Path(config.file_path).read_text(encoding="utf-8")
    finder = search_case_insensitive if config.ignore_case else search
    for line in finder(config.query, content):
        print(line)


def main(argv: list[str] | None = None) -> int:
    """Command entry point; returns the process exit status."""
    args = sys.argv if argv is None else ["minigrep", *argv]
    try:
        config = Config.build(args)
    except ValueError as err:
        print(f"Problem parsing arguments: {err}", file=sys.stderr)
        return 1
    try:
        run(config)
    except (OSError, UnicodeDecodeError) as err:
        print(f"Application error: {err}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())