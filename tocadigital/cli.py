"""Command line entry point: load the four input files and write the reports."""

from __future__ import annotations

import sys
from contextlib import ExitStack
from pathlib import Path
from typing import Dict, List, Optional

from .platform import Platform
from .reports import generate_reports
from .validation import InputError

_IO_ERROR = "Erro de I/O"
_FLAGS = {"g": "genres", "u": "users", "m": "media", "f": "favorites"}
_LOAD_ORDER = ("genres", "users", "media", "favorites")


def parse_arguments(argv: List[str]) -> Dict[str, str]:
    """Map ``-g``, ``-u``, ``-m`` and ``-f`` options to their file paths.

    Exactly four option and path pairs are expected, in any order; the
    option letter is the second character of the option. An unknown option
    is reported on standard output. ValueError is raised when the count is
    wrong or one of the four files is not given.
    """
    if len(argv) != 2 * len(_FLAGS):
        raise ValueError(_IO_ERROR)
    paths: Dict[str, str] = {}
    for option, path in zip(argv[::2], argv[1::2]):
        key = _FLAGS.get(option[1:2])
        if key is None:
            print(_IO_ERROR)
            continue
        paths.setdefault(key, path)
    if set(paths) != set(_FLAGS.values()):
        raise ValueError(_IO_ERROR)
    return paths


def main(argv: Optional[List[str]] = None) -> int:
    """Load the input files, write the reports in the current directory."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        paths = parse_arguments(argv)
    except ValueError:
        print(_IO_ERROR, file=sys.stderr)
        return 1

    platform = Platform("Spotify++")
    with ExitStack() as stack:
        try:
            streams = {
                key: stack.enter_context(open(paths[key], encoding="utf-8"))
                for key in _LOAD_ORDER
            }
        except OSError:
            print(_IO_ERROR, file=sys.stderr)
            return 1
        try:
            platform.load_genres(streams["genres"])
            platform.load_users(streams["users"])
            platform.load_media(streams["media"])
            platform.load_favorites(streams["favorites"])
        except InputError as error:
            print(error, file=sys.stderr)
            return 1

    generate_reports(platform, Path.cwd())
    return 0


if __name__ == "__main__":
    sys.exit(main())