"""Listing the entries of a directory, including "." and ".."."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterator, Sequence
from itertools import chain
from typing import AnyStr, Generic, Union


class DirectoryIterator(Generic[AnyStr]):
    """Iterates over the names in a directory, "." and ".." first.

    The directory stays open until the iterator is exhausted or closed.
    """

    def __init__(self, path: Union[str, bytes, os.PathLike]) -> None:
        self.path = os.fspath(path)
        try:
            self._scandir = os.scandir(self.path)
        except ValueError as err:
            raise ValueError(f"Invalid path: {err}") from err
        except OSError as err:
            raise OSError(err.errno, f"Could not open {self.path!r}", self.path) from err
        dots = (b".", b"..") if isinstance(self.path, bytes) else (".", "..")
        self._entries: Iterator = chain(dots, (entry.name for entry in self._scandir))
        self._closed = False

    def __iter__(self) -> DirectoryIterator[AnyStr]:
        return self

    def __next__(self) -> AnyStr:
        try:
            return next(self._entries)
        except StopIteration:
            self.close()
            raise

    def close(self) -> None:
        """Close the directory; further iteration yields nothing."""
        if not self._closed:
            self._closed = True
            self._scandir.close()
            self._entries = iter(())

    def __enter__(self) -> DirectoryIterator[AnyStr]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        if hasattr(self, "_scandir"):
            self.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the entries of a directory."""
    parser = argparse.ArgumentParser(description="List a directory.")
    parser.add_argument("path", nargs="?", default=".")
    args = parser.parse_args(argv)
    try:
        with DirectoryIterator(args.path) as entries:
            files = list(entries)
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    print(f"files: {files!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())