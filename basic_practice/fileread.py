"""Line-by-line reading of a large file, stopping after a fixed number of lines."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

DEFAULT_PATH = "./massive_file.txt"
LINE_LIMIT = 50_000


def read_file_per_line(path: str | os.PathLike, limit: int = LINE_LIMIT) -> int:
    """Print up to ``limit`` lines of ``path`` with their byte sizes; return the count printed."""
    count = 0
    with open(path, "rb") as handle:
        for raw in handle:
            if count >= limit:
                break
            text = raw.decode("utf-8")
            print(f"line={count}, buf={text}, size={len(raw)}")
            count += 1
    return count


def main(argv: Sequence[str] | None = None) -> None:
    """Read the named file, or ``./massive_file.txt`` when none is given."""
    parser = argparse.ArgumentParser(description="Print a file line by line.")
    parser.add_argument("file_name", nargs="?", default=DEFAULT_PATH, help="file to read")
    args = parser.parse_args(argv)

    print(f"Read file... {args.file_name}")
    read_file_per_line(args.file_name)


if __name__ == "__main__":
    main()