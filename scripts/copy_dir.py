"""Copy a directory tree to a destination that does not exist yet."""

from __future__ import annotations

import argparse
import sys

from dirkit.errors import DirkitError
from dirkit.fs.tree_copy import copy_dir
from dirkit.infrastructure.logger import install_exception_hooks, setup_logging
from dirkit.types import CopyReport


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    install_exception_hooks()

    parser = argparse.ArgumentParser(description="Copy a directory tree")
    parser.add_argument("src", help="Source directory")
    parser.add_argument("dest", help="Destination path (must not exist)")
    args = parser.parse_args(argv)

    report = CopyReport(success=True, source=args.src, destination=args.dest)
    try:
        stats = copy_dir(args.src, args.dest)
    except (DirkitError, OSError) as err:
        report.success = False
        report.error = str(err)
    else:
        report.directories = stats.directories
        report.files = stats.files

    print(report.model_dump_json(indent=2))

    if not report.success:
        sys.exit(1)


if __name__ == "__main__":
    main()
