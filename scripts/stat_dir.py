"""List the entries below a directory, depth-first."""

from __future__ import annotations

import argparse
import sys

from dirkit.errors import DirkitError
from dirkit.fs.listing import stat_dir
from dirkit.infrastructure.logger import install_exception_hooks, setup_logging
from dirkit.types import StatReport


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    install_exception_hooks()

    parser = argparse.ArgumentParser(description="List directory entries relative to a root")
    parser.add_argument("dir", help="Directory to list")
    parser.add_argument("--include-dirs", action="store_true", help="Also list subdirectories, suffixed with '/'")
    args = parser.parse_args(argv)

    try:
        entries = stat_dir(args.dir, include_dirs=args.include_dirs)
    except (DirkitError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        sys.exit(1)

    report = StatReport(path=args.dir, include_dirs=args.include_dirs, entries=entries)
    print(report.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
