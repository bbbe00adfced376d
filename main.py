"""
dirsize
=======

A simple command line utility to calculate the total size of a directory
and its subdirectories.

Features:
- Single pass directory walk using os.scandir
- Optional exclusion of paths listed in the root .gitignore
- Prints the total in B, KB, MB, GB or TB with two decimals

Usage:
    python main.py PATH [-g]
    dirsize PATH [--gitignore]
"""
import argparse
import logging
import sys

from errors import DirSizeError
from formatting import format_size
from scanner import measure

logger = logging.getLogger("dirsize")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="dirsize",
        description="a simple command line utility to calculate the total size "
                    "of a directory and its subdirectories",
    )
    parser.add_argument("path", help="Directory to measure")
    parser.add_argument("-g", "--gitignore", action="store_true",
                        help="Ignore paths in .gitignore (if it exists)")
    return parser


def setup_logging():
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        report = measure(args.path, use_gitignore=args.gitignore)
    except DirSizeError as e:
        logger.error("%s", e)
        return 1

    print(format_size(report.total))
    return 0


if __name__ == "__main__":
    sys.exit(main())
