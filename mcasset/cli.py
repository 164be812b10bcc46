#!/usr/bin/env python3
"""
Command-line interface for mcasset

Usage: mcasset <version> <destination>
"""

import argparse
import logging
import os
import sys

from mcasset.api import MetaError
from mcasset.extractor import ExtractionError
from mcasset.pipeline import AssetPipeline


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, "Expected arguments: <version> <destination>\n")


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_parser():
    parser = ArgumentParser(
        prog="mcasset",
        description="Download a game version's assets from launcher meta\n\n"
                    "Extracts assets/ from the client JAR, then downloads every\n"
                    "object listed in the version's asset index.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n"
               "  mcasset latest ./assets-out           # newest release\n"
               "  mcasset latest-snapshot ./snap-out    # newest snapshot\n"
               "  mcasset 1.20.4 ./1.20.4               # specific version"
    )
    parser.add_argument(
        "version",
        help="Version id, 'latest' or 'latest-snapshot'"
    )
    parser.add_argument(
        "destination",
        help="Output directory (must not exist)"
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if os.path.exists(args.destination):
        print("Output directory already exists", file=sys.stderr)
        return 1

    setup_logging()

    try:
        summary = AssetPipeline().run(args.version, args.destination)
    except (MetaError, ExtractionError) as e:
        logging.debug("Fatal error", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130

    print()
    for line in summary.lines():
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
