"""Command line entry point for paper-export."""

from __future__ import annotations

import argparse
import sys

from paper_export import __version__
from paper_export.commands import cmd_export
from paper_export.core import PaperExportError, setup_logging


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="paper-export",
        description="Export Dropbox Paper docs to Markdown, mirroring the folder tree",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    setup_logging(args.debug)
    try:
        return cmd_export(args)
    except PaperExportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\nCancelled by user", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
