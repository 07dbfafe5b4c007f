"""Export command: list the source folder and write Markdown files."""

from __future__ import annotations

import logging

from ..core import get_token, load_config, run_export

logger = logging.getLogger(__name__)


def cmd_export(args) -> int:
    """Run one full export pass.

    Fatal errors propagate to the caller; per-document failures are listed
    after the summary and do not change the exit status.
    """

    config = load_config(debug=args.debug)
    # Checked before any request is made.
    token = get_token()

    summary = run_export(config, token)

    out_dir = config.out_dir.resolve()
    print(f"Exported {len(summary.exported)}/{summary.total} documents to {out_dir}")
    if summary.skipped:
        logger.debug("Skipped %d non-Paper files", len(summary.skipped))
    if summary.errors:
        print(f"Errors ({len(summary.errors)}):")
        for path, err in summary.errors[:10]:
            print(f"  {path}: {err}")
        if len(summary.errors) > 10:
            print(f"  ... and {len(summary.errors)-10} more")
    return 0
