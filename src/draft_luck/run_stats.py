"""Compute member draft statistics from a history export.

Usage:
    python -m src.draft_luck.run_stats history_file [output_file]

Examples:
    python -m src.draft_luck.run_stats data/history.json
    python -m src.draft_luck.run_stats data/history.json data/stats/members.json

A bare output file name (no directory) is placed under ``data/stats/``.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from src.draft_luck.config import OUTPUT_DIR
from src.draft_luck.ingestion import HistoryIngester
from src.draft_luck.member_stats import get_member_stats, stats_to_frame
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def run_stats(
    history_file: Path,
    output_file: Path | None = None,
) -> list[dict]:
    """Read a draft history, score every member and optionally save the result.

    Args:
        history_file: JSON file with ``members`` and ``drafts``.
        output_file: Where to write the JSON result. Nothing is written
            when omitted.

    Returns:
        The member records as plain dicts, in roster order.

    Raises:
        FileNotFoundError: If the history file doesn't exist.
        IngestionError: If the history file can't be parsed.
    """
    if output_file is not None:
        output_file = Path(output_file)

    logger.info("Step 1/3: Reading draft history...")
    members, drafts = HistoryIngester(history_file).read()

    logger.info("Step 2/3: Scoring %d members...", len(members))
    stats = get_member_stats(members, drafts)
    records = [s.to_dict() for s in stats]

    logger.info("Step 3/3: Reporting...")
    print(stats_to_frame(stats).to_string(index=False))

    if output_file is not None:
        if output_file.parent == Path("."):
            output_file = OUTPUT_DIR / output_file
        output_data = {
            "metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "source": str(history_file),
                "total_members": len(members),
                "total_drafts": len(drafts),
            },
            "members": records,
        }
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(output_data, f, indent=2)
        logger.info("Wrote member statistics to %s", output_file)

    unscored = sum(1 for s in stats if not s.is_applicable)
    if unscored:
        logger.info("  %d member(s) with no attended drafts", unscored)

    return records


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    history_file = Path(sys.argv[1])
    output_file = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        run_stats(history_file, output_file)
    except Exception:
        logger.exception("Statistics run failed")
        sys.exit(1)
