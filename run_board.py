"""CLI entry point.

This script fetches the job feed, applies an optional search term, and writes
the matching jobs as a JSON list to disk.

Examples:
    python run_board.py --out jobs.json
    python run_board.py --out jobs.json --search "engineer" --limit 20
    python run_board.py --out jobs.json --id-strategy content

The output is a list of dicts in the feed's own shape plus an `id`.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from job_board.config import load_settings
from job_board.log import configure_logging, get_logger
from job_board.screens import JobsScreen
from job_board.sources.empllo import EmplloSource

log = get_logger("run_board")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch the job feed and search it.")
    p.add_argument("--out", type=str, default="jobs.json", help="Output JSON file path.")
    p.add_argument("--search", type=str, default="", help="Case-insensitive title/company filter.")
    p.add_argument("--limit", type=int, default=0, help="Max jobs to output (0 = no limit).")
    p.add_argument(
        "--id-strategy",
        choices=("random", "content"),
        default="random",
        help="How job ids are assigned: fresh random ids, or ids derived from content.",
    )
    return p.parse_args()


async def run(args: argparse.Namespace) -> int:
    settings = load_settings()
    configure_logging(settings.log_level)

    source = EmplloSource(
        base_url=settings.feed_url,
        timeout_s=settings.timeout_s,
        id_strategy=args.id_strategy,
    )
    screen = JobsScreen(source, settings=settings)
    await screen.mount()
    if screen.notice:
        print(screen.notice, file=sys.stderr)
        return 1

    screen.search_text_changed(args.search)
    jobs = screen.visible_jobs
    if args.limit > 0:
        jobs = jobs[: args.limit]

    out_path = Path(args.out).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)

    data = [j.model_dump(mode="json", by_alias=True) for j in jobs]
    out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    log.info("Search %r matched %d of %d jobs", args.search, len(screen.visible_jobs), len(screen.catalog))
    print(f"Wrote {len(data)} jobs to: {out_path}")
    return 0


def main() -> None:
    sys.exit(asyncio.run(run(parse_args())))


if __name__ == "__main__":
    main()
