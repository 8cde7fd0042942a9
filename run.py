"""Entry point: scrape the programme search page into today's table.

Usage:
    python run.py                         # default URL (or config.json "url")
    python run.py --dry-run --debug       # parse + log only
    python run.py --date 2025-09-01 --dump-dir dumps

Persistence backend: DB_BACKEND=postgres (default) | sqlite
"""

from __future__ import annotations

import argparse
import logging
from datetime import date
from typing import List, Optional

from admissions_scrape.logger import Logger, setup_logging
from admissions_scrape.scrape import Scrape


log = Logger.bind(__name__)


class App:

    def __init__(self, argv: Optional[List[str]] = None):
        self.args = self.parse_args(argv)

    @staticmethod
    def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
        ap = argparse.ArgumentParser(description="Scrape university programme listings")
        ap.add_argument('--url', type=str, default=None, help='Search page URL (default: config.json url or built-in)')
        ap.add_argument('--date', type=date.fromisoformat, default=None, help='Table date YYYY-MM-DD (default: today)')
        ap.add_argument('--dry-run', action='store_true', help='Parse only, do not write to the database')
        ap.add_argument('--dump-dir', type=str, default=None, help='Write page HTML + parsed records here')
        ap.add_argument('--debug', action='store_true', help='DEBUG log level')
        return ap.parse_args(argv)

    def run(self) -> int:
        setup_logging(logging.DEBUG if self.args.debug else logging.INFO)
        try:
            scraper = Scrape(dry_run=self.args.dry_run, dump_dir=self.args.dump_dir)
            scraper.run(url=self.args.url, day=self.args.date)
        except Exception as e:  # noqa: BLE001
            log.exception(f"scrape failed error={e}")
            return 1
        log.info("Done.")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    return App(argv).run()


if __name__ == "__main__":
    raise SystemExit(main())
