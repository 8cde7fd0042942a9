from __future__ import annotations
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from .client import ProgramsClient, resolve_source_url
from .dump import dump_page
from .logger import Logger, kv
from .parser import ParseResult, parse_programs
from . import db


log = Logger.bind(__name__)


class Scrape:
    """Fetch one search result page, parse it and store the eligible programs.

    client_factory: returns a context-managed object with get_listing_page(url)
    dry_run: parse and log only, no table is written
    dump_dir: when set, page HTML + parse result are written there
    """

    def __init__(self, client_factory: Callable[[], ProgramsClient] = ProgramsClient, dry_run: bool = False, dump_dir: Optional[Path] = None):
        self.client_factory = client_factory
        self.dry_run = dry_run
        self.dump_dir = Path(dump_dir) if dump_dir else None

    def run(self, url: Optional[str] = None, day: Optional[date] = None) -> ParseResult:
        url = url or resolve_source_url()
        done = log.time_block("scrape total")
        with self.client_factory() as client:
            html = client.get_listing_page(url)
        result = parse_programs(html)
        log.info(f"parsed {kv(programs=len(result.programs), located=result.located, ineligible=result.ineligible, missing_tuition=result.missing_tuition)}")
        if result.located == 0:
            log.warn(f"no program cards located url={url}")
        if self.dump_dir:
            self._dump(url, html, result)
        if self.dry_run:
            log.info("dry run, persistence skipped")
        else:
            inserted = db.bulk_insert_programs(result.programs, day)
            log.info(f"insert table={db.table_name_for(day)} records={inserted}")
        done()
        return result

    def _dump(self, url: str, html: str, result: ParseResult) -> None:
        label = f"programs_{date.today().isoformat()}"
        try:
            path = dump_page(dump_dir=self.dump_dir, label=label, url=url, html=html, result=result)
            log.debug(f"dump written path={path}")
        except OSError as e:
            log.warn(f"dump write fail dir={self.dump_dir} error={e}")
