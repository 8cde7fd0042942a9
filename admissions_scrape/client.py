from __future__ import annotations
"""HTTP client for the programme search page."""

import time
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests

from .logger import Logger


log = Logger.bind(__name__)

DEFAULT_SOURCE_URL = (
    "https://www.universityadmissions.se/intl/search?type=programs&advancedLevel=true&period=27"
    "&sortBy=creditAsc&subjects=120-&subjects=130-40-&subjects=130-180-&subjects=130-50-"
    "&numberOfFetchedPages=2"
)

_CONFIG_JSON_PATH = Path(__file__).resolve().parent.parent / 'config.json'


def resolve_source_url(config_path: Optional[Path] = None) -> str:
    """`url` from config.json when present, else DEFAULT_SOURCE_URL."""
    path = config_path or _CONFIG_JSON_PATH
    if not path.exists():
        return DEFAULT_SOURCE_URL
    try:
        with path.open('r', encoding='utf-8') as f:
            cfg = json.load(f) or {}
    except (OSError, ValueError) as e:
        log.warn(f"config.json load fail path={path} error={e}")
        return DEFAULT_SOURCE_URL
    url = cfg.get('url') if isinstance(cfg, dict) else None
    if isinstance(url, str) and url.strip():
        return url.strip()
    return DEFAULT_SOURCE_URL


@dataclass
class ProgramsClientConfig:
    timeout: float = 30.0
    user_agent: str = ("Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
                       "(KHTML, like Gecko) Chrome/125.0 Safari/537.36")
    referrer: str = "https://www.google.com"


class ProgramsClient:

    def __init__(self, config: Optional[ProgramsClientConfig] = None):
        self.config = config or ProgramsClientConfig()
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": self.config.user_agent,
            "Referer": self.config.referrer,
            "Accept-Language": "en-US,en;q=0.9,sv;q=0.8",
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        })

    def get_listing_page(self, url: Optional[str] = None) -> str:
        url = url or resolve_source_url()
        start = time.time()
        log.debug(f"http get start url={url}")
        resp = self.session.get(url, timeout=self.config.timeout)
        elapsed = time.time() - start
        log.debug(f"http get done url={url} final={resp.url} elapsed={elapsed:.2f}s status={resp.status_code}")
        resp.raise_for_status()
        if not resp.encoding or resp.encoding.lower() == 'iso-8859-1':
            # charset missing from the header
            resp.encoding = 'utf-8'
        return resp.text

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


__all__ = ["ProgramsClient", "ProgramsClientConfig", "DEFAULT_SOURCE_URL", "resolve_source_url"]
