from __future__ import annotations
"""Page dump helper.

`dump_page` persists the fetched HTML plus the parse result for diagnostics
and for turning a broken page into a regression fixture.
"""
import json
from pathlib import Path
from datetime import datetime, timezone
from typing import Any


def dump_page(*, dump_dir: Path, label: str, url: str, html: str, result: Any, snippet_bytes: int = 8000, write_full_html: bool = True) -> Path:
    dump_dir = Path(dump_dir)
    dump_dir.mkdir(parents=True, exist_ok=True)
    out_path = dump_dir / f"{label}.json"
    if write_full_html:
        (dump_dir / f"{label}.html").write_text(html, encoding='utf-8', errors='replace')
    items = [p.to_db_row() for p in getattr(result, 'programs', ())]
    payload = {
        'url': url,
        'fetched_at': datetime.now(timezone.utc).isoformat(),
        'html_length': len(html),
        'html_snippet': html[:snippet_bytes],
        'located': getattr(result, 'located', None),
        'ineligible': getattr(result, 'ineligible', None),
        'missing_tuition': getattr(result, 'missing_tuition', None),
        'records_count': len(items),
        'records': items,
    }
    out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding='utf-8')
    return out_path
