"""Programme listing scraper.

Submodules are not imported at package-import time; import them
explicitly (for example ``from admissions_scrape.parser import parse_programs``)
or use the lazy names below.
"""

__all__ = ["Program", "ParseResult", "parse_programs", "Scrape"]


def __getattr__(name: str):  # pragma: no cover - thin shim
    if name in __all__:
        from admissions_scrape.models import Program
        from admissions_scrape.parser import ParseResult, parse_programs
        from admissions_scrape.scrape import Scrape
        mapping = {
            'Program': Program,
            'ParseResult': ParseResult,
            'parse_programs': parse_programs,
            'Scrape': Scrape,
        }
        return mapping[name]
    raise AttributeError(name)
