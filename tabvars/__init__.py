"""
tabvars
Aligned tables of build variables, and a script mode that shows the
important ones from a nearby CMakeCache.txt
"""

__version__ = "1.0.0"

from .tabulator import TabulationRequest, format_table, parse_tabulation_args, tabulate_variables
from .cache_scraper import CacheEntry, ScrapeResult, extract_variables, parse_cache, scrape_cache
from .exceptions import TabvarsError, TabulationError, ConfigError

__all__ = [
    "tabulate_variables",
    "format_table",
    "parse_tabulation_args",
    "TabulationRequest",
    "scrape_cache",
    "parse_cache",
    "extract_variables",
    "CacheEntry",
    "ScrapeResult",
    "TabvarsError",
    "TabulationError",
    "ConfigError",
    "__version__",
]
