"""
CMake cache discovery and extraction
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

CACHE_FILE_NAME = "CMakeCache.txt"

CANDIDATE_SUBDIRS = ("build", ".")

# Entry types a cache line may carry
CACHE_TYPES = frozenset(["FILEPATH", "STRING", "PATH", "BOOL", "INTERNAL", "STATIC"])

VERSION_PARTS = (
    "CMAKE_CACHE_MAJOR_VERSION",
    "CMAKE_CACHE_MINOR_VERSION",
    "CMAKE_CACHE_PATCH_VERSION",
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """One NAME:TYPE=VALUE line of a cache file"""
    name: str
    type: str
    value: str


@dataclass
class ScrapeResult:
    """Outcome of a cache search"""
    source_dir: Path
    binary_dir: Path
    cache_file: Optional[Path] = None
    variables: Dict[str, str] = field(default_factory=dict)
    cache_version: Optional[str] = None

    def scope(self) -> Dict[str, str]:
        """
        Variables visible to the tabulator

        Seeds the values CMake itself would define when running a script
        (source and binary directories, and the version recorded in the
        cache), then layers the extracted variables on top.
        """
        scope = {
            "CMAKE_SOURCE_DIR": str(self.source_dir),
            "CMAKE_BINARY_DIR": str(self.binary_dir),
        }
        if self.cache_version:
            scope["CMAKE_VERSION"] = self.cache_version
        scope.update(self.variables)
        return scope


def _split_key(line: str):
    """Split off the key, honouring CMake's quoting of keys containing ':'"""
    if line.startswith('"'):
        end = line.find('"', 1)
        if end == -1 or line[end + 1:end + 2] != ":":
            return None, None
        return line[1:end], line[end + 2:]
    key, sep, rest = line.partition(":")
    if not sep:
        return None, None
    return key, rest


def parse_cache(text: str) -> List[CacheEntry]:
    """
    Parse cache file content into entries

    Blank lines, comments and lines whose type is not a known cache type
    are skipped. Values run to the end of their line.

    Args:
        text: Full cache file content

    Returns:
        Entries in file order
    """
    entries = []
    for line in text.splitlines():
        if not line or line.startswith("//") or line.startswith("#"):
            continue
        key, rest = _split_key(line)
        if not key:
            continue
        entry_type, sep, value = rest.partition("=")
        if not sep or entry_type not in CACHE_TYPES:
            continue
        entries.append(CacheEntry(name=key, type=entry_type, value=value))
    return entries


def extract_variables(text: str, names: Iterable[str]) -> Dict[str, str]:
    """
    Look up names in cache file content

    The first entry for a name wins. Names not present are left out.

    Args:
        text: Full cache file content
        names: Names to look up

    Returns:
        Mapping of found names to their values
    """
    wanted = set(names)
    found: Dict[str, str] = {}
    for entry in parse_cache(text):
        if entry.name in wanted and entry.name not in found:
            found[entry.name] = entry.value
    return found


def candidate_directories(source_dir: Path,
                          subdirs: Sequence[str] = CANDIDATE_SUBDIRS) -> List[Path]:
    """Directories searched for the cache file, in order"""
    source_dir = Path(source_dir)
    return [source_dir if subdir in ("", ".") else source_dir / subdir for subdir in subdirs]


def find_cache_file(source_dir: Path,
                    binary_dir: Optional[Path] = None,
                    subdirs: Sequence[str] = CANDIDATE_SUBDIRS,
                    cache_file_name: str = CACHE_FILE_NAME) -> Tuple[Optional[Path], Path]:
    """
    Search candidate directories for a cache file

    An existing candidate directory becomes the binary directory guess; the
    cache file is then looked for in the current guess. The first file found
    wins.

    Args:
        source_dir: Project root
        binary_dir: Initial binary directory guess (source_dir if None)
        subdirs: Candidate directories relative to source_dir
        cache_file_name: Cache file name

    Returns:
        Tuple of (cache file path or None, final binary directory guess)
    """
    guess = Path(binary_dir) if binary_dir else Path(source_dir)
    for candidate in candidate_directories(source_dir, subdirs):
        if candidate.is_dir():
            guess = candidate
        cache_file = guess / cache_file_name
        logger.debug(f"Looking for cache file: {cache_file}")
        if cache_file.is_file():
            return cache_file, guess
    return None, guess


def read_cache(cache_file: Path) -> str:
    """Read the whole cache file"""
    with open(cache_file, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def scrape_cache(source_dir: Path,
                 names: Sequence[str],
                 binary_dir: Optional[Path] = None,
                 subdirs: Sequence[str] = CANDIDATE_SUBDIRS,
                 cache_file_name: str = CACHE_FILE_NAME) -> ScrapeResult:
    """
    Find the nearby cache file and extract the given variables

    A missing cache file is not an error; the result then has no variables.
    """
    source_dir = Path(source_dir)
    cache_file, guess = find_cache_file(source_dir, binary_dir, subdirs, cache_file_name)
    result = ScrapeResult(source_dir=source_dir, binary_dir=guess, cache_file=cache_file)
    if cache_file is None:
        logger.debug(f"No {cache_file_name} found under {source_dir}")
        return result

    text = read_cache(cache_file)
    result.variables = extract_variables(text, names)

    parts = extract_variables(text, VERSION_PARTS)
    if all(parts.get(part) for part in VERSION_PARTS):
        result.cache_version = ".".join(parts[part] for part in VERSION_PARTS)

    logger.debug(f"Extracted {len(result.variables)} variables from {cache_file}")
    return result
