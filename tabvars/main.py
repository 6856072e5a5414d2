#!/usr/bin/env python3
"""
Script-mode entry point: show important variables from a nearby CMakeCache.txt
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .cache_scraper import scrape_cache
from .config import ConfigLoader
from .exceptions import TabvarsError
from .tabulator import TITLE_MARKER, parse_tabulation_args, tabulate_variables
from .utils import Logger


def script_name(script_path: str) -> str:
    """
    Name of the invoking script without directory or extension

    ``python -m tabvars`` runs ``tabvars/__main__.py``; the package
    directory name is used in that case.
    """
    path = Path(script_path)
    if path.stem == "__main__":
        return path.resolve().parent.name
    return path.stem


def run_title(script_path: str) -> str:
    """Title of a script-mode run"""
    return f"{script_name(script_path)} running in script mode - displaying important CMake variables"


def resolve_source_dir(source_dir: Optional[Path] = None) -> Path:
    """Project root: explicit argument, then $CMAKE_SOURCE_DIR, then cwd"""
    if source_dir:
        return Path(source_dir)
    env_dir = os.environ.get("CMAKE_SOURCE_DIR")
    if env_dir:
        return Path(env_dir)
    return Path.cwd()


def run_script_mode(config: ConfigLoader,
                    logger: Logger,
                    script_path: str,
                    source_dir: Optional[Path] = None,
                    binary_dir: Optional[Path] = None,
                    names: Optional[Sequence[str]] = None,
                    indent: Optional[int] = None) -> str:
    """
    Scrape the nearby cache file and tabulate the important variables

    Args:
        config: Loaded configuration
        logger: Status channel
        script_path: Path of the invoking script, used for the title
        source_dir: Project root (see resolve_source_dir)
        binary_dir: Initial binary directory guess
        names: ``[TITLE title] NAME...`` replacing the configured list
        indent: Row indent, overriding the configuration

    Returns:
        The emitted table text
    """
    title = run_title(script_path)
    if names:
        request = parse_tabulation_args(names)
        if request.title is not None:
            title = request.title
        variables = list(request.names)
    else:
        variables = config.get_important_variables()

    root = resolve_source_dir(source_dir)
    logger.debug(f"Project root: {root}")

    result = scrape_cache(
        root,
        variables,
        binary_dir=binary_dir,
        subdirs=config.get_candidate_subdirs(),
        cache_file_name=config.get_cache_file_name(),
    )
    if result.cache_file is not None:
        title = f"{title} from cache file {result.cache_file}"

    return tabulate_variables(
        TITLE_MARKER, title, *variables,
        scope=result.scope(),
        logger=logger,
        min_width=config.get_min_width(),
        indent=config.get_indent() if indent is None else indent,
    )


def build_parser() -> argparse.ArgumentParser:
    """Command-line parser for script mode"""
    parser = argparse.ArgumentParser(
        prog="tabvars",
        description="Display important CMake variables from a nearby CMakeCache.txt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Look in ./build, then .
  %(prog)s --source-dir ~/src/project       # Look under another project root
  %(prog)s CMAKE_BUILD_TYPE CMAKE_CXX_FLAGS # Show other variables
  %(prog)s TITLE "Flags:" CMAKE_CXX_FLAGS   # ... with a custom title
        """
    )

    parser.add_argument(
        "names",
        nargs="*",
        help="Variables to show instead of the configured list ([TITLE title] NAME...)"
    )

    parser.add_argument(
        "--source-dir",
        type=Path,
        help="Project root (default: $CMAKE_SOURCE_DIR or the current directory)"
    )

    parser.add_argument(
        "--binary-dir",
        type=Path,
        help="Initial binary directory guess (default: the project root)"
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Directory containing defaults.yaml"
    )

    parser.add_argument(
        "--indent",
        type=int,
        help="Extra spaces in front of every row"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Command-line interface"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.indent is not None and args.indent < 0:
        parser.error("--indent must not be negative")

    try:
        config = ConfigLoader(args.config)
    except TabvarsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger = Logger(verbose=args.verbose)

    try:
        run_script_mode(
            config,
            logger,
            script_path=sys.argv[0],
            source_dir=args.source_dir,
            binary_dir=args.binary_dir,
            names=args.names,
            indent=args.indent,
        )
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except TabvarsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logging.error(f"tabvars error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
