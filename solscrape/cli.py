"""CLI entrypoint for solscrape."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .errors import ScrapeError
from .logging import configure_logging
from .models import AggregationResult
from .scraper import Scraper

_RULE = "═" * 64
_FILE_LIST_LIMIT = 25

_EPILOG = """\
examples:
  solscrape https://github.com/clober-dex/v2-core.git
  solscrape https://github.com/OpenZeppelin/openzeppelin-contracts.git ./output
  solscrape https://github.com/uniswap/v3-core.git -o uniswap_v3
  solscrape ./my-local-project --local -o my_contracts
  solscrape https://github.com/example/repo.git --include-lib --include-test
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solscrape",
        description="Scrape Solidity sources into a single file without comments or blank lines.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "source",
        help="Git repository URL, or a local directory path when --local is given.",
    )
    parser.add_argument(
        "destination",
        nargs="?",
        default=None,
        help="Output directory (defaults to the configured destination or the current directory).",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_name",
        metavar="NAME",
        default=None,
        help="Custom output filename (without the _scraped.sol suffix).",
    )
    parser.add_argument(
        "-l",
        "--local",
        action="store_true",
        help="Treat source as a local directory path.",
    )
    parser.add_argument("--include-lib", action="store_true", help="Include lib/ dependencies.")
    parser.add_argument("--include-test", action="store_true", help="Include test/ files.")
    parser.add_argument("--include-script", action="store_true", help="Include script/ files.")
    parser.add_argument(
        "--no-headers",
        action="store_true",
        help="Omit file separator headers in output.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress progress output (only print the result path).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"solscrape {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for solscrape."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet))

    if not args.quiet:
        _print_banner()
        print(f"Source:      {args.source}")
        print(f"Destination: {args.destination or '.'}")
        print()

    scraper = Scraper()
    try:
        result = scraper.scrape(
            args.source,
            local=bool(args.local),
            destination=args.destination,
            output_name=args.output_name,
            include_lib=bool(args.include_lib),
            include_test=bool(args.include_test),
            include_script=bool(args.include_script),
            no_headers=bool(args.no_headers),
        )
    except ScrapeError as exc:
        parser.exit(1, f"❌ Error: {exc}\n")

    if args.quiet:
        print(result.output_path)
    else:
        _print_summary(result)


def _print_banner() -> None:
    print()
    print("╔" + "═" * 63 + "╗")
    print(f"║{f'SOLSCRAPE v{__version__}  -  Solidity Scraper':^63}║")
    print("╚" + "═" * 63 + "╝")
    print()


def _print_summary(result: AggregationResult) -> None:
    print()
    print(_RULE)
    print("✅ Success!")
    print(f"   Files processed: {result.file_count}")
    print(f"   Total lines:     {result.line_count}")
    print(f"   Output:          {_relativize(result.output_path)}")
    print(_RULE)

    if result.file_count <= _FILE_LIST_LIMIT:
        print("\nFiles included:")
        for name in result.files_processed:
            print(f"  • {name}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
