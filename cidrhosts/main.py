import argparse
import random
import sys
from typing import List, Optional, Sequence

from cidrhosts.core.config import settings
from cidrhosts.core.log import configure_logging
from cidrhosts.fetch.base import BaseFetcher
from cidrhosts.fetch.requests_fetcher import RequestsFetcher
from cidrhosts.schemas import ExtractionResult
from cidrhosts.services.extract import (
    process_identifier,
    process_identifier_list,
    process_identifiers,
)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cidrhosts",
        description="Extract hostnames listed for a CIDR range or IP. "
                    "Reads identifiers from stdin when neither -r nor -l is given.",
    )
    parser.add_argument("-r", dest="cidr", default="",
                        help="CIDR range to process (e.g., 127.0.0.0/24)")
    parser.add_argument("-l", dest="list_path", default="",
                        help="Path to a file containing a list of CIDR ranges")
    parser.add_argument("-silent", dest="silent", action="store_true", default=settings.SILENT,
                        help="Run in silent mode, output only results")
    return parser

def run(
    argv: Optional[Sequence[str]] = None,
    fetcher: Optional[BaseFetcher] = None,
    rng: Optional[random.Random] = None,
) -> List[ExtractionResult]:
    args = build_parser().parse_args(argv)
    configure_logging(silent=args.silent)

    if fetcher is None:
        fetcher = RequestsFetcher(rng=rng)

    if args.cidr:
        return [process_identifier(args.cidr, fetcher)]
    if args.list_path:
        return process_identifier_list(args.list_path, fetcher)

    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(errors="replace")
    return process_identifiers(sys.stdin, fetcher)

def main() -> None:
    run()

if __name__ == "__main__":
    main()
