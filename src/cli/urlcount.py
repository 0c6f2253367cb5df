import os

from configs import DESCRIPTION
from argparsers.baseparser import BaseParser
from dataservice.aggregator import FileStats, RunSummary, UrlAggregator
from dataservice.errors import UrlCountError
from utils.logging import setup_logging, get_logger


logger = get_logger(__name__)


def print_file_start(path: str) -> None:
    print(f"Processing file: {path}")


def print_file_stats(stats: FileStats) -> None:
    print(f"  - Found {stats.values_seen} URLs in file")
    print(f"  - Added {stats.new_unique} new unique URLs to the total")


def print_summary(summary: RunSummary, verbose: bool) -> None:
    if summary.mode == "directory" and summary.files_processed == 0:
        print("No parquet files found in the directory.")
        return
    if verbose:
        print("\nSummary:")
        print(f"  - Total files processed: {summary.files_processed}")
        print(f"  - Total unique URLs: {summary.unique_count}")
    elif summary.mode == "file":
        print(f"Processed 1 file, found {summary.unique_count} unique URLs")
    else:
        print(f"Processed {summary.files_processed} files, found {summary.unique_count} unique URLs")


def main(argv=None) -> int:
    parser = BaseParser(description=DESCRIPTION)
    parser.add_argument('input', metavar='INPUT', type=str, help='Input file or directory path')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose output')
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    aggregator = UrlAggregator()
    on_file = on_start = None
    if args.verbose:
        if os.path.isfile(args.input):
            print(f"Processing single file: {args.input}")
        elif os.path.isdir(args.input):
            print(f"Processing all parquet files in directory: {args.input}")
        on_file, on_start = print_file_stats, print_file_start

    try:
        summary = aggregator.process_path(args.input, progress=not args.verbose,
                                          on_file=on_file, on_start=on_start)
    except UrlCountError as e:
        logger.error(f"Error: {e}")
        return 1

    logger.debug(f"[+] Run finished: {summary.files_processed} files, {summary.unique_count} unique values")
    print_summary(summary, args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
