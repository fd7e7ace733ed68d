import argparse
import logging
import sys
from typing import List, Optional

from country_stats.loader import DEFAULT_DATA_PATH, DatasetError, read_country_stats
from country_stats.report import format_country_summary, format_leaders


logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "Spain"

EXIT_OK = 0
EXIT_COUNTRY_NOT_FOUND = 1
EXIT_FILE_NOT_FOUND = 2
EXIT_BAD_DATASET = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="country-stats",
        description="Summarise all-time national team statistics from a CSV file.",
    )
    parser.add_argument("--data", default=str(DEFAULT_DATA_PATH), help="path to the dataset CSV")
    parser.add_argument("--country", default=DEFAULT_COUNTRY, help="country to summarise")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        countries = read_country_stats(args.data)
    except FileNotFoundError:
        print("File not found. Please check the path to the file.")
        return EXIT_FILE_NOT_FOUND
    except DatasetError as e:
        logger.error("failed to load %s", args.data)
        print(f"An error occurred: {e}")
        return EXIT_BAD_DATASET

    country = countries.find_by_name(args.country)
    if country is None:
        print(f"Country not found: {args.country}")
        return EXIT_COUNTRY_NOT_FOUND

    print(format_country_summary(country))
    print()
    print(format_leaders(countries))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
