"""Command line access to FRED categories, series and observations."""

import argparse
import logging
from datetime import date

from fred_graph.data.client import Fred
from fred_graph.data.mapping import parse_fred_date
from fred_graph.exceptions import ConfigurationError, FredError, ParseError, ServiceError
from fred_graph.models import Category, FileType, ObservationQuery, Series, SeriesSearchQuery


logger = logging.getLogger(__name__)


def _date_arg(value: str) -> date:
    try:
        return parse_fred_date(value)
    except ParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _print_category(category: Category) -> None:
    print(f"{category.id:8} | {category.name} (parent {category.parent_id})")


def _print_series(series: Series) -> None:
    print(
        f"{series.id:20} | {series.frequency.name:9} | "
        f"{series.observation_start} - {series.observation_end} | {series.title}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse FRED economic data")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every request (API key masked)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    category = commands.add_parser("category", help="Show a category")
    category.add_argument("category_id", type=int, nargs="?", default=0)

    children = commands.add_parser("children", help="List child categories")
    children.add_argument("category_id", type=int, nargs="?", default=0)

    series = commands.add_parser("series", help="Show a series")
    series.add_argument("series_id")

    observations = commands.add_parser("observations", help="Print observations")
    observations.add_argument("series_id")
    observations.add_argument("--start", type=_date_arg, default=None, help="YYYY-MM-DD")
    observations.add_argument("--end", type=_date_arg, default=None, help="YYYY-MM-DD")

    search = commands.add_parser("search", help="Full-text series search")
    search.add_argument("text")
    search.add_argument("--limit", type=int, default=20)

    download = commands.add_parser("download", help="Save observations to a file")
    download.add_argument("series_id")
    download.add_argument(
        "--file-type",
        choices=[t.value for t in FileType],
        default=FileType.TEXT.value,
    )
    download.add_argument("-o", "--output", default=None, help="Output path (default: <series_id>)")

    return parser


def run(args: argparse.Namespace, fred: Fred) -> None:
    if args.command == "category":
        category = fred.get_category(args.category_id)
        _print_category(category)
        if category.notes:
            print(category.notes)

    elif args.command == "children":
        for child in fred.get_category_children(args.category_id):
            _print_category(child)

    elif args.command == "series":
        series = fred.get_series(args.series_id)
        print(f"{series.id}: {series.title}")
        print(f"  Units:        {series.units}")
        print(f"  Frequency:    {series.frequency.name}")
        print(f"  Seasonal adj: {'yes' if series.seasonal_adjusted else 'no'}")
        print(f"  Observations: {series.observation_start} - {series.observation_end}")
        print(f"  Updated:      {series.last_updated}")
        print(f"  Popularity:   {series.popularity}")

    elif args.command == "observations":
        query = ObservationQuery(observation_start=args.start, observation_end=args.end)
        observations = fred.get_all_series_observations(args.series_id, query)
        for obs in observations:
            value = "." if obs.value is None else f"{obs.value:g}"
            print(f"{obs.date}  {value}")
        print(f"\n{len(observations)} observations")

    elif args.command == "search":
        for series in fred.search_series(args.text, SeriesSearchQuery(limit=args.limit)):
            _print_series(series)

    elif args.command == "download":
        path = fred.download_series_observations(
            args.series_id,
            FileType(args.file_type),
            args.output or args.series_id,
        )
        print(f"Saved to: {path}")
        print(f"File size: {path.stat().st_size / 1024:.1f} KB")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        fred = Fred()
    except ConfigurationError as e:
        print(f"Error: {e}")
        raise SystemExit(1)

    with fred:
        try:
            run(args, fred)
        except ServiceError as e:
            print(f"FRED error: {e.message}")
            raise SystemExit(1)
        except FredError as e:
            logger.error(f"Request failed: {e}")
            raise SystemExit(1)


if __name__ == "__main__":
    main()
