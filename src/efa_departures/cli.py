"""efa-m: departure monitor for EFA endpoints on the command line."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import NoReturn

import aiohttp

from efa_departures import __version__
from efa_departures.adapters.config import AppConfig
from efa_departures.adapters.efa_api import EfaDepartureMonitor, EfaHttpClient
from efa_departures.adapters.terminal import TableRenderer
from efa_departures.application.services import (
    BoardOptions,
    DepartureBoardService,
    QueryParameterResolver,
    split_filter_values,
)
from efa_departures.domain.errors import EmptyResultError, RequestError, UsageError
from efa_departures.domain.models import DisplayRow, RequestDescriptor
from efa_departures.domain.ports import DepartureMonitor

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_REQUEST_ERROR = 2
EXIT_NOTHING_TO_SHOW = 3

USAGE = (
    "efa-m [-d <dd.mm.yyyy>] [-t <hh:mm>] [-l <lines>] [-p <platforms>] [-L] [-r]\n"
    "             [-u <efa-url>] <city> [<type>:]<name>"
)


class CliArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad invocations as UsageError."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> CliArgumentParser:
    """Build the efa-m argument parser."""
    parser = CliArgumentParser(
        prog="efa-m",
        usage=USAGE,
        description="Show upcoming departures (or the lines) at a stop, address or "
        "point of interest, as reported by an EFA departure monitor.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Departures at Essen Hbf
  efa-m Essen Hbf

  # Only lines 18 and RE1, countdown instead of times
  efa-m -r -l 18,RE1 Essen Hbf

  # Lines serving a point of interest
  efa-m -L Düsseldorf poi:Hauptbahnhof

  # National rail platform 1 tomorrow morning
  efa-m -d 17.10. -t 08:00 -p "1 (DB)" Essen Hbf
        """,
    )
    parser.add_argument("-d", "--date", metavar="dd.mm.yyyy", help="departure date")
    parser.add_argument("-t", "--time", metavar="hh:mm", help="departure time")
    parser.add_argument(
        "-l",
        "--line",
        action="append",
        metavar="lines",
        help="only show these lines (comma-separated, may be repeated)",
    )
    parser.add_argument(
        "-L",
        "--linelist",
        action="store_true",
        help="list lines serving the location instead of departures",
    )
    parser.add_argument(
        "-p",
        "--platform",
        action="append",
        metavar="platforms",
        help='only show these platforms (comma-separated, may be repeated); '
        'national rail platforms are written like "1 (DB)"',
    )
    parser.add_argument(
        "-r",
        "--relative",
        action="store_true",
        help="show minutes until departure instead of times, hiding cancelled departures",
    )
    parser.add_argument("-u", "--efa-url", metavar="url", help="EFA departure monitor endpoint")
    parser.add_argument(
        "-V", "--version", action="version", version=f"efa-m version {__version__}"
    )
    parser.add_argument("positional", nargs="*", metavar="<city> [<type>:]<name>")
    return parser


def configure_logging(config: AppConfig) -> None:
    """Send diagnostics to stderr so stdout only carries the table."""
    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def fetch_rows(
    request: RequestDescriptor,
    options: BoardOptions,
    config: AppConfig,
    departure_monitor: DepartureMonitor | None = None,
) -> list[DisplayRow]:
    """Query the departure monitor and build the rows to display.

    Without an explicit ``departure_monitor`` an EFA monitor is created on a
    session that lives for this one request.
    """
    if departure_monitor is not None:
        return await DepartureBoardService(departure_monitor).get_rows(request, options)

    async with aiohttp.ClientSession() as session:
        monitor = EfaDepartureMonitor(
            EfaHttpClient(session, config.user_agent, log_requests=config.log_requests),
            timezone=config.timezone,
        )
        return await DepartureBoardService(monitor).get_rows(request, options)


def main(
    argv: Sequence[str] | None = None,
    departure_monitor: DepartureMonitor | None = None,
    config: AppConfig | None = None,
) -> int:
    """Run efa-m and return its exit code."""
    config = config or AppConfig()
    configure_logging(config)
    parser = build_parser()

    try:
        args = parser.parse_intermixed_args(argv)
        request = QueryParameterResolver(config.url).resolve(
            args.positional, date=args.date, time=args.time, service_url=args.efa_url
        )
    except UsageError as e:
        logger.debug(f"Invalid invocation: {e}")
        print(f"Usage: {USAGE}", file=sys.stderr)
        print(f"efa-m: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    options = BoardOptions(
        line_filter=split_filter_values(args.line),
        platform_filter=split_filter_values(args.platform),
        relative=args.relative,
        list_lines=args.linelist,
    )

    try:
        rows = asyncio.run(fetch_rows(request, options, config, departure_monitor))
        output = TableRenderer().render(rows)
    except RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return EXIT_REQUEST_ERROR
    except EmptyResultError as e:
        print(e, file=sys.stderr)
        return EXIT_NOTHING_TO_SHOW

    sys.stdout.write(output)
    return EXIT_OK


def cli_main() -> None:
    """Synchronous entry point for the efa-m command."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
