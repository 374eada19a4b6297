"""Command line entry point: find the crossing of two wires closest to the origin."""

from __future__ import annotations
import argparse
import json
import logging
import sys
from dataclasses import dataclass

from crossings import CrossingReport, analyze
from errors import ArgumentCountError, WireError
from logs import setup_logging
from path import build_path, read_input
from serialization import serialize_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunConfig:
    input_file: str
    output_json: bool = False
    verbose: bool = False


def parse_args(argv: list[str] | None = None) -> RunConfig:
    """Parse command-line arguments into a RunConfig."""
    parser = argparse.ArgumentParser(description="Crossed wires: closest crossing finder")
    parser.add_argument(
        "input_files",
        nargs="*",
        metavar="INPUT",
        help="File holding the two comma-separated wire paths",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="output_json",
        help="Print the full crossing report as JSON",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )

    args = parser.parse_args(argv)

    if len(args.input_files) != 1:
        raise ArgumentCountError(len(args.input_files))

    return RunConfig(
        input_file=args.input_files[0],
        output_json=args.output_json,
        verbose=args.verbose,
    )


def run(config: RunConfig) -> CrossingReport:
    moves1, moves2 = read_input(config.input_file)
    path1, path2 = build_path(moves1), build_path(moves2)
    return analyze(path1, path2)


def format_report(report: CrossingReport, output_json: bool = False) -> str:
    if output_json:
        return json.dumps(serialize_report(report))
    if not report.crossings:
        return "no crossings"
    if not report.has_crossings:
        return "no crossings away from the origin"
    return str(report.distance)


def main(argv: list[str] | None = None) -> int:
    try:
        config = parse_args(argv)
        setup_logging(config.verbose)
        report = run(config)
    except WireError as e:
        print(f"error: {e}", file=sys.stderr)
        logger.debug("aborting", exc_info=True)
        return 1

    print(format_report(report, config.output_json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
