"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date

import requests
from pydantic import ValidationError

from bloom_tracker import __version__
from bloom_tracker.analysis import analyze_location, compute_phenology_summary
from bloom_tracker.analysis.serialization import (
    phenology_summary_to_dict,
    vegetation_report_to_dict,
)
from bloom_tracker.config import get_settings
from bloom_tracker.datasources.vegetation import IndexType, get_source
from bloom_tracker.flows.phenology import build_report
from bloom_tracker.schemas import AnalysisQuery, PhenologyQuery


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bloom-tracker",
        description="Vegetation-index time series, bloom phenology and trend analysis",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    index_choices = [i.value for i in IndexType]

    phenology_parser = subparsers.add_parser("phenology", help="Multi-year bloom summary")
    phenology_parser.add_argument("--lat", type=float, required=True)
    phenology_parser.add_argument("--lon", type=float, required=True)
    phenology_parser.add_argument("--start-year", type=int, required=True)
    phenology_parser.add_argument("--end-year", type=int, required=True)
    phenology_parser.add_argument("--index", choices=index_choices, default=None)

    analysis_parser = subparsers.add_parser("analysis", help="Single-season vegetation analysis")
    analysis_parser.add_argument("--lat", type=float, required=True)
    analysis_parser.add_argument("--lon", type=float, required=True)
    analysis_parser.add_argument("--start", type=date.fromisoformat, required=True)
    analysis_parser.add_argument("--end", type=date.fromisoformat, required=True)
    analysis_parser.add_argument("--index", choices=index_choices, default=None)

    # 'refresh' command - run the report flow for the configured location
    subparsers.add_parser("refresh", help="Build reports for the configured location")

    return parser


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2))


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Data source: {settings.data_source}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_phenology(args: argparse.Namespace) -> int:
    """Handle the 'phenology' command."""
    settings = get_settings()
    try:
        query = PhenologyQuery(
            lat=args.lat,
            lon=args.lon,
            start_year=args.start_year,
            end_year=args.end_year,
            index_type=args.index or settings.index_type,
        )
    except ValidationError as e:
        print(f"Invalid request: {e}", file=sys.stderr)
        return 2

    try:
        summary = compute_phenology_summary(
            query.lat,
            query.lon,
            query.start_year,
            query.end_year,
            query.index_type,
            source=get_source(settings.data_source),
            window=settings.smoothing_window,
        )
    except requests.RequestException as e:
        print(f"Error: failed to fetch series: {e}", file=sys.stderr)
        return 1

    _print_json(phenology_summary_to_dict(summary))
    return 0


def cmd_analysis(args: argparse.Namespace) -> int:
    """Handle the 'analysis' command."""
    settings = get_settings()
    try:
        query = AnalysisQuery(
            lat=args.lat,
            lon=args.lon,
            start_date=args.start,
            end_date=args.end,
            index_type=args.index or settings.index_type,
        )
    except ValidationError as e:
        print(f"Invalid request: {e}", file=sys.stderr)
        return 2

    try:
        report = analyze_location(
            query.lat,
            query.lon,
            query.start_date,
            query.end_date,
            get_source(settings.data_source),
            query.index_type,
            source_label=settings.data_source,
        )
    except requests.RequestException as e:
        print(f"Error: failed to fetch series: {e}", file=sys.stderr)
        return 1

    _print_json(vegetation_report_to_dict(report))
    return 0


def cmd_refresh(_args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: run the report flow."""
    settings = get_settings()
    print(f"Building reports for ({settings.lat}, {settings.lon})...")
    result = build_report(lat=settings.lat, lon=settings.lon)
    print(f"Done: {result}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    if args.debug:
        print(f"Debug mode enabled. Settings: {get_settings()}")

    commands = {
        "info": cmd_info,
        "phenology": cmd_phenology,
        "analysis": cmd_analysis,
        "refresh": cmd_refresh,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
