"""
biiif-csv - Main Entry Point

Usage:
    biiif-csv <csv-file> <output-directory> [input-directory]

Example:
    biiif-csv metadata.csv output-dir input-files
"""

import argparse
import sys

from aws_lambda_powertools import Logger

from biiif_csv.core.config import BuilderConfig
from biiif_csv.core.errors import BiiifCsvError
from biiif_csv.core.version import __version__
from biiif_csv.hierarchy.builder import csv_to_hierarchy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="biiif-csv",
        description="Build a biiif directory structure from a CSV file.",
    )
    parser.add_argument("csv_file", help="Path to the CSV file containing collection metadata")
    parser.add_argument("output_dir", help="Where to create the biiif directory structure")
    parser.add_argument(
        "input_dir",
        nargs="?",
        default=None,
        help="Optional. Directory containing the files to include",
    )
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(args: argparse.Namespace) -> BuilderConfig:
    config = BuilderConfig.load_from_file(args.config) if args.config else BuilderConfig()
    if args.log_level:
        config = BuilderConfig(**{**config.model_dump(), "log_level": args.log_level})
    return config


def main(argv=None) -> int:
    """Main entry point for the biiif-csv command."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except (BiiifCsvError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger = Logger(service="biiif-csv", level=config.log_level)
    logger.info(
        "Starting conversion",
        extra={
            "csv_path": args.csv_file,
            "output_dir": args.output_dir,
            "input_dir": args.input_dir or "Not provided",
        },
    )

    try:
        result = csv_to_hierarchy(args.csv_file, args.output_dir, args.input_dir, config)
    except BiiifCsvError as e:
        logger.error(str(e), extra={"error_type": type(e).__name__})
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(
        f"Successfully created biiif directory structure in {args.output_dir} "
        f"({len(result.nodes)} nodes, {len(result.warnings)} warnings)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
