import argparse
import logging
from pathlib import Path

from utils import setup_logging

from .config import Environment, FeedConfig
from .pipeline import run

LOG_FILE = "catalog_check.log"


def load_config(args):
    """Config file if present, else environment, then command-line overrides."""
    if Path(args.config).exists():
        config = FeedConfig.from_config_file(args.config)
    else:
        config = FeedConfig.from_env()

    if args.env:
        config.environment = Environment.parse(args.env)
    if args.url:
        config.url_override = args.url
    if args.output:
        config.output_path = args.output
    if args.timeout is not None:
        config.timeout_seconds = args.timeout
    if args.max_length is not None:
        config.max_length = args.max_length
    if args.field is not None:
        config.long_text_field = args.field
    if args.skip_existing:
        config.skip_fetch_if_exists = True
    if args.strip_images:
        config.strip_inline_images = True
    return config.validate()


def build_parser():
    parser = argparse.ArgumentParser(
        description="Download the product catalog feed, count it and check description lengths"
    )
    parser.add_argument(
        "--env",
        choices=[e.value for e in Environment],
        help="Catalog environment to fetch from (default: stage)",
    )
    parser.add_argument("--url", type=str, help="Fetch this URL instead of the environment's")
    parser.add_argument("--output", type=str, help="Path of the downloaded JSON (default: result.json)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds (default: 600)")
    parser.add_argument(
        "--skip-existing",
        action="store_true",
        help="Skip the download when the output file already exists and only validate it",
    )
    parser.add_argument(
        "--strip-images",
        action="store_true",
        help="Ignore inline base64 <img> tags when measuring the long-text field",
    )
    parser.add_argument("--max-length", type=int, help="Maximum long-text length (default: 60000)")
    parser.add_argument("--field", type=str, help="Long-text field to check (default: l_description)")
    parser.add_argument("--report-csv", type=str, help="Write oversized records to this CSV file")
    parser.add_argument(
        "--config",
        type=str,
        default="catalog.conf",
        help="Path to configuration file",
    )
    parser.add_argument("--log-file", type=str, default=LOG_FILE, help="Log file path")
    return parser


def run_cli(argv=None):
    """Parse arguments, run once and return the RunResult (None on bad configuration)."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file)

    try:
        config = load_config(args)
    except ValueError as e:
        logging.error(f"Invalid configuration: {e}")
        return None

    logging.info(f"Using {config!r}")
    return run(config, report_csv=args.report_csv)


def main(argv=None):
    """Console entry point; the exit status does not reflect the run outcome."""
    run_cli(argv)


if __name__ == "__main__":
    main()
