"""Command line entry point for the Job Search Dashboard."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import os
import sys
import time
from pathlib import Path
from typing import Optional, Tuple

from pydantic import ValidationError

from job_dashboard.clients import ClientConfigurationError
from job_dashboard.config.environment import EnvironmentConfig
from job_dashboard.config.exceptions import ConfigurationError
from job_dashboard.config.loader import load_config, validate_config_file
from job_dashboard.config.models import AppConfig
from job_dashboard.domain.models import FilterCriteria, JobSource
from job_dashboard.filtering import FilterEngine
from job_dashboard.logging import get_logger
from job_dashboard.logging.config import configure_logging
from job_dashboard.normalization import RecordNormalizer
from job_dashboard.rendering import RenderingError, ResultsRenderer
from job_dashboard.session import SearchInputError, SearchSession

logger = get_logger(__name__, component="cli")

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve the effective log level.

    Log level priority: CLI > environment > config file.

    Args:
        config_path: Path to configuration file (None to search default locations)
        log_level_override: Log level from CLI

    Returns:
        Tuple of (AppConfig, EnvironmentConfig)

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level or "INFO"

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="job-dashboard",
        description="Job Search Dashboard - search jobs from a resume and filter the results",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml or config/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        help="Log level (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search all sources using a resume")
    search.add_argument("resume", type=Path, help="Resume file to upload")
    _add_filter_arguments(search)
    _add_format_argument(search)

    filter_cmd = subparsers.add_parser(
        "filter", help="Normalize and filter a local delimited or JSON export"
    )
    filter_cmd.add_argument("csv_file", type=Path, help="Delimited text file with a header row (or .json)")
    filter_cmd.add_argument(
        "--source",
        default="linkedin",
        help="Source the file came from: linkedin, naukri or careerjet (default: linkedin)",
    )
    _add_filter_arguments(filter_cmd)
    _add_format_argument(filter_cmd)

    validate = subparsers.add_parser("validate-config", help="Validate a configuration file")
    validate.add_argument("path", type=Path, help="Configuration file to validate")

    return parser


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("filters")
    group.add_argument("--keyword", default="", help="Match title, company or description")
    group.add_argument("--location", default="", help="Match location")
    group.add_argument("--company", default="", help="Match company")
    group.add_argument(
        "--experience", default="", help="Maximum years of experience (unknown experience is excluded)"
    )
    group.add_argument("--job-type", default="", help="Match job type")
    group.add_argument("--work-mode", default="", help="Match work mode (remote, hybrid, on-site)")
    group.add_argument("--min-salary", default="", help="Minimum salary (leading number is used)")
    group.add_argument("--industry", default="", help="Match industry")


def _add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )


def criteria_from_args(args: argparse.Namespace) -> FilterCriteria:
    """Build FilterCriteria from parsed filter options.

    Raises:
        ValidationError: If a numeric option is malformed
    """
    return FilterCriteria(
        keyword=args.keyword,
        location=args.location,
        company=args.company,
        experience_ceiling=args.experience,
        job_type=args.job_type,
        work_mode=args.work_mode,
        minimum_salary=args.min_salary,
        industry=args.industry,
    )


def run_search(args: argparse.Namespace, app_config: AppConfig) -> int:
    """Upload a resume, search every source, optionally filter, and print results."""
    criteria = criteria_from_args(args)

    try:
        content = args.resume.read_bytes()
    except OSError as e:
        print(f"Error: cannot read resume file {args.resume}: {e}", file=sys.stderr)
        return 1

    session = SearchSession.from_config(app_config)
    try:
        outcome = session.search_from_resume(args.resume.name, content)
        state = session.apply_filters(criteria) if criteria.is_active() else session.display
    finally:
        session.close()

    renderer = ResultsRenderer()
    print(renderer.render_state(state, errors=outcome.errors, format_type=args.output_format))
    return 1 if outcome.had_errors else 0


def run_filter(args: argparse.Namespace) -> int:
    """Normalize a local export and filter it without contacting any service."""
    source = JobSource.from_label(args.source)
    criteria = criteria_from_args(args)

    try:
        text = args.csv_file.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: cannot read {args.csv_file}: {e}", file=sys.stderr)
        return 1

    normalizer = RecordNormalizer()
    if args.csv_file.suffix.lower() == ".json":
        try:
            payload = json.loads(text)
        except ValueError as e:
            print(f"Error: {args.csv_file} is not valid JSON: {e}", file=sys.stderr)
            return 1
        records = normalizer.normalize_payload(payload, source)
    else:
        records = normalizer.normalize(text, source)

    result = FilterEngine(criteria).apply(records)

    renderer = ResultsRenderer()
    context = renderer.build_context(
        {source: result.records},
        is_filtered=result.is_filtered,
        unfiltered_results={source: records},
        sources=[source],
    )
    if args.output_format == "json":
        print(renderer.render_json(context))
    else:
        print(renderer.render_text(context))
    return 0


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the Job Search Dashboard CLI.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    start_time = time.time()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "validate-config":
        return 0 if validate_config_file(args.path) else 1

    try:
        app_config = None
        if args.command == "search":
            # Configuration is needed for service endpoints
            app_config, env_config = load_runtime_config(args.config, args.log_level)
            log_level = env_config.log_level
            log_format = app_config.logging.format
            environment = env_config.environment
        else:
            log_level = args.log_level or os.environ.get("LOG_LEVEL", "INFO").upper()
            log_format = "key-value"
            environment = os.environ.get("ENVIRONMENT", "local")

        configure_logging(level=log_level, format_type=log_format, environment=environment)

        logger.info(
            f"Running command: {args.command}",
            extra={"event": "cli.command.started", "command": args.command, "log_level": log_level},
        )

        if args.command == "search":
            exit_code = run_search(args, app_config)
        else:
            exit_code = run_filter(args)

        logger.info(
            f"Command {args.command} finished",
            extra={
                "event": "cli.command.completed",
                "command": args.command,
                "exit_code": exit_code,
                "duration_seconds": round(time.time() - start_time, 2),
            },
        )
        return exit_code

    except (ConfigurationError, ClientConfigurationError) as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except (SearchInputError, RenderingError, ValidationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
