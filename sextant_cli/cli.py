"""
Sextant CLI - Main entry point.

Parses a distance expression from a YAML job and evaluates it against
the job's tile features, or prints its serialized form.
"""

import argparse
import json
import sys
from typing import List, Optional

from sextant_expression import EvaluationContext, default_registry
from sextant_expression.logging import LogEvent, configure_logging, create_logger

from .config import JobConfig, SextantConfig

logger = create_logger("cli")


def evaluate_job(job: JobConfig, config: SextantConfig) -> List[float]:
    """
    Evaluate the job's expression for each feature.

    Args:
        job: Parsed job configuration
        config: Global settings

    Returns:
        One result per feature, in order

    Raises:
        ParseError: If the expression is invalid
        EvaluationError: If a feature cannot be evaluated
    """
    expression = default_registry().parse(job.expression)
    return [
        expression.evaluate(
            EvaluationContext(
                feature=feature.to_tile_feature(),
                canonical=job.tile,
                extent=config.tile_extent,
            )
        )
        for feature in job.features
    ]


def serialize_job(job: JobConfig) -> list:
    """Parse the job's expression and serialize it back."""
    return default_registry().parse(job.expression).serialize()


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Sextant CLI - Evaluate distance style expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the distance of every feature in the job
  sextant evaluate jobs/park_proximity.yaml

  # Print the re-serialized expression
  sextant serialize jobs/park_proximity.yaml

  # Global settings (log level, tile extent)
  sextant --config config/sextant.yaml evaluate jobs/park_proximity.yaml
"""
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML (log_level, tile_extent)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    evaluate = subparsers.add_parser('evaluate', help='Evaluate a job and print distances')
    evaluate.add_argument('job', help='Path to job YAML')

    serialize = subparsers.add_parser('serialize', help='Print the serialized expression')
    serialize.add_argument('job', help='Path to job YAML')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = SextantConfig.from_yaml(args.config) if args.config else SextantConfig()
        configure_logging(config.logging_level)

        job = JobConfig.from_yaml(args.job)
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded job",
            metadata={'job': args.job, 'tile': str(job.tile), 'features': len(job.features)},
        )

        if args.command == 'evaluate':
            for result in evaluate_job(job, config):
                print(result)

        elif args.command == 'serialize':
            print(json.dumps(serialize_job(job)))

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
