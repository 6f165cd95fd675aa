"""Command-line entrypoint for the circulation desk walkthrough."""
import argparse
import sys

# Ensure UTF-8 encoding
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding='utf-8')

from circulation.core.config import settings
from circulation.core.logging import get_logger, setup_logging
from circulation.demo import run_demo

logger = get_logger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Library circulation desk walkthrough")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        default=settings.log_level.upper(), help="Set logging level")
    parser.add_argument("--json-logs", action="store_true", default=settings.json_logs,
                        help="Emit structured JSON logs")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    setup_logging(level=args.log_level, json_format=args.json_logs)
    logger.debug(f"Starting walkthrough ({settings.environment})")
    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
