"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Configuration and logging setup
- Routing to the demo catalog
"""
import argparse
import os
import sys
from typing import List, Optional

from design_patterns import __version__
from design_patterns.application.catalog import DemoRegistry, create_default_registry
from design_patterns.cli.formatters import format_output
from design_patterns.config.manager import ConfigurationManager
from design_patterns.config.schemas import LOG_LEVELS, AppConfig
from design_patterns.domain.core.exceptions import DomainException
from design_patterns.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "design-patterns",
        description="Design Patterns Catalog - runnable demonstrations of classical OO patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                     # List all demos
  %(prog)s list --format json       # List demos as JSON
  %(prog)s run state                # Run the State demo
  %(prog)s run all                  # Run every demo
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=list(LOG_LEVELS), help='Set logging level')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', required=True, help='Available commands')

    list_parser = subparsers.add_parser('list', help='List available demos')
    list_parser.add_argument('--format', choices=['json', 'yaml', 'table'],
                             help='Output format')

    run_parser = subparsers.add_parser('run', help='Run a demo')
    run_parser.add_argument('name', help="Demo name, or 'all' to run every demo")

    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides."""
    config = ConfigurationManager(args.config).app_config
    if args.log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": args.log_level})}
        )
    return config


def list_demos(registry: DemoRegistry, format_type: str) -> None:
    data = {"demos": [registration.to_dict() for registration in registry.list_demos()]}
    print(format_output(data, format_type))


def run_demos(registry: DemoRegistry, name: str) -> None:
    if name != "all":
        registry.run(name, print)
        return

    for index, demo_name in enumerate(registry.names()):
        if index:
            print()
        print(f"=== {demo_name} ===")
        registry.run(demo_name, print)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns the process exit code."""
    args = parse_args(argv)

    try:
        config = load_config(args)
        setup_logging(config.logging)

        registry = create_default_registry()

        if args.command == 'list':
            list_demos(registry, args.format or config.output_format)
        else:
            run_demos(registry, args.name)
        return 0

    except DomainException as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
