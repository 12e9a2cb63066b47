"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with configuration, logging and the demo registry
"""
import argparse
import sys
from typing import Any, Dict, List, Optional

from src import __version__
from src._package import COMMAND_NAME, DESCRIPTION
from src.bootstrap import create_registry
from src.config.defaults import LogLevel, OutputFormat, PatternCategory
from src.config.manager import ConfigurationManager
from src.cli.formatters import format_output
from src.infrastructure.error.error_middleware import EXIT_SUCCESS, with_error_handling
from src.infrastructure.logging.logger import get_logger, setup_logging
from src.infrastructure.registry.demo_registry import DemoRegistry

FORMAT_CHOICES = [f.value for f in OutputFormat]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with list / describe / run subcommands."""

    parser = argparse.ArgumentParser(
        prog=COMMAND_NAME,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List all demos
  %(prog)s list --category structural        # List structural demos
  %(prog)s describe iterator --format yaml   # Show what a demo is about
  %(prog)s run iterator observer             # Run two demos
  %(prog)s run --all                         # Run every demo
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=[lvl.value for lvl in LogLevel],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMAT_CHOICES,
                        help='Output format (default: from configuration)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.required = True

    # list
    list_parser = subparsers.add_parser('list', help='List registered demos')
    list_parser.add_argument('--category', choices=[c.value for c in PatternCategory],
                             help='Only list demos of this category')

    # describe
    describe_parser = subparsers.add_parser('describe', help='Describe a demo')
    describe_parser.add_argument('name', help='Demo name')
    describe_parser.add_argument('--format', choices=FORMAT_CHOICES, default=argparse.SUPPRESS,
                                 help='Output format')

    # run
    run_parser = subparsers.add_parser('run', help='Run one or more demos')
    run_parser.add_argument('names', nargs='*', metavar='NAME', help='Demo names to run')
    run_parser.add_argument('--all', action='store_true', help='Run every registered demo')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == 'run':
        if args.all and args.names:
            parser.error("run accepts either demo names or --all, not both")
        if not args.all and not args.names:
            parser.error("run requires at least one demo name or --all")
    return args


def list_demos(args: argparse.Namespace, registry: DemoRegistry) -> Dict[str, Any]:
    registrations = registry.list_registrations(args.category)
    return {"demos": [r.to_dict() for r in registrations]}


def describe_demo(args: argparse.Namespace, registry: DemoRegistry) -> Dict[str, Any]:
    return registry.get_registration(args.name).to_dict(include_description=True)


def run_demos(args: argparse.Namespace, registry: DemoRegistry, show_headers: bool = True) -> None:
    """Run the requested demos, writing their output to stdout."""
    names = registry.get_registered_demos() if args.all else args.names

    # Resolve every name before running anything
    registrations = [registry.get_registration(name) for name in names]

    for index, registration in enumerate(registrations):
        if show_headers:
            if index:
                print()
            print(f"=== {registration.name} ({registration.category.value}) ===")
        registry.run_demo(registration.name, print)


@with_error_handling
def execute_command(args: argparse.Namespace) -> int:
    """Load configuration, set up logging and dispatch the parsed command."""
    config_manager = ConfigurationManager(args.config)
    app_config = config_manager.app_config

    logging_config = app_config.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": args.log_level})
    setup_logging(logging_config)

    logger = get_logger(__name__)
    logger.debug("Executing command", command=args.command)

    registry = create_registry(app_config.catalog)
    output_format = args.format or app_config.catalog.output_format

    if args.command == 'list':
        print(format_output(list_demos(args, registry), output_format))
    elif args.command == 'describe':
        print(format_output(describe_demo(args, registry), output_format))
    elif args.command == 'run':
        run_demos(args, registry, app_config.catalog.show_headers)

    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    return execute_command(args)


if __name__ == "__main__":
    sys.exit(main())
