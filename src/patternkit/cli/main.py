"""
Main CLI module with argument parsing and command execution.

This module provides:
- Command line argument parsing (resource-action structure)
- Command routing and execution against the pattern catalog
"""
import argparse
import sys
from typing import Any, Callable, Dict, List, Optional

from patternkit import __version__
from patternkit.catalog import PatternCategory, get_catalog
from patternkit.cli.formatters import format_output
from patternkit.config.manager import ConfigurationManager
from patternkit.exceptions import PatternKitError
from patternkit.logging.logger import get_logger, setup_logging

FORMATS = ["json", "yaml", "table"]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="patternkit",
        description="Browse and run classic object-oriented design pattern examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s patterns list                          # List all patterns
  %(prog)s patterns list --category behavioral    # Only behavioral patterns
  %(prog)s patterns show strategy --format yaml   # Pattern details as YAML
  %(prog)s patterns demo simple-factory           # Run the factory example
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (YAML or JSON)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMATS, help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')
    subparsers.required = True

    patterns_parser = subparsers.add_parser('patterns', help='Browse design patterns')
    patterns_subparsers = patterns_parser.add_subparsers(dest='action', help='Pattern actions')
    patterns_subparsers.required = True

    patterns_list = patterns_subparsers.add_parser('list', help='List patterns')
    patterns_list.add_argument('--category', choices=[c.value for c in PatternCategory],
                               help='Filter by pattern category')
    patterns_list.add_argument('--format', choices=FORMATS, default=argparse.SUPPRESS,
                               help='Output format')

    patterns_show = patterns_subparsers.add_parser('show', help='Show pattern details')
    patterns_show.add_argument('name', help='Pattern name, e.g. template-method')
    patterns_show.add_argument('--format', choices=FORMATS, default=argparse.SUPPRESS,
                               help='Output format')

    patterns_demo = patterns_subparsers.add_parser('demo', help="Run a pattern's example")
    patterns_demo.add_argument('name', help='Pattern name, e.g. simple-factory')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def handle_list(args: argparse.Namespace) -> Dict[str, Any]:
    category = PatternCategory(args.category) if args.category else None
    patterns = get_catalog().list(category)
    return {"patterns": [info.to_dict() for info in patterns]}


def handle_show(args: argparse.Namespace) -> Dict[str, Any]:
    return {"pattern": get_catalog().get(args.name).to_dict()}


def handle_demo(args: argparse.Namespace) -> List[str]:
    return get_catalog().run_demo(args.name)


COMMAND_HANDLERS: Dict[tuple, Callable[[argparse.Namespace], Any]] = {
    ("patterns", "list"): handle_list,
    ("patterns", "show"): handle_show,
    ("patterns", "demo"): handle_demo,
}


def execute_command(args: argparse.Namespace, default_format: str) -> str:
    """Route a parsed command to its handler and render the result."""
    handler = COMMAND_HANDLERS[(args.resource, args.action)]
    result = handler(args)

    if isinstance(result, list):
        return "\n".join(result)

    return format_output(result, args.format or default_format)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    try:
        app_config = ConfigurationManager(args.config).get_app_config()
    except PatternKitError as e:
        # Logging is not configured yet
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging_config = app_config.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": args.log_level})
    setup_logging(logging_config)

    try:
        output = execute_command(args, app_config.cli.default_format)
    except PatternKitError as e:
        logger.error("Command failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output.rstrip("\n"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
