"""Command-line interface for Android project.properties tools."""

import argparse
import logging
import sys
from pathlib import Path

import msgspec

from .exceptions import ProjPropsError
from .manager import AndroidProjectPropertiesManager, MissingReferencePolicy


def setup_logging(verbosity: int = 0) -> None:
    """Configure logging for the CLI application.

    Args:
        verbosity: Logging verbosity level (0=WARNING, 1=INFO, 2+=DEBUG)
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(min(verbosity, 2), logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s:%(lineno)d – %(message)s",
    )


def cmd_list(args: argparse.Namespace) -> None:
    """List library references."""
    manager = AndroidProjectPropertiesManager(Path(args.project))
    logger = logging.getLogger(__name__)

    try:
        references = manager.get_library_references()
    except ProjPropsError as e:
        logger.error(f"List error: {e}")
        sys.exit(1)

    if args.json:
        sys.stdout.write(msgspec.json.encode(references).decode("utf-8") + "\n")
    else:
        for reference in references:
            print(f"{reference.index}={reference.value}")

    logger.info(f"✓ {len(references)} library references")
    sys.exit(0)


def cmd_add(args: argparse.Namespace) -> None:
    """Add a library reference."""
    manager = AndroidProjectPropertiesManager(Path(args.project))
    logger = logging.getLogger(__name__)

    try:
        index = manager.add_project_reference(args.value)
        logger.info(f"✓ Added {args.value} as library reference {index}")
        sys.exit(0)

    except ProjPropsError as e:
        logger.error(f"Add reference error: {e}")
        sys.exit(1)


def cmd_remove(args: argparse.Namespace) -> None:
    """Remove a library reference."""
    policy = MissingReferencePolicy.IGNORE if args.missing_ok else MissingReferencePolicy.RAISE
    manager = AndroidProjectPropertiesManager(Path(args.project), missing_policy=policy)
    logger = logging.getLogger(__name__)

    try:
        index = manager.remove_project_reference(args.value)
        if index is None:
            logger.info(f"✓ No library reference to {args.value}")
        else:
            logger.info(f"✓ Removed library reference {index}: {args.value}")
        sys.exit(0)

    except ProjPropsError as e:
        logger.error(f"Remove reference error: {e}")
        sys.exit(1)


def cmd_target(args: argparse.Namespace) -> None:
    """Show or set the build target."""
    manager = AndroidProjectPropertiesManager(Path(args.project))
    logger = logging.getLogger(__name__)

    try:
        if args.value is None:
            target = manager.get_target()
            if target is None:
                logger.error(f"No target set in {manager.properties_path}")
                sys.exit(1)
            print(target)
        else:
            manager.set_target(args.value)
            logger.info(f"✓ Target set to {args.value}")
        sys.exit(0)

    except ProjPropsError as e:
        logger.error(f"Target error: {e}")
        sys.exit(1)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="projprops",
        description="Manage library references in an Android project.properties file.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (use -v for INFO, -vv for DEBUG)",
    )

    parser.add_argument(
        "--project",
        type=str,
        default=".",
        help="Path to the Android project directory (default: current directory)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list subcommand
    list_parser = subparsers.add_parser("list", help="List library references")
    list_parser.add_argument(
        "--json", action="store_true", help="Print references as a JSON array"
    )
    list_parser.set_defaults(func=cmd_list)

    # add subcommand
    add_parser = subparsers.add_parser(
        "add", help="Add a library reference with the next free index"
    )
    add_parser.add_argument("value", help="Library path to reference")
    add_parser.set_defaults(func=cmd_add)

    # remove subcommand
    remove_parser = subparsers.add_parser(
        "remove", help="Remove a library reference and renumber the rest"
    )
    remove_parser.add_argument("value", help="Referenced library path to remove")
    remove_parser.add_argument(
        "--missing-ok",
        action="store_true",
        help="Succeed without changes when the value is not referenced",
    )
    remove_parser.set_defaults(func=cmd_remove)

    # target subcommand
    target_parser = subparsers.add_parser("target", help="Show or set the build target")
    target_parser.add_argument(
        "value", nargs="?", help="New target, e.g. android-21 (omit to show the current one)"
    )
    target_parser.set_defaults(func=cmd_target)

    return parser


def main() -> None:
    """Main entry point for the projprops CLI."""
    parser = create_parser()
    args = parser.parse_args()

    # Setup logging based on verbosity
    setup_logging(args.verbose)

    # Handle case where no subcommand is provided
    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    # Execute the subcommand
    args.func(args)


if __name__ == "__main__":
    main()
