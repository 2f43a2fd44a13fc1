"""Command-line interface for autosettings."""

import argparse
import json
import sys
from pathlib import Path

from app import DEFAULT_SETTINGS, SettingsApp, setup_logging
from constants import APP_NAME, APP_VERSION, default_store_path
from controller import ConfigurationError, load_defaults
from storage import OptionStore, StoreError


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the autosettings CLI."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Edit stored settings in a terminal form.",
    )
    parser.add_argument(
        "--store",
        metavar="PATH",
        type=Path,
        default=None,
        help=f"settings file (default: {default_store_path()})",
    )

    defaults = parser.add_mutually_exclusive_group()
    defaults.add_argument(
        "--defaults", metavar="PATH", type=Path, help="JSON file with default values"
    )
    defaults.add_argument(
        "--no-defaults",
        action="store_true",
        help="do not fill missing settings with defaults",
    )

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument("--dump", action="store_true", help="print the stored settings and exit")
    actions.add_argument("--reset", action="store_true", help="clear the stored settings and exit")

    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = create_parser().parse_args(argv)
    store = OptionStore(args.store)

    try:
        if args.dump:
            print(json.dumps(store.load(), indent=2))
            return 0
        if args.reset:
            store.clear()
            print(f"Cleared {store.path}")
            return 0

        if args.no_defaults:
            defaults = None
        elif args.defaults:
            defaults = load_defaults(args.defaults)
        else:
            defaults = DEFAULT_SETTINGS
        # Fail before the TUI starts rather than inside it
        store.load()
    except StoreError as e:
        print_error_box("Cannot use the settings file", str(e))
        return 1
    except ConfigurationError as e:
        print_error_box("Invalid defaults", str(e))
        return 1

    setup_logging()
    SettingsApp(store, defaults).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
