"""Command-line interface for bup."""

import argparse
import sys
from pathlib import Path

from config_file import DEFAULT_CONFIG_PATH, ConfigFile, ConfigFileError
from model import DirectoryStore

BUP_VERSION = "0.1.0"


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


class BupHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "Bup - edit the directories your backups are made of.",
            f"Version: {BUP_VERSION}",
            "",
            "Usage:",
            "  bup                                   Open the editor",
            "  bup --config <path>                   Use another config file",
            f"                                        (default: {DEFAULT_CONFIG_PATH})",
            "  bup --list                            Print configured directories and exit",
            "  bup --version                         Print version and exit",
            "",
        ]
        return "\n".join(lines)


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(prog="bup", formatter_class=BupHelpFormatter)
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--list", action="store_true", dest="list_dirs")
    parser.add_argument("--version", action="store_true")
    return parser.parse_args(argv)


def load_store(config_file: ConfigFile) -> DirectoryStore:
    """Load the store or exit with an error box."""
    try:
        return config_file.load()
    except ConfigFileError as e:
        print_error_box("Could not load config", str(e))
        sys.exit(1)
    except OSError as e:
        print_error_box("Could not read config", f"{config_file.path}: {e}")
        sys.exit(1)


def list_directories(store: DirectoryStore) -> None:
    """Print every directory with its sources and excludes."""
    if not len(store):
        print("No directories configured.")
        return
    for directory in store:
        print(directory.name)
        for source in directory.sources:
            print(f"  + {source or '(no folder selected)'}")
        for exclude in directory.excludes:
            print(f"  - {exclude}")


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.version:
        print(f"bup {BUP_VERSION}")
        return

    config_file = ConfigFile(args.config)
    store = load_store(config_file)

    if args.list_dirs:
        list_directories(store)
        return

    from app import BupApp

    BupApp(store).run()

    try:
        config_file.save(store)
    except OSError as e:
        print_error_box("Could not save config", f"{config_file.path}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
