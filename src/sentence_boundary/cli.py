"""Command-line interface for sentence splitting and config management."""

import argparse
import sys
from pathlib import Path

from sentence_boundary.config.loader import load_config, ConfigLoadError
from sentence_boundary.config.schema import SplitterConfig
from sentence_boundary.console import ConsoleLogger, CounterMeter
from sentence_boundary.core.util import safe_json
from sentence_boundary.segmenters.sentence import SentenceSegmenter


def split_command(args):
    """Split a file (or stdin) into sentences."""
    try:
        config = load_config(args.config) if args.config else SplitterConfig()

        if args.file:
            text_path = Path(args.file)
            if not text_path.exists():
                print(f"Error: Input file not found: {text_path}")
                return 1
            text = text_path.read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()

        logger = ConsoleLogger() if args.verbose else None
        meter = CounterMeter()
        segmenter = SentenceSegmenter.from_config(config, logger=logger, meter=meter)
        sentences = segmenter.split(text)

        if args.json:
            print(safe_json(sentences))
        else:
            for sentence in sentences:
                cleaned = segmenter.clean(sentence)
                if cleaned is not None:
                    print(cleaned)

        if args.verbose:
            for name, total in sorted(meter.counters.items()):
                print(f"   {name}: {total}", file=sys.stderr)

        return 0

    except ConfigLoadError as e:
        print(f"❌ Cannot load config: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"❌ Cannot read input: {e}")
        return 1


def validate_config_command(args):
    """Validate a splitter config file."""
    try:
        config_path = Path(args.config_file)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            return 1

        print(f"Validating config: {config_path}")
        config = load_config(config_path)

        print("✅ Config validation successful!")
        print(f"   Version: {config.version}")
        print(f"   Separators: {len(config.separators.characters)}")
        print(f"   Max iterations: {config.separators.max_iterations}")
        print(f"   Pairs: {len(config.pairs)}")

        if args.verbose:
            print("\nSeparators:")
            for char in config.separators.characters:
                print(f"   {char!r}")
            print("\nPairs:")
            for opener, closer in config.pairs:
                print(f"   {opener} ... {closer}")

        return 0

    except ConfigLoadError as e:
        print(f"❌ Config validation failed: {e}")
        return 1


def info_command(args):
    """Display version and system information."""
    print("sentence-boundary CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("sentence-boundary")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nOptional dependencies:")

    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sentence-boundary",
        description="Deterministic sentence splitting CLI"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser(
        "split",
        help="Split text into sentences"
    )
    split_parser.add_argument(
        "file",
        nargs="?",
        help="Path to a UTF-8 text file (default: read stdin)"
    )
    split_parser.add_argument(
        "-c", "--config",
        help="Path to a splitter config YAML file"
    )
    split_parser.add_argument(
        "--json",
        action="store_true",
        help="Print sentences with their spans as JSON"
    )
    split_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log split statistics to stderr"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a splitter config file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the config YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed validation results"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "split":
        return split_command(args)
    elif args.command == "validate":
        return validate_config_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
