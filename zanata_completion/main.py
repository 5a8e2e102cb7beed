#!/usr/bin/env python3

"""
Zanata bash completion generator

Usage: zanata-completion [output] [header]
"""

import argparse
import sys
from pathlib import Path

from zanata_completion.core.catalog import build_catalog
from zanata_completion.core.config import (
    CONFIG_FILE,
    DEFAULT_HEADER_FILE,
    GeneratorConfig,
    default_output_path,
)
from zanata_completion.core.decorators import Command
from zanata_completion.core.generator import BashCompletionGenerator
from zanata_completion.core.logger import Logger

# Import all commands to register them
import zanata_completion.commands  # noqa: F401


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a bash completion script for the Zanata client")
    parser.add_argument("output", nargs="?", type=Path,
                        help="Output file (default: ./<command>-completion)")
    parser.add_argument("header", nargs="?", type=Path, default=DEFAULT_HEADER_FILE,
                        help=f"License header file (default: {DEFAULT_HEADER_FILE})")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    config = GeneratorConfig.load(CONFIG_FILE)
    Logger.configure(verbose=config.verbose, no_color=config.no_color)

    catalog = build_catalog(
        Command, subtract_generic_options=config.subtract_generic_options)
    output = args.output or default_output_path(catalog.command_name)

    try:
        BashCompletionGenerator(catalog, config).generate_file(output, args.header)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130
    except OSError as e:
        Logger.error(f"Failed to generate completion file: {e}")
        if config.verbose:
            import traceback
            traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
