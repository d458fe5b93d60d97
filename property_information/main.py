#!/usr/bin/env python3
"""
property-information - command line lookup.

Prints the definition of each attribute or property name as JSON.
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from property_information import __version__, find, load_schemas
from property_information.utils.config import Config
from property_information.utils.logging import LOG_LEVEL_ENV, log_exception, set_console_level, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="property-information",
        description="Look up HTML, SVG and ARIA attribute and property definitions"
    )

    parser.add_argument("names", nargs="+", help="Attribute or property names to look up")
    parser.add_argument("--schema", default="html", help="Registry or table to search (default: html)")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"property-information {__version__}")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lookup tool."""
    args = parse_args(argv)
    config = Config(args.config)

    package_logger = setup_logging(
        log_file=config.get("logging.file"),
        console_level=os.environ.get(LOG_LEVEL_ENV, config.get("logging.console_level", "WARNING")),
    )
    if args.debug:
        set_console_level(package_logger, "DEBUG")

    if config.load_error:
        logger.warning(f"Using default configuration, could not load {config.config_path}: {config.load_error}")

    try:
        schemas = load_schemas(config)

        try:
            registry = schemas.get(args.schema)
        except KeyError:
            print(f"Unknown schema {args.schema!r}, expected one of: {', '.join(schemas.names())}",
                  file=sys.stderr)
            return 2

        for name in args.names:
            definition = find(registry, name)
            logger.debug(f"{name!r} resolved to {definition!r}")
            print(json.dumps(definition.to_dict(), sort_keys=True))

    except Exception as e:
        log_exception(logger, e, "Lookup failed")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
