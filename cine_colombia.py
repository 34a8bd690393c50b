#!/usr/bin/env python3
"""
Build the Cine Colombia movie graph, save it as RDF, reload it and print
the demo SPARQL queries as ASCII tables.

Settings come from the environment (or a .env file); command-line
options override them.
"""

import argparse
import sys

from cine import CineManager, Config, setup_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--env-file", help="Path to a .env file with settings")
    parser.add_argument("--rdf-file", help="RDF file to write and read back")
    parser.add_argument("--max-width", type=int, help="Maximum column width of the tables")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument(
        "--only",
        type=int,
        action="append",
        metavar="N",
        help="Run only query number N (can be repeated)",
    )
    parser.add_argument("--list", action="store_true", help="List the demo queries and exit")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    config = Config(args.env_file)
    if args.rdf_file:
        config.rdf_file = args.rdf_file
    if args.max_width is not None:
        config.max_col_width = args.max_width
    if args.log_level:
        config.log_level = args.log_level

    setup_logging(config.log_level)

    try:
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    manager = CineManager(config)

    if args.list:
        for query in manager.queries:
            print(query.title)
        return 0

    return manager.run(only=args.only)


if __name__ == "__main__":
    sys.exit(main())
