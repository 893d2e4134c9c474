"""Argument parsing functionality for purlbom."""

import argparse


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="purlbom",
        description=(
            "purlbom - Materialize dependency manifests for package URLs"
        ),
        add_help=True,
    )

    parser.add_argument("purls",
                        metavar="PURL",
                        help="Package URL, e.g. pkg:maven/org.example/lib@1.0",
                        nargs="+",
                        type=str)

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--debug",
                        dest="DEBUG",
                        help="Log constructed URLs, written paths and content sizes.",
                        action="store_true")
    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help="HTTP timeout in seconds (default: HTTP client default)",
                        action="store",
                        type=float)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level (default: $PURLBOM_LOG_LEVEL, else INFO)",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
