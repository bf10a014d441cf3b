from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides for the build driver.
"""

import argparse
from typing import Any, Dict, NoReturn

from ssinject.domain.constants import APP_NAME, APP_VERSION
from ssinject.domain.errors import InvalidArgumentsError

# -----------------------------------------------------------------------------
# PARSER
# -----------------------------------------------------------------------------

class SSIArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises InvalidArgumentsError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentsError(message)


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the ssinject CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = SSIArgumentParser(
        prog=APP_NAME,
        description=(
            "Expand <!--#include virtual=\"...\"--> directives in a static HTML "
            "tree and write the resolved entry documents to an output directory."
        ),
    )

    p.add_argument("input_dir", metavar="input_directory", help="Source tree and include root.")
    p.add_argument("output_dir", metavar="output_directory", help="Destination tree (created if missing).")

    p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=_positive_int,
        default=None,
        help="Abort when an include chain grows deeper than N documents.",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file overriding the default build configuration.",
    )

    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to a rotating log file.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Report progress at INFO level on stderr.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Extract the configuration keys set on the command line.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {n}")
    return n
