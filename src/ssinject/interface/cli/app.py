from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration merging, build execution and result rendering. This is the
only layer that turns a build failure into a message and an exit status.
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from ssinject.core.builder import build_site
from ssinject.domain.build_models import BuildResult
from ssinject.domain.config import load_config, validate_config
from ssinject.domain.constants import COMPLETED_MESSAGE, PROCESSED_MESSAGE, USAGE_MESSAGE
from ssinject.domain.errors import InvalidArgumentsError, SSIError
from ssinject.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    level_for_flags,
    shutdown_logging,
)
from ssinject.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    parser = cli_args.build_parser()
    try:
        args = parser.parse_args(argv)
    except InvalidArgumentsError as e:
        print(USAGE_MESSAGE, file=sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(
        LoggingConfig(
            level=level_for_flags(debug=args.debug, verbose=args.verbose),
            console=True,
            log_file=args.log_file,
        ),
        force=True,
    )

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: argparse.Namespace) -> int:
    try:
        raw_conf: Dict[str, Any] = {}
        if args.config_file:
            raw_conf.update(load_config(args.config_file))
        raw_conf.update(cli_args.args_to_overrides(args))

        config, warnings = validate_config(raw_conf, strict=True)
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")

        result = build_site(args.input_dir, args.output_dir, config)
    except SSIError as e:
        logger.debug(f"Build aborted by {type(e).__name__}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except UnicodeDecodeError as e:
        print(f"ERROR: Unable to decode document as text: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except OSError as e:
        logger.debug("Filesystem failure", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    _print_human_summary(result)
    return EXIT_OK

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_human_summary(result: BuildResult) -> None:
    """Print one line per written document followed by the completion line."""
    for path in result.written_files:
        print(PROCESSED_MESSAGE.format(path=path))
    print(COMPLETED_MESSAGE)


if __name__ == "__main__":
    sys.exit(main())
