"""purlbom - Materialize dependency manifests for package URLs.

    Returns:
        int: Exit code
"""
import logging
import sys

from args import parse_args
from cli_config import apply_cli_overrides
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from config import load_config
from constants import ExitCodes
from errors import FetchFailureError, InvalidIdentifierError, MaterializationError
from metadata import generate_metadata

logger = logging.getLogger(__name__)


def exit_code_for(exc):
    """Map a metadata failure onto the process exit code."""
    cause = exc.cause if isinstance(exc, MaterializationError) else exc
    if isinstance(cause, InvalidIdentifierError):
        return ExitCodes.INVALID_INPUT
    if isinstance(cause, FetchFailureError):
        return ExitCodes.CONNECTION_ERROR
    return ExitCodes.FILE_ERROR


def run(purls, config):
    """Generate metadata for each package URL in order.

    Paths are written to stdout, one per line.

    Returns:
        ExitCodes: SUCCESS if anything was generated and nothing failed,
        UNSUPPORTED if every identifier was unsupported, otherwise the code
        of the first failure.
    """
    first_failure = None
    generated = 0
    for raw in purls:
        try:
            result = generate_metadata(raw, config)
        except (InvalidIdentifierError, MaterializationError) as exc:
            logger.error("Skipping %s: %s", raw, exc)
            if first_failure is None:
                first_failure = exit_code_for(exc)
            continue
        if result is False:
            logger.warning("No metadata generated for %s (unsupported type).", raw)
            continue
        generated += 1
        print(result)

    if first_failure is not None:
        return first_failure
    if generated == 0:
        return ExitCodes.UNSUPPORTED
    return ExitCodes.SUCCESS


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    level = "DEBUG" if args.DEBUG else args.LOG_LEVEL
    configure_logging(level, args.LOG_FILE)

    config = apply_cli_overrides(load_config(args.CONFIG), args)
    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main",
                                count=len(args.purls))
        )

    code = run(args.purls, config)
    logger.info("Finished with exit code %s.", code.value)
    sys.exit(code.value)


if __name__ == "__main__":
    main()
