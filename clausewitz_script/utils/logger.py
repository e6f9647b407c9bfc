"""Logging setup and error reporting for command-line entry points"""
import logging
import sys
import traceback

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_logger = logging.getLogger('clausewitz_script')


def configure_logging(verbose: bool = False):
    """Configure root logging the same way for every entry point

    Args:
        verbose: DEBUG level when True, otherwise WARNING (warnings and errors only)
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def log_failure(e: Exception, context: str, verbose: bool = False):
    """Report a per-document failure without stopping the run

    Args:
        e: The exception raised while handling the document
        context: What was being processed (usually a file path)
        verbose: Also log the full traceback
    """
    _logger.error("%s: %s", context, e)
    if verbose:
        tb = ''.join(traceback.format_exception(type(e), e, e.__traceback__))
        _logger.debug("Traceback for %s:\n%s", context, tb)
