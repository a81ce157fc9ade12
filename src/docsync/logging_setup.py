import sys

from loguru import logger

LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {message}"


def configure_logging(verbose: bool = False) -> None:
    """Send loguru output to stderr at INFO, or DEBUG when verbose."""
    logger.remove()
    # sys.stderr is looked up per message
    logger.add(lambda msg: sys.stderr.write(msg), level="DEBUG" if verbose else "INFO", format=LOG_FORMAT)
