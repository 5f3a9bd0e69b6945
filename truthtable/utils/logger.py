from loguru import logger
import sys

from truthtable.config import LOG_CONFIG

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <4}</level> | "
    "<cyan>{extra[context]}</cyan> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

logger.remove()
logger.configure(extra={"context": "truthtable"})


def use_sink(stream):
    """Send all log output to the given stream. The server logs to stdout; the CLI keeps stdout for tables."""
    logger.remove()
    logger.add(
        stream,
        level=LOG_CONFIG["level"],
        format=LOG_FORMAT,
        colorize=True,
        backtrace=True,
        diagnose=True
    )


use_sink(sys.stdout)


def get_logger(name: str = "Default"):
    """Return a logger instance bound to the given context name."""
    return logger.bind(context=name)
