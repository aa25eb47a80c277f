import logging
import sys

LOG_FORMAT = "%(levelname)s - %(asctime)s - %(name)s - %(message)s"

# Libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Configure root logging for the FitCRM service.

    Args:
        level: Root log level, a name such as "DEBUG" or a logging constant
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,  # Override any existing configuration
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for an API module.

    Records propagate to the stdout handler installed by configure_logging.

    Args:
        name: The name of the logger (e.g., __name__)
    """
    return logging.getLogger(name)
