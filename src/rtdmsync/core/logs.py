"""Logger helpers shared by the core and the adapters."""

import logging

ROOT_LOGGER_NAME = "rtdmsync"


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the rtdmsync hierarchy.

    Args:
        name: Logger name, usually ``__name__``. Names outside the package
            are nested under the ``rtdmsync`` logger.

    Returns:
        The stdlib logger for that name.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


# Silent unless the application configures logging.
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
