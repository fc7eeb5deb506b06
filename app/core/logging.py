import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the ``app`` logger.

    Safe to call more than once; the handler is installed a single time and
    only the level is updated on later calls.
    """
    global _handler

    logger = logging.getLogger("app")
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)

    return logger
