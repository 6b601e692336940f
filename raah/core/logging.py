import logging
import sys


def configure_logging(level: str = "INFO"):
    logger = logging.getLogger()
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.addHandler(handler)
    # httpx logs every request at INFO; the client already logs its own events
    logging.getLogger("httpx").setLevel(logging.WARNING)
