import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # urllib3 is chatty at DEBUG and logs full URLs, api key included
    logging.getLogger("urllib3").setLevel(logging.WARNING)
