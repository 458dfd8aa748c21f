import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("jobportal").setLevel(level.upper())
