import logging

from haulage_planner.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Attach a single stream handler to the root logger.

    Safe to call more than once; an existing configuration only gets its level
    adjusted.
    """
    level_name = (level or settings.log_level).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level_name, format=LOG_FORMAT)
    root.setLevel(level_name)
    # urllib3 logs every connection at DEBUG, which drowns the planner logs
    logging.getLogger("urllib3").setLevel(logging.WARNING)
