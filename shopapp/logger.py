# shopapp/logger.py
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once with a console handler."""
    global _configured
    root = logging.getLogger()
    root.setLevel(level)
    if _configured:
        return

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(console_handler)
    _configured = True


def log_startup(app_name: str, version: str, api_prefix: str) -> None:
    logger = logging.getLogger("shopapp")
    logger.info("=" * 60)
    logger.info("%s %s starting", app_name, version)
    logger.info("Python: %s", sys.version.split()[0])
    logger.info("API prefix: %s", api_prefix)
    logger.info("=" * 60)
