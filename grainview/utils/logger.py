import logging
import sys

LOGGER_NAME = "GrainView"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logger(name=LOGGER_NAME, level=logging.DEBUG):
    """Shared console logger; safe to call repeatedly."""
    log = logging.getLogger(name)
    log.setLevel(level)

    # Only one stdout handler per logger, even on re-import
    if not any(getattr(h, "_grainview", False) for h in log.handlers):
        console = logging.StreamHandler(sys.stdout)
        console.setLevel(level)
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        console._grainview = True
        log.addHandler(console)

    return log

logger = setup_logger()
