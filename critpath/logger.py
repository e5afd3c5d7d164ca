import logging
import sys

from critpath import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=None, log_file=None):
    """
    configures the root logger: stderr always, plus a utf-8 file when log_file is given
    defaults come from critpath.config
    """
    level = (level or config.LOG_LEVEL).upper()
    log_file = log_file or config.LOG_FILE
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )
    # matplotlib is chatty at debug level
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    return logging.getLogger('critpath')
