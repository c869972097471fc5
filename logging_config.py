# logging_config.py
import logging
import sys

from config import LOG_FILE, LOG_LEVEL

def setup_logging(level=LOG_LEVEL, log_file=LOG_FILE):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers,
        force=True
    )
