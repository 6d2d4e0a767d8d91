import logging
import sys


logger = logging.getLogger("numproc")


def setup_logger(log_level="INFO"):
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if log_level:
        logger.setLevel(log_level)
        for handler in logger.handlers:
            handler.setLevel(log_level)
    return logger
