import logging, json, sys, time, os

from .constants import ENV_LOG_LEVEL, ENV_LOG_FILE, DEFAULT_LOG_LEVEL


def get_logger(name="agreement_core", level=None, to_file=None):
    """Structured JSON logger for agreement_core components.

    level and to_file fall back to AGREEMENT_LOG_LEVEL / AGREEMENT_LOG_FILE.
    """
    if level is None:
        level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
        # unknown names fall back to the default instead of failing at import
        if not isinstance(logging.getLevelName(level), int):
            level = DEFAULT_LOG_LEVEL
    if to_file is None:
        to_file = os.getenv(ENV_LOG_FILE) or None

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime  # UTC timestamps
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if to_file:
            directory = os.path.dirname(to_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
