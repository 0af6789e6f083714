import copy
import logging.config

from .config import get_settings
from .utils import canonicalify, ensure_path

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(levelname)s] [%(name)s] - %(message)s"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": logging.INFO,
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": logging.DEBUG,
            "formatter": "default",
            "filename": "logs/fieldschema.log",
            "maxBytes": 5 * 1024 * 1024,  # 5MB
            "backupCount": 10,
        },
    },
    "loggers": {
        "fieldschema": {
            "handlers": ["console"],
            "level": logging.DEBUG,
            "propagate": True,
        }
    },
}


def build_config(level=None, logfile=None) -> dict:
    """Return a dictConfig for the ``fieldschema`` logger.

    The file handler is only wired in when ``logfile`` is given.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    if level:
        config["handlers"]["console"]["level"] = level.upper()

    if logfile:
        config["handlers"]["file"]["filename"] = str(canonicalify(logfile))
        config["loggers"]["fieldschema"]["handlers"].append("file")
    else:
        del config["handlers"]["file"]
    return config


def setup(level=None, logfile=None):
    if level is None and logfile is None:
        settings = get_settings()
        level, logfile = settings.log_level, settings.log_file

    if logfile:
        p = canonicalify(logfile)
        if len(p.parts) > 1:
            ensure_path(p.parent)

    logging.config.dictConfig(build_config(level, logfile))


logger = logging.getLogger("fieldschema")
