import os
import json
import logging

DEFAULT_CONFIG_FILE = "course_planner.json"

DEFAULT_CONFIG = {
    "data_file": "data/ABCU_Advising_Program_Input.csv",
    "delimiter": ",",
    "request_timeout": 10,
    "log_level": "ERROR",
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def load_config(path=None):
    """Load a JSON config file over DEFAULT_CONFIG.

    With no path, a missing course_planner.json just means defaults; an
    explicitly named file must exist.
    """
    config = dict(DEFAULT_CONFIG)
    if path is None:
        path = DEFAULT_CONFIG_FILE
        if not os.path.exists(path):
            return config

    with open(path) as f:
        config.update(json.load(f))
    return config


def setup_logging(level="ERROR"):
    logger = logging.getLogger("course_planner")
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    # reconfiguring replaces the handler instead of stacking another one
    for handler in list(logger.handlers):
        if getattr(handler, "_course_planner", False):
            logger.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    ch._course_planner = True
    logger.addHandler(ch)
    return logger
