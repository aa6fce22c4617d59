"""Miscellaneous non-geometry stuff."""
import logging
import os
import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = 'rtc.yml'


def load_config() -> dict:
    """Read rtc.yml from the current directory, else the home directory.

    Returns an empty dict if neither exists.
    """
    for path in os.curdir, os.path.expanduser('~'):
        filename = os.path.join(path, CONFIG_FILENAME)
        try:
            with open(filename, 'rt') as file:
                config = yaml.load(file, Loader=yaml.FullLoader)
        except FileNotFoundError:
            continue
        logger.debug('Loaded configuration from %s.', filename)
        # An empty file parses to None.
        return config or {}
    return {}
