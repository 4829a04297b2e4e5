"""
Logging Configuration

Installs a single stream handler on the ``classbook`` logger. Modules log
through ``logging.getLogger(__name__)`` and inherit it.
"""

import logging
import sys

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def configure_logging(app):
    """Attach the package handler using ``LOG_LEVEL`` from the app config."""
    level_name = str(app.config.get('LOG_LEVEL', 'INFO')).upper()
    level = getattr(logging, level_name, logging.INFO)

    package_logger = logging.getLogger('classbook')
    package_logger.setLevel(level)

    # create_app may run many times in one process (tests)
    if any(getattr(h, '_classbook', False) for h in package_logger.handlers):
        return package_logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._classbook = True
    package_logger.addHandler(handler)

    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    return package_logger
