"""
Startup configuration to control logging and warnings.
"""

import logging
import os
import warnings


def configure_startup_logging():
    """Configure logging levels to reduce startup noise."""
    # Set default logging level to WARNING for all loggers
    logging.getLogger().setLevel(logging.WARNING)

    # Keep app-level logging at INFO
    logging.getLogger('src.group_manager').setLevel(logging.INFO)
    logging.getLogger('__main__').setLevel(logging.INFO)

    if os.environ.get('GROUP_MANAGER_DEBUG', '').lower() in {'1', 'true', 'yes', 'on'}:
        logging.getLogger('src.group_manager').setLevel(logging.DEBUG)


def suppress_startup_warnings():
    """Suppress noisy warnings during startup."""
    warnings.filterwarnings('ignore', category=DeprecationWarning, module='__main__')
    warnings.filterwarnings('ignore', message='.*Qt.*')


def clean_startup():
    """Configure a clean startup experience."""
    configure_startup_logging()
    suppress_startup_warnings()
