"""
Pytest configuration for fsutils tests.
"""

import logging


def pytest_configure(config):
    """Configure logging settings."""
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('fsutils').setLevel(logging.DEBUG)
