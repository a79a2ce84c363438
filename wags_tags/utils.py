"""
Utility Functions Module for Wags Tags

Functions:
    setup_logging: Configures application logging
"""

import logging


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
