# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Logging Configuration

Sets up the ``lorenzanim`` logger for command-line runs. Library modules
only call ``logging.getLogger(__name__)`` and never add handlers.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "lorenzanim"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Parameters
    ----------
    level : int
        Logging level (e.g. logging.DEBUG, logging.INFO)
    log_file : Optional[str]
        Optional path to also write logs to

    Returns
    -------
    logging.Logger
        The configured ``lorenzanim`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Repeated setup (tests, repeated CLI invocations) must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


__all__ = ["setup_logging", "LOGGER_NAME", "LOG_FORMAT"]
