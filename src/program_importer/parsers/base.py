"""
Parser Base

Shared pieces for the program text parser: the error collector that every
parse call owns, and the line-number aware logging around it.
"""

import logging
from typing import List

from .models import ParseError

logger = logging.getLogger(__name__)


class ErrorCollector:
    """Accumulates (line, message) pairs without aborting the parse"""

    def __init__(self):
        self.errors: List[ParseError] = []

    def add_error(self, line: int, message: str):
        """Record a non-fatal error found on ``line``"""
        self.errors.append(ParseError(line=max(line, 1), message=message))
        logger.warning(f"Program import error on line {line}: {message}")
