"""
Central logger for the package.

fen4 is a library: it never adds handlers and stays silent until the host application opts in with
`logger.enable("fen4")`.
"""

from loguru import logger

logger.disable("fen4")

__all__ = ["logger"]
