"""Utility modules for sqlscan.

Provides:
- logger: get_logger for logging
"""

from sqlscan.utils.logger import get_logger

__all__ = ["get_logger"]
