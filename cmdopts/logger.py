# Cmdopts Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for cmdopts."""
import logging

logger: logging.Logger = logging.getLogger("cmdopts")
