# Clia Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for clia."""
import logging

logger: logging.Logger = logging.getLogger("clia")
