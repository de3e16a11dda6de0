# File: src/commitgen/infrastructure/logging/__init__.py
# Purpose: Structured logging
from commitgen.infrastructure.logging.setup import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
