"""crossorigin logging — hexagonal logging port and structlog adapter."""

from crossorigin.logging.port import LoggingPort
from crossorigin.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
