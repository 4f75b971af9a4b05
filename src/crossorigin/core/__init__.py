"""crossorigin core: process-wide configuration."""

from crossorigin.core.config import Config

__all__ = ["Config"]
