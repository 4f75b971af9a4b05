"""crossorigin — CORS policy engine and ASGI middleware."""

from crossorigin.core.config import Config
from crossorigin.cors import (
    CORSConfig,
    CorsPolicyEngine,
    RequestView,
    decide,
    is_preflight,
    origin_matches,
    resolve_cors_config,
)
from crossorigin.logging import StructlogAdapter
from crossorigin.web.adapters.starlette import CORSMiddleware

__version__ = "0.1.0"

__all__ = [
    "CORSConfig",
    "CORSMiddleware",
    "Config",
    "CorsPolicyEngine",
    "RequestView",
    "StructlogAdapter",
    "decide",
    "is_preflight",
    "origin_matches",
    "resolve_cors_config",
]
