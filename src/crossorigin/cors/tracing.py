# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""CorsTracer — diagnostic tracing gated by the ``debug`` CORS option."""

from __future__ import annotations

from typing import Any

from crossorigin.cors.decision import Actual, PolicyDecision, Preflight
from crossorigin.cors.request import RequestView
from crossorigin.logging.port import LoggingPort
from crossorigin.logging.structlog_adapter import CORS_LOGGER, StructlogAdapter

LOGGER_NAME = CORS_LOGGER


class CorsTracer:
    """Emits debug events about CORS handling when enabled.

    Loggers come from *logging_port* (a fresh :class:`StructlogAdapter`
    when omitted) under the ``crossorigin.cors`` name; an explicit *logger*
    bypasses the port. Every method returns immediately when tracing is off,
    so a disabled tracer costs one attribute check per call.
    """

    __slots__ = ("_enabled", "_logger")

    def __init__(
        self,
        enabled: bool = False,
        logger: Any = None,
        logging_port: LoggingPort | None = None,
    ) -> None:
        self._enabled = enabled
        if logger is None:
            port = logging_port if logging_port is not None else StructlogAdapter()
            logger = port.get_logger(LOGGER_NAME)
        self._logger = logger

    @property
    def enabled(self) -> bool:
        return self._enabled

    def request(self, request: RequestView) -> None:
        if not self._enabled:
            return
        self._logger.debug(
            "cors_request",
            method=request.method,
            origin=request.origin,
            request_method=request.request_method,
            request_headers=request.request_headers,
        )

    def decision(self, decision: PolicyDecision) -> None:
        if not self._enabled:
            return
        if isinstance(decision, Preflight):
            self._logger.debug("cors_preflight_detected", origin=decision.origin, allowed=decision.allowed)
        elif isinstance(decision, Actual):
            self._logger.debug("cors_actual_detected", origin=decision.origin, allowed=decision.allowed)
        else:
            return
        if not decision.allowed:
            self._logger.debug("cors_origin_denied", origin=decision.origin)
