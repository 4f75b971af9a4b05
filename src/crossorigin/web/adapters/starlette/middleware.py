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
"""CORS middleware for Starlette — pure ASGI."""

from __future__ import annotations

from typing import Any

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Receive, Scope, Send

from crossorigin.core.config import Config
from crossorigin.cors.config import CORSConfig, resolve_cors_config
from crossorigin.cors.decision import NoOrigin
from crossorigin.cors.engine import CorsPolicyEngine
from crossorigin.cors.request import RequestView
from crossorigin.logging.port import LoggingPort
from crossorigin.logging.structlog_adapter import CORS_LOGGER, StructlogAdapter
from crossorigin.web.adapters.starlette.response import HeaderCollector


class CORSMiddleware:
    """Applies the CORS policy to every HTTP request.

    Configuration is resolved once, here: either a ready :class:`CORSConfig`
    or call-site ``options`` layered over *settings* (the bundled defaults
    when omitted). Wrap each ``Mount`` in its own instance to give a mount
    point its own policy.

    Tracing goes through *logging_port*. When none is given and the
    resolved config has ``debug`` on, a :class:`StructlogAdapter` is
    configured from *settings* so the ``cors_*`` events are emitted.

    Uses raw ASGI protocol instead of ``BaseHTTPMiddleware`` so preflights
    can be answered without entering the application and actual responses
    (including streaming ones) only have their start message touched.
    """

    def __init__(
        self,
        app: ASGIApp,
        config: CORSConfig | None = None,
        settings: Config | None = None,
        logging_port: LoggingPort | None = None,
        **options: Any,
    ) -> None:
        if config is not None and options:
            raise ValueError("Pass either a CORSConfig or individual CORS options, not both")
        self.app = app
        if config is None:
            config = resolve_cors_config(options, settings)
        if logging_port is None and config.debug:
            logging_port = StructlogAdapter()
            logging_port.configure(settings if settings is not None else Config.defaults())
            if CORS_LOGGER not in logging_port.levels:
                logging_port.set_level(CORS_LOGGER, "DEBUG")
        self._engine = CorsPolicyEngine(config, logging_port=logging_port)

    @property
    def config(self) -> CORSConfig:
        return self._engine.config

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = RequestView.from_headers(scope["method"], Headers(scope=scope))
        collector = HeaderCollector()
        decision = self._engine.handle(request, collector)

        if isinstance(decision, NoOrigin):
            await self.app(scope, receive, send)
            return

        if collector.halted:
            response = collector.to_response()
            await response(scope, receive, send)
            return

        async def send_with_cors(message: Any) -> None:
            if message["type"] == "http.response.start":
                # headers is optional on the start message
                message.setdefault("headers", [])
                collector.apply_to(MutableHeaders(scope=message))
            await send(message)

        await self.app(scope, receive, send_with_cors)
