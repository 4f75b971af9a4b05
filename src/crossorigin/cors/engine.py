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
"""PolicyEngine — classifies a request and evaluates its origin."""

from __future__ import annotations

from crossorigin.cors.classifier import is_preflight
from crossorigin.cors.config import CORSConfig
from crossorigin.cors.decision import Actual, NoOrigin, PolicyDecision, Preflight
from crossorigin.cors.matcher import origin_matches
from crossorigin.cors.request import RequestView
from crossorigin.cors.shaper import shape
from crossorigin.cors.tracing import CorsTracer
from crossorigin.logging.port import LoggingPort
from crossorigin.web.ports.outbound import CorsResponse


def decide(request: RequestView, config: CORSConfig) -> PolicyDecision:
    """Decide how the response to *request* should be shaped.

    A missing ``Origin`` header short-circuits to :class:`NoOrigin` before
    any classification. A denied origin still yields a decision; enforcement
    is left to the browser.
    """
    if request.origin is None:
        return NoOrigin()

    # An empty Origin value is present but can never be allowed.
    allowed = bool(request.origin) and origin_matches(request.origin, config.origins)
    if is_preflight(request.method, request.headers):
        return Preflight(origin=request.origin, allowed=allowed)
    return Actual(origin=request.origin, allowed=allowed)


class CorsPolicyEngine:
    """A resolved :class:`CORSConfig` bound to a tracer.

    The tracer is built from *logging_port* unless one is passed in.

    Stateless between requests and safe to share across concurrent
    request-handling contexts.
    """

    def __init__(
        self,
        config: CORSConfig,
        tracer: CorsTracer | None = None,
        logging_port: LoggingPort | None = None,
    ) -> None:
        self._config = config
        if tracer is None:
            tracer = CorsTracer(enabled=config.debug, logging_port=logging_port)
        self._tracer = tracer

    @property
    def config(self) -> CORSConfig:
        return self._config

    def decide(self, request: RequestView) -> PolicyDecision:
        self._tracer.request(request)
        decision = decide(request, self._config)
        self._tracer.decision(decision)
        return decision

    def handle(self, request: RequestView, response: CorsResponse) -> PolicyDecision:
        """Decide for *request* and write the result to *response*."""
        decision = self.decide(request)
        shape(decision, self._config, response)
        return decision
