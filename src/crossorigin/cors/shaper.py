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
"""ResponseShaper — turns a PolicyDecision into response headers."""

from __future__ import annotations

from typing import assert_never

from crossorigin.cors.config import CORSConfig
from crossorigin.cors.decision import Actual, NoOrigin, PolicyDecision, Preflight
from crossorigin.web.ports.outbound import CorsResponse

ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOW_HEADERS = "Access-Control-Allow-Headers"
ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
EXPOSE_HEADERS = "Access-Control-Expose-Headers"
MAX_AGE = "Access-Control-Max-Age"

DEFAULT_ACCEPT_HEADERS: tuple[str, ...] = (
    "Accept",
    "Authorization",
    "Content-Type",
    "Origin",
    "X-Requested-With",
)

PREFLIGHT_STATUS = 200


def allowed_headers(config: CORSConfig) -> tuple[str, ...]:
    """Baseline accept headers followed by the configured extras, without duplicates."""
    merged = list(DEFAULT_ACCEPT_HEADERS)
    seen = {name.lower() for name in merged}
    for name in config.headers:
        if name.lower() not in seen:
            seen.add(name.lower())
            merged.append(name)
    return tuple(merged)


def shape(decision: PolicyDecision, config: CORSConfig, response: CorsResponse) -> None:
    """Apply *decision* to *response*."""
    match decision:
        case NoOrigin():
            return
        case Preflight():
            shape_preflight(decision, config, response)
        case Actual():
            shape_actual(decision, config, response)
        case _:
            assert_never(decision)


def shape_preflight(decision: Preflight, config: CORSConfig, response: CorsResponse) -> None:
    """Write the preflight headers and halt with an empty 200."""
    response.set_header(ALLOW_METHODS, ",".join(config.methods))
    response.set_header(ALLOW_HEADERS, ",".join(allowed_headers(config)))
    if decision.allowed:
        # Always the literal origin, never "*": required when credentials are on.
        response.set_header(ALLOW_ORIGIN, decision.origin)
    if config.supports_credentials:
        response.set_header(ALLOW_CREDENTIALS, "true")
    if config.max_age > 0:
        response.set_header(MAX_AGE, str(config.max_age))
    response.halt(PREFLIGHT_STATUS)


def shape_actual(decision: Actual, config: CORSConfig, response: CorsResponse) -> None:
    """Write the actual-request headers; the request carries on downstream."""
    if decision.allowed:
        response.set_header(ALLOW_ORIGIN, decision.origin)
        if config.supports_credentials:
            response.set_header(ALLOW_CREDENTIALS, "true")
    if config.expose_headers:
        response.set_header(EXPOSE_HEADERS, ",".join(config.expose_headers))
