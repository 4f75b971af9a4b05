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
"""CORS policy: origin matching, request classification, decisions, and shaping."""

from crossorigin.cors.classifier import is_preflight
from crossorigin.cors.config import (
    DEFAULT_METHODS,
    WILDCARD_ALL,
    CORSConfig,
    resolve_cors_config,
)
from crossorigin.cors.decision import Actual, NoOrigin, PolicyDecision, Preflight
from crossorigin.cors.engine import CorsPolicyEngine, decide
from crossorigin.cors.matcher import origin_matches
from crossorigin.cors.request import RequestView
from crossorigin.cors.shaper import DEFAULT_ACCEPT_HEADERS, shape
from crossorigin.cors.tracing import CorsTracer

__all__ = [
    "DEFAULT_ACCEPT_HEADERS",
    "DEFAULT_METHODS",
    "WILDCARD_ALL",
    "Actual",
    "CORSConfig",
    "CorsPolicyEngine",
    "CorsTracer",
    "NoOrigin",
    "PolicyDecision",
    "Preflight",
    "RequestView",
    "decide",
    "is_preflight",
    "origin_matches",
    "resolve_cors_config",
    "shape",
]
