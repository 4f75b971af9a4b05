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
"""PolicyDecision — what the engine decided for a single request."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NoOrigin:
    """No ``Origin`` header: the request passes through untouched."""


@dataclass(frozen=True)
class Preflight:
    """A CORS preflight; always answered directly with an empty 200."""

    origin: str
    allowed: bool


@dataclass(frozen=True)
class Actual:
    """A cross-origin request that continues to the application."""

    origin: str
    allowed: bool


PolicyDecision = NoOrigin | Preflight | Actual
