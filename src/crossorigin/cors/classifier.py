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
"""Preflight request classification."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from crossorigin.cors.request import REQUEST_METHOD, get_header

PREFLIGHT_METHOD = "OPTIONS"


def is_preflight(method: str, headers: Mapping[str, str] | Iterable[tuple[Any, Any]]) -> bool:
    """Return ``True`` for an ``OPTIONS`` request carrying a non-empty
    ``Access-Control-Request-Method`` header.

    The method token is compared exactly; ``options`` is not a preflight.
    """
    if method != PREFLIGHT_METHOD:
        return False
    return bool(get_header(headers, REQUEST_METHOD))
