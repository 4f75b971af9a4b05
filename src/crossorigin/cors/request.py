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
"""RequestView — read-only projection of the inbound request."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

ORIGIN = "Origin"
REQUEST_METHOD = "Access-Control-Request-Method"
REQUEST_HEADERS = "Access-Control-Request-Headers"


def get_header(headers: Mapping[str, str] | Iterable[tuple[Any, Any]], name: str) -> str | None:
    """Case-insensitive header lookup; first value wins.

    Accepts a mapping (Starlette ``Headers``, plain ``dict``) or a raw ASGI
    header list of ``(bytes, bytes)`` pairs. Returns ``None`` when absent.
    """
    wanted = name.lower()
    pairs = headers.items() if isinstance(headers, Mapping) else headers
    for key, value in pairs:
        if isinstance(key, bytes):
            key = key.decode("latin-1")
        if key.lower() == wanted:
            return value.decode("latin-1") if isinstance(value, bytes) else value
    return None


@dataclass(frozen=True)
class RequestView:
    """The parts of a request the CORS policy reads."""

    method: str
    origin: str | None = None
    request_method: str | None = None
    request_headers: str | None = None

    @property
    def has_origin(self) -> bool:
        return self.origin is not None

    @property
    def headers(self) -> dict[str, str]:
        """The CORS request headers that were present, by canonical name."""
        present = (
            (ORIGIN, self.origin),
            (REQUEST_METHOD, self.request_method),
            (REQUEST_HEADERS, self.request_headers),
        )
        return {name: value for name, value in present if value is not None}

    @classmethod
    def from_headers(
        cls, method: str, headers: Mapping[str, str] | Iterable[tuple[Any, Any]]
    ) -> RequestView:
        # Raw ASGI header lists are iterated once per lookup.
        if not isinstance(headers, Mapping):
            headers = list(headers)
        return cls(
            method=method,
            origin=get_header(headers, ORIGIN),
            request_method=get_header(headers, REQUEST_METHOD),
            request_headers=get_header(headers, REQUEST_HEADERS),
        )
