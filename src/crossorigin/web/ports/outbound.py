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
"""Outbound port: the host response surface the CORS shaper writes to."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CorsResponse(Protocol):
    """Write access to the outgoing response.

    Any host adapter (ASGI, WSGI, a test double) implements this protocol.
    """

    def set_header(self, name: str, value: str) -> None:
        """Set a response header, replacing any existing value."""
        ...

    def halt(self, status_code: int) -> None:
        """Answer immediately with *status_code* and an empty body.

        Nothing downstream of the CORS layer runs once this is called.
        """
        ...
